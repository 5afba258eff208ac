"""Read-only lens lookup plus helpers for loading lens files and theming."""

from __future__ import annotations

from dataclasses import dataclass
import json
import logging
from pathlib import Path
import re
from typing import Iterable

from myct.lens.defaults import builtin_lenses
from myct.lens.models import LensDocument

logger = logging.getLogger(__name__)

_SLUG_SPACE_RE = re.compile(r"\s+")


@dataclass(slots=True)
class LensLoadError(Exception):
    """Raised when a lens file cannot be read or is not a JSON object."""

    path: Path
    message: str

    def __str__(self) -> str:
        return f"{self.message} (path={self.path})"


def lens_slug(name: str) -> str:
    return _SLUG_SPACE_RE.sub("-", name.strip().lower())


def css_variables(lens: LensDocument) -> dict[str, str]:
    """Map global colours to ``--color-<key>`` custom properties."""

    return {f"--color-{key}": value for key, value in lens.globals.colors.items()}


def load_lens_file(path: str | Path) -> LensDocument:
    source = Path(path)
    try:
        raw = source.read_text(encoding="utf-8")
    except OSError as exc:
        raise LensLoadError(source, f"Failed to read lens file: {exc}") from exc

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise LensLoadError(source, f"Lens file is not valid JSON: {exc}") from exc

    if not isinstance(data, dict):
        raise LensLoadError(source, "Lens file must contain a JSON object")

    lens = LensDocument.from_dict(data)
    logger.debug("Loaded lens %r with %d rules from %s", lens.name, len(lens.rules), source)
    return lens


class LensRegistry:
    """Lenses keyed by name and slug, in registration order."""

    def __init__(self, lenses: Iterable[LensDocument]) -> None:
        self._lenses: list[LensDocument] = []
        self._by_key: dict[str, LensDocument] = {}
        for lens in lenses:
            slug = lens_slug(lens.name)
            if slug in self._by_key:
                raise ValueError(f"Duplicate lens name: {lens.name}")
            self._lenses.append(lens)
            self._by_key[slug] = lens

    @classmethod
    def default(cls) -> "LensRegistry":
        return cls(builtin_lenses())

    def __len__(self) -> int:
        return len(self._lenses)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and lens_slug(key) in self._by_key

    def names(self) -> list[str]:
        return [lens.name for lens in self._lenses]

    def first(self) -> LensDocument:
        if not self._lenses:
            raise KeyError("No lenses registered")
        return self._lenses[0]

    def get(self, key: str) -> LensDocument:
        """Look a lens up by display name or slug."""

        lens = self._by_key.get(lens_slug(key))
        if lens is None:
            raise KeyError(f"Unknown lens: {key}")
        return lens
