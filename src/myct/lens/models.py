"""Lens documents: named style themes applied to MYCT trees at render time.

A lens is static configuration.  Its ``rules`` are an ordered list and the
order is part of the authoring contract: when several rules match a node,
later rules overwrite earlier ones key by key.  There is no specificity
scoring.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping

StyleProps = dict[str, Any]


class NodeState(Enum):
    NORMAL = "normal"
    HOVER = "hover"
    ACTIVE = "active"
    EXPANDED = "expanded"


class Device(Enum):
    MOBILE = "mobile"
    DESKTOP = "desktop"


@dataclass(frozen=True, slots=True)
class LensTarget:
    """Rule predicate; ``None`` fields match anything."""

    type: str | None = None
    role: str | None = None
    state: str | None = None
    device: str | None = None


@dataclass(frozen=True, slots=True)
class LensRule:
    target: LensTarget
    styles: StyleProps


@dataclass(frozen=True, slots=True)
class Typography:
    font_family: str | None = None
    font_size: float | None = None
    line_height: float | None = None


@dataclass(frozen=True, slots=True)
class ResponsiveOverride:
    spacing: float | None = None
    font_size: float | None = None


@dataclass(frozen=True, slots=True)
class LensGlobals:
    colors: dict[str, str] = field(default_factory=dict)
    spacing: dict[str, float] = field(default_factory=dict)
    typography: Typography | None = None
    mobile: ResponsiveOverride | None = None
    desktop: ResponsiveOverride | None = None

    def responsive_for(self, is_mobile: bool) -> ResponsiveOverride | None:
        return self.mobile if is_mobile else self.desktop


@dataclass(frozen=True, slots=True)
class LensDocument:
    name: str
    globals: LensGlobals = field(default_factory=LensGlobals)
    rules: tuple[LensRule, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LensDocument":
        """Parse the lens authoring format, dropping malformed optional parts."""

        source = _as_mapping(data)
        name = _as_text(source.get("name")) or "Untitled"
        return cls(
            name=name,
            globals=_parse_globals(source.get("globals")),
            rules=_parse_rules(source.get("rules")),
        )


def _as_mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def _as_text(value: Any) -> str | None:
    if isinstance(value, str) and value.strip():
        return value
    return None


def _as_number(value: Any) -> float | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value


def _parse_typography(raw: Any) -> Typography | None:
    if not isinstance(raw, Mapping):
        return None
    return Typography(
        font_family=_as_text(raw.get("fontFamily")),
        font_size=_as_number(raw.get("fontSize")),
        line_height=_as_number(raw.get("lineHeight")),
    )


def _parse_responsive(raw: Any) -> ResponsiveOverride | None:
    if not isinstance(raw, Mapping):
        return None
    return ResponsiveOverride(spacing=_as_number(raw.get("spacing")), font_size=_as_number(raw.get("fontSize")))


def _parse_globals(raw: Any) -> LensGlobals:
    source = _as_mapping(raw)
    colors = {str(key): value for key, value in _as_mapping(source.get("colors")).items() if isinstance(value, str)}
    spacing = {
        str(key): number
        for key, number in ((key, _as_number(value)) for key, value in _as_mapping(source.get("spacing")).items())
        if number is not None
    }
    responsive = _as_mapping(source.get("responsive"))
    return LensGlobals(
        colors=colors,
        spacing=spacing,
        typography=_parse_typography(source.get("typography")),
        mobile=_parse_responsive(responsive.get("mobile")),
        desktop=_parse_responsive(responsive.get("desktop")),
    )


def _parse_rules(raw: Any) -> tuple[LensRule, ...]:
    if not isinstance(raw, (list, tuple)):
        return ()

    rules: list[LensRule] = []
    for item in raw:
        if not isinstance(item, Mapping):
            continue
        styles = item.get("styles")
        if not isinstance(styles, Mapping):
            continue
        target = _as_mapping(item.get("target"))
        rules.append(
            LensRule(
                target=LensTarget(
                    type=_as_text(target.get("type")),
                    role=_as_text(target.get("role")),
                    state=_as_text(target.get("state")),
                    device=_as_text(target.get("device")),
                ),
                styles=dict(styles),
            )
        )
    return tuple(rules)
