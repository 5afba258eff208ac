"""Resolution of ``src``/``href`` attribute values to absolute URLs."""

from __future__ import annotations

import re
from urllib.parse import urljoin, urlsplit

from myct.extraction.text import decode_entities

_SCHEME_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.\-]*:")


class UrlResolutionError(ValueError):
    """Raised when an attribute value cannot be made absolute."""


def _split_base(base: str) -> tuple[str, str]:
    try:
        parts = urlsplit(base)
    except ValueError as exc:
        raise UrlResolutionError(f"Invalid base URL: {base!r}") from exc
    if not parts.scheme or not parts.netloc:
        raise UrlResolutionError(f"Base URL must be absolute: {base!r}")
    return parts.scheme, parts.netloc


def resolve_url(raw: str, base: str) -> str:
    """Resolve ``raw`` against ``base``.

    ``data:`` URIs and URLs that already carry a scheme are returned as-is,
    ``//host/...`` borrows the base scheme, ``/path`` borrows the base scheme
    and host, and anything else is joined as a relative reference.
    """
    value = decode_entities(raw).strip()
    if not value:
        raise UrlResolutionError("Empty URL")

    if value.lower().startswith("data:"):
        return value

    if value.startswith("//"):
        scheme, _ = _split_base(base)
        resolved = f"{scheme}:{value}"
    elif value.startswith("/"):
        scheme, host = _split_base(base)
        resolved = f"{scheme}://{host}{value}"
    elif _SCHEME_RE.match(value):
        resolved = value
    else:
        _split_base(base)
        try:
            resolved = urljoin(base, value)
        except ValueError as exc:
            raise UrlResolutionError(f"Cannot resolve {value!r} against {base!r}") from exc

    try:
        urlsplit(resolved)
    except ValueError as exc:
        raise UrlResolutionError(f"Malformed URL: {resolved!r}") from exc
    return resolved


def url_host(url: str) -> str | None:
    try:
        host = urlsplit(url).hostname
    except ValueError:
        return None
    return host.lower() if host else None
