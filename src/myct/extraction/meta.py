"""Page-level metadata: title, description and author."""

from __future__ import annotations

from dataclasses import dataclass

from myct.extraction.tags import element_pattern, parse_attributes, void_pattern
from myct.extraction.text import clean_fragment, clean_text

_TITLE_RE = element_pattern("title")
_META_RE = void_pattern("meta")


@dataclass(slots=True)
class PageMeta:
    title: str | None = None
    description: str | None = None
    author: str | None = None


def find_meta(html: str, key: str) -> str | None:
    """Content of the first ``<meta>`` whose ``name`` or ``property`` equals ``key``."""

    wanted = key.lower()
    for match in _META_RE.finditer(html):
        attributes = parse_attributes(match.group(1))
        label = attributes.get("name") or attributes.get("property")
        if not label or label.strip().lower() != wanted:
            continue
        content = clean_text(attributes.get("content", ""))
        if content:
            return content
    return None


def find_title(html: str) -> str | None:
    match = _TITLE_RE.search(html)
    if match is None:
        return None
    return clean_fragment(match.group(2)) or None


def extract_page_meta(html: str) -> PageMeta:
    return PageMeta(
        title=find_title(html) or find_meta(html, "og:title"),
        description=find_meta(html, "description") or find_meta(html, "og:description"),
        author=find_meta(html, "author"),
    )
