"""Outbound link extraction."""

from __future__ import annotations

from dataclasses import dataclass
import logging

from myct.extraction.tags import element_pattern, parse_attributes
from myct.extraction.text import clean_fragment
from myct.extraction.urls import UrlResolutionError, resolve_url

logger = logging.getLogger(__name__)

_ANCHOR_RE = element_pattern("a")

MAX_LINKS = 200


@dataclass(frozen=True, slots=True)
class PageLink:
    text: str
    url: str

    def to_dict(self) -> dict[str, str]:
        return {"text": self.text, "url": self.url}


def _is_followable(href: str) -> bool:
    value = href.strip()
    if not value or value.startswith("#"):
        return False
    return not value.lower().startswith("javascript:")


def scan_links(html: str, base_url: str, *, limit: int = MAX_LINKS) -> list[PageLink]:
    """Anchors with a followable ``href`` and visible text, first ``limit`` in document order."""

    links: list[PageLink] = []
    for match in _ANCHOR_RE.finditer(html):
        if len(links) >= limit:
            break
        href = parse_attributes(match.group(1)).get("href")
        if href is None or not _is_followable(href):
            continue
        text = clean_fragment(match.group(2))
        if not text:
            continue
        try:
            url = resolve_url(href, base_url)
        except UrlResolutionError as exc:
            logger.debug("Skipping unresolvable link %r: %s", href, exc)
            continue
        links.append(PageLink(text=text, url=url))
    return links
