"""HTML to MYCT content extraction.

This is a best-effort regex extractor, not a DOM parser: tags are matched
independently and nesting is ignored, so malformed markup degrades into a
sparse result instead of an error.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Any

from myct.extraction.blocks import (
    group_into_sections,
    scan_fallback_blocks,
    scan_headings,
    scan_lists,
    scan_paragraphs,
    scan_quotes,
    scan_tables,
)
from myct.extraction.links import PageLink, scan_links
from myct.extraction.media import scan_audio, scan_embeds, scan_images, scan_videos
from myct.extraction.meta import extract_page_meta
from myct.extraction.tags import remove_non_content
from myct.model.nodes import MyctNode

logger = logging.getLogger(__name__)

FALLBACK_NODE_THRESHOLD = 5


@dataclass(slots=True)
class ExtractedPage:
    """Everything pulled out of one HTML page, in emission order."""

    content: list[MyctNode] = field(default_factory=list)
    links: list[PageLink] = field(default_factory=list)
    title: str | None = None
    description: str | None = None
    author: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "author": self.author,
            "content": [node.to_dict() for node in self.content],
            "links": [link.to_dict() for link in self.links],
        }


def extract_content(html: str, base_url: str) -> ExtractedPage:
    """Extract metadata, sectioned content, media and links from ``html``.

    Output order: sectioned text blocks, then tables, images, videos,
    iframe embeds and audio, each in scan order.  When the structured
    passes find fewer than five nodes, substantial container text is
    appended as a fallback.
    """
    meta = extract_page_meta(html)
    cleaned = remove_non_content(html)

    positioned = scan_headings(cleaned) + scan_paragraphs(cleaned) + scan_lists(cleaned) + scan_quotes(cleaned)
    media: list[MyctNode] = [
        *scan_tables(cleaned),
        *scan_images(cleaned, base_url),
        *scan_videos(cleaned, base_url),
        *scan_embeds(cleaned, base_url),
        *scan_audio(cleaned, base_url),
    ]

    content = group_into_sections(positioned) + media
    structured_count = len(positioned) + len(media)
    logger.debug(
        "Structured extraction for %s: %d blocks, %d media/table nodes",
        base_url,
        len(positioned),
        len(media),
    )

    if structured_count < FALLBACK_NODE_THRESHOLD:
        fallback = scan_fallback_blocks(cleaned)
        logger.debug("Sparse extraction (%d nodes), fallback added %d blocks", structured_count, len(fallback))
        content.extend(fallback)

    links = scan_links(cleaned, base_url)

    return ExtractedPage(
        content=content,
        links=links,
        title=meta.title,
        description=meta.description,
        author=meta.author,
    )
