"""URL to MYCT document translation."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
import logging
from typing import Any, Callable

from myct.extraction.extractor import ExtractedPage, extract_content
from myct.model.document import Document, DocumentMetadata
from myct.model.nodes import MyctNode, StackNode, link_node, stack_node, text_node
from myct.translator.config import TranslatorSettings
from myct.translator.fetch import FetchError, HttpPageFetcher, PageFetcher

logger = logging.getLogger(__name__)

MAX_LINK_NODES = 50
LINKS_SECTION_TITLE = "Links on this page"
URL_REQUIRED_MESSAGE = "URL is required"
TRANSLATION_FAILED_MESSAGE = "Translation failed"


def normalize_url(url: str) -> str:
    """Trim and default the scheme to https."""

    normalized = url.strip()
    if not normalized.lower().startswith(("http://", "https://")):
        normalized = f"https://{normalized}"
    return normalized


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(slots=True)
class TranslationResult:
    """Either a document or a user-facing error message."""

    document: Document | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.document is not None

    def to_dict(self) -> dict[str, Any]:
        return {
            "document": self.document.to_dict() if self.document is not None else None,
            "error": self.error,
        }


def build_root(page: ExtractedPage) -> StackNode:
    """Assemble the page stack: title, description, author, content, links."""

    children: list[MyctNode] = []
    if page.title:
        children.append(text_node(page.title, "page-title"))
    if page.description:
        children.append(text_node(page.description, "page-description"))
    if page.author:
        children.append(text_node(f"By {page.author}", "page-author"))

    children.extend(page.content)

    if page.links:
        link_nodes = [link_node(link.url, link.text, "document-link") for link in page.links[:MAX_LINK_NODES]]
        children.append(stack_node([text_node(LINKS_SECTION_TITLE, "section-title"), *link_nodes], "links-section"))

    return stack_node(children, "page")


class PageTranslator:
    """Fetch a URL once, extract its content and wrap it into a Document."""

    def __init__(self, fetcher: PageFetcher, *, now: Callable[[], datetime] = _utc_now) -> None:
        self._fetcher = fetcher
        self._now = now

    def translate(self, url: str) -> TranslationResult:
        if not url or not url.strip():
            return TranslationResult(error=URL_REQUIRED_MESSAGE)

        normalized = normalize_url(url)
        logger.info("Translating %s", normalized)

        try:
            fetched = self._fetcher.fetch(normalized)
        except FetchError as exc:
            logger.warning("Fetch failed for %s: %s", normalized, exc.message)
            return TranslationResult(error=exc.message)
        except Exception as exc:
            logger.exception("Unexpected failure while fetching %s", normalized)
            return TranslationResult(error=str(exc) or TRANSLATION_FAILED_MESSAGE)

        page = extract_content(fetched.html, fetched.final_url)
        logger.info(
            "Translated %s: %d content nodes, %d links",
            fetched.final_url,
            len(page.content),
            len(page.links),
        )

        document = Document(
            root=build_root(page),
            metadata=DocumentMetadata(
                source=fetched.final_url,
                timestamp=self._now().isoformat(),
                title=page.title,
                description=page.description,
            ),
        )
        return TranslationResult(document=document)


def translate(url: str, fetcher: PageFetcher | None = None) -> TranslationResult:
    """Translate ``url`` with ``fetcher`` or an HTTP fetcher configured from the environment."""

    if fetcher is None:
        fetcher = HttpPageFetcher(TranslatorSettings.from_env())
    return PageTranslator(fetcher).translate(url)
