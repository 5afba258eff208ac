"""Regex-driven HTML content extraction into MYCT nodes."""

from .extractor import ExtractedPage, extract_content
from .links import MAX_LINKS, PageLink
from .text import clean_fragment, clean_text, decode_entities, strip_tags
from .urls import UrlResolutionError, resolve_url

__all__ = [
    "ExtractedPage",
    "MAX_LINKS",
    "PageLink",
    "UrlResolutionError",
    "clean_fragment",
    "clean_text",
    "decode_entities",
    "extract_content",
    "resolve_url",
    "strip_tags",
]
