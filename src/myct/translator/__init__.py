"""Page translation: fetch, extract, assemble."""

from .config import TranslatorSettings
from .fetch import FetchedPage, FetchError, HttpPageFetcher, PageFetcher, describe_http_status
from .translator import PageTranslator, TranslationResult, build_root, normalize_url, translate

__all__ = [
    "FetchError",
    "FetchedPage",
    "HttpPageFetcher",
    "PageFetcher",
    "PageTranslator",
    "TranslationResult",
    "TranslatorSettings",
    "build_root",
    "describe_http_status",
    "normalize_url",
    "translate",
]
