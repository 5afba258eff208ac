"""Page-fetch collaborator: one HTTP GET, mapped to HTML or a readable error."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import re
from typing import Any, Protocol, runtime_checkable

from charset_normalizer import from_bytes
import requests

from myct.translator.config import TranslatorSettings

logger = logging.getLogger(__name__)

_CHARSET_RE = re.compile(r"charset\s*=\s*[\"']?([\w.:\-]+)", re.IGNORECASE)
_HTML_CONTENT_TYPES = ("text/html", "application/xhtml")
_ACCEPT = "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8"

TIMEOUT_MESSAGE = "Request timeout - the website took too long to respond"
_STATUS_MESSAGES = {
    403: "Access denied - the website is blocking automated requests",
    404: "Page not found (404)",
    429: "Too many requests - the website is rate limiting",
    503: "Service unavailable - the website may be down",
}


@dataclass(slots=True)
class FetchError(Exception):
    """Fetch failure carrying a message fit to show to the user as-is."""

    url: str
    message: str
    status_code: int | None = None

    def __str__(self) -> str:
        return f"{self.message} (url={self.url})"


@dataclass(frozen=True, slots=True)
class FetchedPage:
    html: str
    content_type: str
    final_url: str


@runtime_checkable
class PageFetcher(Protocol):
    """Contract for anything that can turn an absolute URL into HTML."""

    def fetch(self, url: str) -> FetchedPage:
        """Return the page or raise FetchError."""


def describe_http_status(status_code: int, reason: str | None = None) -> str:
    message = _STATUS_MESSAGES.get(status_code)
    if message is not None:
        return message
    if status_code >= 500:
        return "Server error - the website is experiencing issues"
    detail = f"{status_code} {reason}" if reason else str(status_code)
    return f"Failed to fetch ({detail})"


def is_html_content_type(content_type: str) -> bool:
    lowered = content_type.lower()
    return any(kind in lowered for kind in _HTML_CONTENT_TYPES)


def _declared_charset(content_type: str) -> str | None:
    match = _CHARSET_RE.search(content_type)
    return match.group(1) if match else None


def decode_body(raw: bytes, content_type: str = "") -> str:
    """Decode with the declared charset, else a detected one, else lenient UTF-8."""

    if not raw:
        return ""

    declared = _declared_charset(content_type)
    if declared:
        try:
            return raw.decode(declared)
        except (LookupError, UnicodeDecodeError):
            logger.debug("Declared charset %s failed, detecting instead", declared)

    best = from_bytes(raw).best()
    if best and best.encoding:
        try:
            return raw.decode(best.encoding)
        except (LookupError, UnicodeDecodeError):
            pass
    return raw.decode("utf-8", errors="replace")


class HttpPageFetcher:
    """``requests``-backed fetcher; exactly one request per call, no retries."""

    def __init__(self, settings: TranslatorSettings | None = None, *, session: Any | None = None) -> None:
        self._settings = settings or TranslatorSettings()
        self._session = session or requests.Session()

    @property
    def settings(self) -> TranslatorSettings:
        return self._settings

    def _headers(self) -> dict[str, str]:
        return {
            "User-Agent": self._settings.user_agent,
            "Accept": _ACCEPT,
            "Accept-Language": self._settings.accept_language,
            "Cache-Control": "no-cache",
            "Pragma": "no-cache",
        }

    def fetch(self, url: str) -> FetchedPage:
        logger.debug("Fetching %s (timeout=%ss)", url, self._settings.fetch_timeout_seconds)
        try:
            response = self._session.get(
                url,
                headers=self._headers(),
                timeout=self._settings.fetch_timeout_seconds,
                allow_redirects=True,
            )
        except requests.Timeout as exc:
            raise FetchError(url, TIMEOUT_MESSAGE) from exc
        except requests.RequestException as exc:
            raise FetchError(url, f"Network error: {exc}") from exc
        except ValueError as exc:
            # urllib3 raises LocationParseError (a ValueError) for hosts it cannot encode.
            raise FetchError(url, f"Network error: {exc}") from exc

        status_code = response.status_code
        if not 200 <= status_code < 300:
            raise FetchError(url, describe_http_status(status_code, response.reason), status_code=status_code)

        content_type = response.headers.get("Content-Type") or ""
        if not is_html_content_type(content_type):
            raise FetchError(
                url,
                f"Unsupported content type: {content_type or 'unknown'}. Only HTML pages are supported.",
                status_code=status_code,
            )

        html = decode_body(response.content, content_type)
        final_url = response.url or url
        logger.debug("Fetched %d characters from %s", len(html), final_url)
        return FetchedPage(html=html, content_type=content_type, final_url=final_url)
