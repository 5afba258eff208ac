"""Image, video, embed and audio scanners.

Every emitted ``src`` is absolute.  An element whose source cannot be
resolved is skipped without affecting the rest of the page.
"""

from __future__ import annotations

import logging
import re

from myct.extraction.tags import element_pattern, parse_attributes, void_pattern
from myct.extraction.text import clean_text
from myct.extraction.urls import UrlResolutionError, resolve_url, url_host
from myct.model.nodes import AudioNode, ImageNode, VideoNode, audio_node, image_node, video_node

logger = logging.getLogger(__name__)

_IMAGE_RE = void_pattern("img")
_VIDEO_RE = element_pattern("video")
_AUDIO_RE = element_pattern("audio")
_SOURCE_RE = void_pattern("source")
_IFRAME_RE = void_pattern("iframe")
_DIMENSION_RE = re.compile(r"^\s*(\d+)")

EMBED_HOSTS = ("youtube.com", "youtu.be", "vimeo.com")


def _dimension(raw: str | None) -> int | None:
    if raw is None:
        return None
    match = _DIMENSION_RE.match(raw)
    return int(match.group(1)) if match else None


def _optional_text(raw: str | None) -> str | None:
    if raw is None:
        return None
    return clean_text(raw) or None


def _try_resolve(raw: str | None, base_url: str) -> str | None:
    if not raw:
        return None
    try:
        return resolve_url(raw, base_url)
    except UrlResolutionError as exc:
        logger.debug("Skipping unresolvable media URL %r: %s", raw, exc)
        return None


def _media_source(attributes: dict[str, str], inner_html: str, base_url: str) -> str | None:
    """``src`` on the element itself, else the first nested ``<source src>``."""

    candidates = [attributes.get("src")]
    for match in _SOURCE_RE.finditer(inner_html):
        source_src = parse_attributes(match.group(1)).get("src")
        if source_src:
            candidates.append(source_src)
            break
    for candidate in candidates:
        resolved = _try_resolve(candidate, base_url)
        if resolved:
            return resolved
    return None


def scan_images(html: str, base_url: str) -> list[ImageNode]:
    images: list[ImageNode] = []
    for match in _IMAGE_RE.finditer(html):
        attributes = parse_attributes(match.group(1))
        src = _try_resolve(attributes.get("src"), base_url)
        if src is None:
            continue
        images.append(
            image_node(
                src,
                alt=_optional_text(attributes.get("alt")),
                width=_dimension(attributes.get("width")),
                height=_dimension(attributes.get("height")),
                role="image",
            )
        )
    return images


def scan_videos(html: str, base_url: str) -> list[VideoNode]:
    videos: list[VideoNode] = []
    for match in _VIDEO_RE.finditer(html):
        attributes = parse_attributes(match.group(1))
        src = _media_source(attributes, match.group(2), base_url)
        if src is None:
            continue
        poster = _try_resolve(attributes.get("poster"), base_url)
        videos.append(video_node(src, poster=poster, role="video"))
    return videos


def is_embed_host(url: str) -> bool:
    host = url_host(url)
    if host is None:
        return False
    return any(host == domain or host.endswith(f".{domain}") for domain in EMBED_HOSTS)


def scan_embeds(html: str, base_url: str) -> list[VideoNode]:
    """YouTube and Vimeo iframes; every other iframe is ignored."""

    embeds: list[VideoNode] = []
    for match in _IFRAME_RE.finditer(html):
        attributes = parse_attributes(match.group(1))
        src = _try_resolve(attributes.get("src"), base_url)
        if src is None or not is_embed_host(src):
            continue
        embeds.append(video_node(src, alt=_optional_text(attributes.get("title")), role="embedded-video"))
    return embeds


def scan_audio(html: str, base_url: str) -> list[AudioNode]:
    tracks: list[AudioNode] = []
    for match in _AUDIO_RE.finditer(html):
        attributes = parse_attributes(match.group(1))
        src = _media_source(attributes, match.group(2), base_url)
        if src is None:
            continue
        tracks.append(audio_node(src, alt=_optional_text(attributes.get("title")), role="audio"))
    return tracks
