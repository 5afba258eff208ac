"""Tag stripping and text cleanup shared by every extraction pass."""

from __future__ import annotations

import re

_TAG_RE = re.compile(r"<[^>]+>")
_WHITESPACE_RE = re.compile(r"\s+")

# Decoded in this order, so "&amp;lt;" ends up as "<".
_ENTITIES: tuple[tuple[str, str], ...] = (
    ("&nbsp;", " "),
    ("&amp;", "&"),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&#39;", "'"),
    ("&mdash;", "—"),
    ("&ndash;", "–"),
    ("&hellip;", "..."),
)


def strip_tags(html: str) -> str:
    """Replace every tag with a space."""

    return _TAG_RE.sub(" ", html)


def decode_entities(text: str) -> str:
    for entity, replacement in _ENTITIES:
        text = text.replace(entity, replacement)
    return text


def clean_text(text: str) -> str:
    """Decode the known entities, collapse whitespace and trim."""

    return _WHITESPACE_RE.sub(" ", decode_entities(text)).strip()


def clean_fragment(html: str) -> str:
    return clean_text(strip_tags(html))
