"""Regex building blocks for tolerant, non-nesting-aware tag matching.

Patterns require a tag-name boundary (whitespace or ``>``) after the name,
so ``<p>`` never matches ``<pre>`` and ``<th>`` never matches ``<thead>``.
Matching is non-greedy up to the first closing tag of the same name.
Unclosed tags make each scan quadratic in the input size, so very large
pages full of unterminated elements are slow to extract.
"""

from __future__ import annotations

import re

_FLAGS = re.IGNORECASE | re.DOTALL

_ATTRIBUTE_RE = re.compile(
    r"""([a-zA-Z_:][-a-zA-Z0-9_:.]*)\s*=\s*(?:"([^"]*)"|'([^']*)'|([^\s"'>]+))""",
)

_NON_CONTENT_TAGS = ("script", "style", "nav", "footer", "header")


def element_pattern(name: str) -> re.Pattern[str]:
    """Match ``<name ...>inner</name>``: group 1 is the attribute text, group 2 the inner HTML."""

    return re.compile(rf"<{name}(\s[^>]*)?>(.*?)</{name}\s*>", _FLAGS)


def void_pattern(name: str) -> re.Pattern[str]:
    """Match an opening tag without content, e.g. ``<img ...>``."""

    return re.compile(rf"<{name}(\s[^>]*)?/?>", _FLAGS)


_NON_CONTENT_PATTERNS = tuple(element_pattern(name) for name in _NON_CONTENT_TAGS)


def parse_attributes(attribute_text: str | None) -> dict[str, str]:
    """Return lower-cased attribute names mapped to their raw values (first wins)."""

    attributes: dict[str, str] = {}
    if not attribute_text:
        return attributes
    for match in _ATTRIBUTE_RE.finditer(attribute_text):
        name = match.group(1).lower()
        if name in attributes:
            continue
        value = next((group for group in match.group(2, 3, 4) if group is not None), "")
        attributes[name] = value
    return attributes


def remove_non_content(html: str) -> str:
    """Drop script, style, nav, footer and header blocks including contents."""

    cleaned = html
    for pattern in _NON_CONTENT_PATTERNS:
        cleaned = pattern.sub("", cleaned)
    return cleaned
