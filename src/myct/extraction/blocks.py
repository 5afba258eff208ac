"""Text block scanners and the heading-driven sectioning pass.

Each scanner runs its own regex over the cleaned HTML.  Scanners feeding
the sectioning pass record the character offset of every match so blocks
of different tag types can be put back into document order.
"""

from __future__ import annotations

from dataclasses import dataclass
import re

from myct.extraction.tags import element_pattern
from myct.extraction.text import clean_fragment
from myct.model.nodes import MyctNode, TableNode, TextNode, section_node, stack_node, table_node, text_node

_FLAGS = re.IGNORECASE | re.DOTALL

_HEADING_RE = re.compile(r"<h([1-6])(\s[^>]*)?>(.*?)</h\1\s*>", _FLAGS)
_PARAGRAPH_RE = element_pattern("p")
_UNORDERED_LIST_RE = element_pattern("ul")
_ORDERED_LIST_RE = element_pattern("ol")
_LIST_ITEM_RE = element_pattern("li")
_BLOCKQUOTE_RE = element_pattern("blockquote")
_TABLE_RE = element_pattern("table")
_TABLE_ROW_RE = element_pattern("tr")
_HEADER_CELL_RE = element_pattern("th")
_DATA_CELL_RE = element_pattern("td")
_CONTAINER_RE = re.compile(r"<(?:div|section|article)(\s[^>]*)?>(.*?)</(?:div|section|article)\s*>", _FLAGS)

MIN_PARAGRAPH_CHARS = 10
FALLBACK_MIN_CHARS = 50
_CHROME_LABEL_RE = re.compile(r"^(edit|share|save|report|delete)", re.IGNORECASE)


@dataclass(slots=True)
class PositionedBlock:
    """A block node together with where it started in the cleaned HTML."""

    offset: int
    node: MyctNode
    is_heading: bool = False


def scan_headings(html: str) -> list[PositionedBlock]:
    blocks: list[PositionedBlock] = []
    for match in _HEADING_RE.finditer(html):
        text = clean_fragment(match.group(3))
        if text:
            blocks.append(PositionedBlock(match.start(), text_node(text, f"heading-{match.group(1)}"), is_heading=True))
    return blocks


def scan_paragraphs(html: str) -> list[PositionedBlock]:
    blocks: list[PositionedBlock] = []
    for match in _PARAGRAPH_RE.finditer(html):
        text = clean_fragment(match.group(2))
        if len(text) > MIN_PARAGRAPH_CHARS:
            blocks.append(PositionedBlock(match.start(), text_node(text, "paragraph")))
    return blocks


def _list_items(inner_html: str) -> list[MyctNode]:
    items: list[MyctNode] = []
    for match in _LIST_ITEM_RE.finditer(inner_html):
        text = clean_fragment(match.group(2))
        if text:
            items.append(text_node(text, "list-item"))
    return items


def scan_lists(html: str) -> list[PositionedBlock]:
    blocks: list[PositionedBlock] = []
    for pattern, role in ((_UNORDERED_LIST_RE, "list"), (_ORDERED_LIST_RE, "ordered-list")):
        for match in pattern.finditer(html):
            items = _list_items(match.group(2))
            if items:
                blocks.append(PositionedBlock(match.start(), stack_node(items, role)))
    return blocks


def scan_quotes(html: str) -> list[PositionedBlock]:
    blocks: list[PositionedBlock] = []
    for match in _BLOCKQUOTE_RE.finditer(html):
        text = clean_fragment(match.group(2))
        if text:
            blocks.append(PositionedBlock(match.start(), text_node(text, "quote")))
    return blocks


def group_into_sections(blocks: list[PositionedBlock]) -> list[MyctNode]:
    """Order blocks by offset and wrap each heading with the blocks that follow it.

    Blocks before the first heading stay at the top level.  Every heading
    produces a section, even when no body follows it.
    """
    ordered = sorted(blocks, key=lambda block: block.offset)

    output: list[MyctNode] = []
    heading: TextNode | None = None
    body: list[MyctNode] = []

    for block in ordered:
        if block.is_heading:
            if heading is not None:
                output.append(section_node(heading, body))
            heading = block.node  # type: ignore[assignment]
            body = []
        elif heading is not None:
            body.append(block.node)
        else:
            output.append(block.node)

    if heading is not None:
        output.append(section_node(heading, body))
    return output


def _cells(pattern: re.Pattern[str], html: str) -> list[str]:
    return [clean_fragment(match.group(2)) for match in pattern.finditer(html)]


def scan_tables(html: str) -> list[TableNode]:
    tables: list[TableNode] = []
    for match in _TABLE_RE.finditer(html):
        inner = match.group(2)
        headers = _cells(_HEADER_CELL_RE, inner)
        rows = [cells for cells in (_cells(_DATA_CELL_RE, row.group(2)) for row in _TABLE_ROW_RE.finditer(inner)) if cells]
        if not headers and not rows:
            continue
        tables.append(table_node(headers or None, rows or None, "table"))
    return tables


def scan_fallback_blocks(html: str) -> list[MyctNode]:
    """Substantial ``div``/``section``/``article`` text for pages the structured passes missed."""

    nodes: list[MyctNode] = []
    for match in _CONTAINER_RE.finditer(html):
        text = clean_fragment(match.group(2))
        if len(text) >= FALLBACK_MIN_CHARS and not _CHROME_LABEL_RE.match(text):
            nodes.append(text_node(text, "text"))
    return nodes
