"""Tree walking helpers used by outline and flattened (bento) views."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator

from myct.model.nodes import CONTAINER_TYPES, MyctNode, NodeType

_HEADING_ROLE_RE = re.compile(r"^heading-([1-6])$")


@dataclass(slots=True)
class OutlineEntry:
    level: int
    text: str

    def to_dict(self) -> dict[str, int | str]:
        return {"level": self.level, "text": self.text}


def iter_nodes(root: MyctNode) -> Iterator[MyctNode]:
    """Yield ``root`` and all descendants in depth-first pre-order."""

    yield root
    if root.type in CONTAINER_TYPES:
        for child in root.children:  # type: ignore[union-attr]
            yield from iter_nodes(child)


def collect_content_nodes(root: MyctNode) -> list[MyctNode]:
    """Flatten containers away, keeping leaves in document order."""

    if root.type in CONTAINER_TYPES:
        leaves: list[MyctNode] = []
        for child in root.children:  # type: ignore[union-attr]
            leaves.extend(collect_content_nodes(child))
        return leaves
    return [root]


def heading_level(node: MyctNode) -> int | None:
    if node.type is not NodeType.TEXT or not node.role:
        return None
    if node.role == "page-title":
        return 1
    match = _HEADING_ROLE_RE.match(node.role)
    if match is None:
        return None
    return int(match.group(1))


def build_outline(root: MyctNode) -> list[OutlineEntry]:
    """Return every heading (and the page title) in document order."""

    entries: list[OutlineEntry] = []
    for node in iter_nodes(root):
        level = heading_level(node)
        if level is not None:
            entries.append(OutlineEntry(level=level, text=node.content))  # type: ignore[union-attr]
    return entries
