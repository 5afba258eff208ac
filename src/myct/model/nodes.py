"""MYCT node kinds: the typed semantic tree produced by page translation.

Each node kind is its own frozen dataclass, so a node only carries the
fields that make sense for its kind.  Containers (``stack`` and ``section``)
hold their children in tuples; the tree is built bottom-up and never
mutated afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Iterable, Union


class NodeType(Enum):
    STACK = "stack"
    SECTION = "section"
    TEXT = "text"
    LINK = "link"
    IMAGE = "image"
    VIDEO = "video"
    AUDIO = "audio"
    TABLE = "table"
    HYPEREDGE = "hyperedge"


class Aggregator(Enum):
    """How resolved hyperedge targets are combined on expansion."""

    CONCAT = "concat"
    PREVIEW = "preview"
    EXPAND = "expand"


def _compact(payload: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in payload.items() if value is not None}


@dataclass(frozen=True, slots=True)
class HyperedgeTarget:
    """Reference to externally resolvable content."""

    node_id: str
    path: str

    def to_dict(self) -> dict[str, str]:
        return {"node_id": self.node_id, "path": self.path}


@dataclass(frozen=True, slots=True)
class TextNode:
    type: ClassVar[NodeType] = NodeType.TEXT

    content: str
    role: str | None = None
    id: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return _compact({"type": self.type.value, "id": self.id, "role": self.role, "content": self.content})


@dataclass(frozen=True, slots=True)
class LinkNode:
    type: ClassVar[NodeType] = NodeType.LINK

    url: str
    content: str
    role: str | None = None
    id: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return _compact(
            {"type": self.type.value, "id": self.id, "role": self.role, "content": self.content, "url": self.url}
        )


@dataclass(frozen=True, slots=True)
class ImageNode:
    type: ClassVar[NodeType] = NodeType.IMAGE

    src: str
    alt: str | None = None
    width: int | None = None
    height: int | None = None
    role: str | None = None
    id: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return _compact(
            {
                "type": self.type.value,
                "id": self.id,
                "role": self.role,
                "src": self.src,
                "alt": self.alt,
                "width": self.width,
                "height": self.height,
            }
        )


@dataclass(frozen=True, slots=True)
class VideoNode:
    type: ClassVar[NodeType] = NodeType.VIDEO

    src: str
    poster: str | None = None
    alt: str | None = None
    role: str | None = None
    id: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return _compact(
            {
                "type": self.type.value,
                "id": self.id,
                "role": self.role,
                "src": self.src,
                "poster": self.poster,
                "alt": self.alt,
            }
        )


@dataclass(frozen=True, slots=True)
class AudioNode:
    type: ClassVar[NodeType] = NodeType.AUDIO

    src: str
    alt: str | None = None
    duration: float | None = None
    role: str | None = None
    id: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return _compact(
            {
                "type": self.type.value,
                "id": self.id,
                "role": self.role,
                "src": self.src,
                "alt": self.alt,
                "duration": self.duration,
            }
        )


@dataclass(frozen=True, slots=True)
class TableNode:
    type: ClassVar[NodeType] = NodeType.TABLE

    headers: tuple[str, ...] | None = None
    rows: tuple[tuple[str, ...], ...] | None = None
    role: str | None = None
    id: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return _compact(
            {
                "type": self.type.value,
                "id": self.id,
                "role": self.role,
                "headers": list(self.headers) if self.headers is not None else None,
                "rows": [list(row) for row in self.rows] if self.rows is not None else None,
            }
        )


@dataclass(frozen=True, slots=True)
class HyperedgeNode:
    type: ClassVar[NodeType] = NodeType.HYPEREDGE

    targets: tuple[HyperedgeTarget, ...]
    aggregator: Aggregator = Aggregator.CONCAT
    expanded: bool = False
    role: str | None = None
    id: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return _compact(
            {
                "type": self.type.value,
                "id": self.id,
                "role": self.role,
                "targets": [target.to_dict() for target in self.targets],
                "aggregator": self.aggregator.value,
                "expanded": self.expanded,
            }
        )


@dataclass(frozen=True, slots=True)
class StackNode:
    type: ClassVar[NodeType] = NodeType.STACK

    children: tuple["MyctNode", ...]
    role: str | None = None
    id: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return _compact(
            {
                "type": self.type.value,
                "id": self.id,
                "role": self.role,
                "children": [child.to_dict() for child in self.children],
            }
        )


@dataclass(frozen=True, slots=True)
class SectionNode:
    """Heading plus body; ``children[0]`` is always the heading."""

    type: ClassVar[NodeType] = NodeType.SECTION

    children: tuple["MyctNode", ...]
    role: str | None = None
    id: str | None = None

    @property
    def heading(self) -> TextNode:
        return self.children[0]  # type: ignore[return-value]

    @property
    def body(self) -> tuple["MyctNode", ...]:
        return self.children[1:]

    def to_dict(self) -> dict[str, Any]:
        return _compact(
            {
                "type": self.type.value,
                "id": self.id,
                "role": self.role,
                "children": [child.to_dict() for child in self.children],
            }
        )


MyctNode = Union[
    StackNode,
    SectionNode,
    TextNode,
    LinkNode,
    ImageNode,
    VideoNode,
    AudioNode,
    TableNode,
    HyperedgeNode,
]

CONTAINER_TYPES = frozenset({NodeType.STACK, NodeType.SECTION})


def text_node(content: str, role: str | None = None) -> TextNode:
    return TextNode(content=content, role=role)


def stack_node(children: Iterable[MyctNode], role: str | None = None) -> StackNode:
    return StackNode(children=tuple(children), role=role)


def section_node(heading: TextNode, body: Iterable[MyctNode], role: str | None = "section") -> SectionNode:
    return SectionNode(children=(heading, *body), role=role)


def link_node(url: str, content: str, role: str | None = None) -> LinkNode:
    return LinkNode(url=url, content=content, role=role)


def image_node(
    src: str,
    alt: str | None = None,
    width: int | None = None,
    height: int | None = None,
    role: str | None = None,
) -> ImageNode:
    return ImageNode(src=src, alt=alt, width=width, height=height, role=role)


def video_node(src: str, poster: str | None = None, alt: str | None = None, role: str | None = None) -> VideoNode:
    return VideoNode(src=src, poster=poster, alt=alt, role=role)


def audio_node(src: str, alt: str | None = None, duration: float | None = None, role: str | None = None) -> AudioNode:
    return AudioNode(src=src, alt=alt, duration=duration, role=role)


def table_node(
    headers: Iterable[str] | None = None,
    rows: Iterable[Iterable[str]] | None = None,
    role: str | None = None,
) -> TableNode:
    frozen_headers = tuple(headers) if headers is not None else None
    frozen_rows = tuple(tuple(row) for row in rows) if rows is not None else None
    return TableNode(headers=frozen_headers, rows=frozen_rows, role=role)


def hyperedge_node(
    targets: Iterable[HyperedgeTarget | tuple[str, str]],
    aggregator: Aggregator | str = Aggregator.CONCAT,
    role: str | None = None,
) -> HyperedgeNode:
    normalized = tuple(
        target if isinstance(target, HyperedgeTarget) else HyperedgeTarget(node_id=target[0], path=target[1])
        for target in targets
    )
    return HyperedgeNode(targets=normalized, aggregator=Aggregator(aggregator), role=role)
