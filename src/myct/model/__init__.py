"""MYCT document model."""

from .document import Document, DocumentMetadata
from .hyperedge import HyperedgeResolver, PlaceholderResolver, expand_hyperedge
from .nodes import (
    Aggregator,
    AudioNode,
    HyperedgeNode,
    HyperedgeTarget,
    ImageNode,
    LinkNode,
    MyctNode,
    NodeType,
    SectionNode,
    StackNode,
    TableNode,
    TextNode,
    VideoNode,
    audio_node,
    hyperedge_node,
    image_node,
    link_node,
    section_node,
    stack_node,
    table_node,
    text_node,
    video_node,
)
from .outline import OutlineEntry, build_outline, collect_content_nodes, iter_nodes

__all__ = [
    "Aggregator",
    "AudioNode",
    "Document",
    "DocumentMetadata",
    "HyperedgeNode",
    "HyperedgeResolver",
    "HyperedgeTarget",
    "ImageNode",
    "LinkNode",
    "MyctNode",
    "NodeType",
    "OutlineEntry",
    "PlaceholderResolver",
    "SectionNode",
    "StackNode",
    "TableNode",
    "TextNode",
    "VideoNode",
    "audio_node",
    "build_outline",
    "collect_content_nodes",
    "expand_hyperedge",
    "hyperedge_node",
    "image_node",
    "iter_nodes",
    "link_node",
    "section_node",
    "stack_node",
    "table_node",
    "text_node",
    "video_node",
]
