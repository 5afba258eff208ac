from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from myct.model.document import Document, DocumentMetadata
from myct.model.nodes import (
    Aggregator,
    HyperedgeTarget,
    NodeType,
    hyperedge_node,
    image_node,
    section_node,
    stack_node,
    table_node,
    text_node,
)


def test_each_node_kind_carries_only_its_own_fields() -> None:
    text = text_node("Hello there", "paragraph")
    image = image_node("https://a.com/i.png", alt="Logo", role="image")

    assert text.type is NodeType.TEXT
    assert not hasattr(text, "src")
    assert not hasattr(text, "children")
    assert image.type is NodeType.IMAGE
    assert not hasattr(image, "content")


def test_to_dict_omits_absent_fields() -> None:
    image = image_node("https://a.com/i.png", role="image")

    assert image.to_dict() == {"type": "image", "role": "image", "src": "https://a.com/i.png"}


def test_stack_node_freezes_children_into_tuple() -> None:
    children = [text_node("one"), text_node("two")]
    stack = stack_node(children, "list")
    children.append(text_node("three"))

    assert len(stack.children) == 2
    with pytest.raises(FrozenInstanceError):
        stack.role = "other"  # type: ignore[misc]


def test_section_first_child_is_heading() -> None:
    heading = text_node("Overview", "heading-2")
    body = [text_node("A paragraph long enough", "paragraph")]

    section = section_node(heading, body)

    assert section.type is NodeType.SECTION
    assert section.role == "section"
    assert section.heading is heading
    assert section.body == tuple(body)
    assert section.to_dict()["children"][0] == {"type": "text", "role": "heading-2", "content": "Overview"}


def test_table_headers_and_rows_are_independently_optional() -> None:
    headers_only = table_node(["Name", "Age"])
    rows_only = table_node(rows=[["Ada", "36"]])

    assert headers_only.to_dict() == {"type": "table", "headers": ["Name", "Age"]}
    assert rows_only.to_dict() == {"type": "table", "rows": [["Ada", "36"]]}


def test_hyperedge_accepts_pairs_and_aggregator_names() -> None:
    node = hyperedge_node([("post-1", "/replies")], "preview", "replies")

    assert node.targets == (HyperedgeTarget(node_id="post-1", path="/replies"),)
    assert node.aggregator is Aggregator.PREVIEW
    assert node.expanded is False
    assert node.to_dict()["targets"] == [{"node_id": "post-1", "path": "/replies"}]


def test_document_serializes_root_and_metadata() -> None:
    document = Document(
        root=stack_node([text_node("Title", "page-title")], "page"),
        metadata=DocumentMetadata(source="https://a.com/", timestamp="2024-01-01T00:00:00+00:00", title="Title"),
    )

    payload = document.to_dict()

    assert payload["root"]["role"] == "page"
    assert payload["metadata"] == {
        "source": "https://a.com/",
        "timestamp": "2024-01-01T00:00:00+00:00",
        "title": "Title",
        "description": None,
    }
