from __future__ import annotations

from myct.model.nodes import image_node, section_node, stack_node, text_node
from myct.model.outline import build_outline, collect_content_nodes, iter_nodes


def _sample_tree():
    return stack_node(
        [
            text_node("Page", "page-title"),
            text_node("Intro paragraph text", "paragraph"),
            section_node(
                text_node("History", "heading-2"),
                [
                    text_node("Body of history", "paragraph"),
                    section_node(text_node("Early years", "heading-3"), [image_node("https://a.com/i.png")]),
                ],
            ),
        ],
        "page",
    )


def test_iter_nodes_walks_pre_order() -> None:
    roles = [node.role for node in iter_nodes(_sample_tree())]

    assert roles == ["page", "page-title", "paragraph", "section", "heading-2", "paragraph", "section", "heading-3", None]


def test_collect_content_nodes_flattens_containers() -> None:
    leaves = collect_content_nodes(_sample_tree())

    assert [leaf.type.value for leaf in leaves] == ["text", "text", "text", "text", "text", "image"]


def test_build_outline_lists_headings_with_levels() -> None:
    outline = build_outline(_sample_tree())

    assert [(entry.level, entry.text) for entry in outline] == [(1, "Page"), (2, "History"), (3, "Early years")]


def test_build_outline_ignores_non_heading_roles() -> None:
    tree = stack_node([text_node("heading-ish", "heading"), text_node("x", "heading-7")])

    assert build_outline(tree) == []
