from __future__ import annotations

import asyncio
from typing import Sequence

import pytest

from myct.model.hyperedge import HyperedgeResolver, PlaceholderResolver, expand_hyperedge
from myct.model.nodes import HyperedgeTarget, MyctNode, NodeType, hyperedge_node, text_node


class _RecordingResolver:
    def __init__(self) -> None:
        self.calls: list[HyperedgeTarget] = []

    async def resolve(self, target: HyperedgeTarget) -> Sequence[MyctNode]:
        self.calls.append(target)
        # Later targets finish first; output order must still follow targets.
        await asyncio.sleep(0.01 if target.node_id == "a" else 0)
        return [text_node(f"{target.node_id}-1"), text_node(f"{target.node_id}-2")]


def test_concat_keeps_every_node_in_target_order() -> None:
    resolver = _RecordingResolver()
    node = hyperedge_node([("a", "/x"), ("b", "/y")], "concat")

    expanded = asyncio.run(expand_hyperedge(node, resolver))

    assert [child.content for child in expanded] == ["a-1", "a-2", "b-1", "b-2"]
    assert len(resolver.calls) == 2


def test_preview_keeps_first_node_per_target() -> None:
    node = hyperedge_node([("a", "/x"), ("b", "/y")], "preview")

    expanded = asyncio.run(expand_hyperedge(node, _RecordingResolver()))

    assert [child.content for child in expanded] == ["a-1", "b-1"]


def test_placeholder_resolver_returns_loading_stack() -> None:
    resolver = PlaceholderResolver()
    node = hyperedge_node([("post", "/replies")])

    expanded = asyncio.run(expand_hyperedge(node, resolver))

    assert isinstance(resolver, HyperedgeResolver)
    assert len(expanded) == 1
    assert expanded[0].type is NodeType.STACK
    assert expanded[0].role == "placeholder"
    assert [child.content for child in expanded[0].children] == [
        "Dynamic content loading",
        "This feature is being implemented",
    ]


def test_expand_rejects_non_hyperedge_nodes() -> None:
    with pytest.raises(TypeError, match="hyperedge"):
        asyncio.run(expand_hyperedge(text_node("nope"), PlaceholderResolver()))  # type: ignore[arg-type]
