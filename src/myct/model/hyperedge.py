"""On-demand expansion contract for hyperedge nodes.

Resolution is injected by the rendering layer; the document model itself
never performs I/O.
"""

from __future__ import annotations

import asyncio
from typing import Protocol, Sequence, runtime_checkable

from myct.model.nodes import Aggregator, HyperedgeNode, HyperedgeTarget, MyctNode, stack_node, text_node


@runtime_checkable
class HyperedgeResolver(Protocol):
    """Capability that turns a hyperedge target into MYCT nodes."""

    async def resolve(self, target: HyperedgeTarget) -> Sequence[MyctNode]:
        """Return the nodes to splice in for ``target``."""


class PlaceholderResolver:
    """Resolver used until a real content source is wired in."""

    async def resolve(self, target: HyperedgeTarget) -> Sequence[MyctNode]:
        return [
            stack_node(
                [
                    text_node("Dynamic content loading", "info"),
                    text_node("This feature is being implemented", "text"),
                ],
                "placeholder",
            )
        ]


async def expand_hyperedge(node: HyperedgeNode, resolver: HyperedgeResolver) -> tuple[MyctNode, ...]:
    """Resolve every target of ``node`` and aggregate the results.

    Targets are resolved concurrently but results keep target order.
    ``preview`` keeps the first node of each target; ``concat`` and
    ``expand`` keep everything.
    """
    if not isinstance(node, HyperedgeNode):
        raise TypeError(f"expected a hyperedge node, got {type(node).__name__}")

    resolved = await asyncio.gather(*(resolver.resolve(target) for target in node.targets))

    expanded: list[MyctNode] = []
    for nodes in resolved:
        if node.aggregator is Aggregator.PREVIEW:
            expanded.extend(list(nodes)[:1])
        else:
            expanded.extend(nodes)
    return tuple(expanded)
