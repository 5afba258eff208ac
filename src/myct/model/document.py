"""Document envelope produced once per successful page translation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from myct.model.nodes import StackNode


@dataclass(frozen=True, slots=True)
class DocumentMetadata:
    """Where and when a document was translated from."""

    source: str
    timestamp: str
    title: str | None = None
    description: str | None = None

    def to_dict(self) -> dict[str, str | None]:
        return {
            "source": self.source,
            "timestamp": self.timestamp,
            "title": self.title,
            "description": self.description,
        }


@dataclass(frozen=True, slots=True)
class Document:
    """Root stack plus metadata; a new navigation builds a new Document."""

    root: StackNode
    metadata: DocumentMetadata

    def to_dict(self) -> dict[str, Any]:
        return {"root": self.root.to_dict(), "metadata": self.metadata.to_dict()}
