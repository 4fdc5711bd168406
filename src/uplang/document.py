"""Document and Node — the output of a UP parse."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator

from .values import Value


@dataclass
class Node:
    """One key line and everything it opened."""

    key: str
    type_annotation: str | None
    value: Value

    def to_python(self) -> Any:
        return self.value.to_python()


@dataclass
class Document:
    """Top-level nodes in source order."""

    nodes: list[Node] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes)

    # -- Convenience accessors ------------------------------------------

    def keys(self) -> list[str]:
        """Top-level keys in source order, duplicates included."""
        return [n.key for n in self.nodes]

    def get(self, key: str) -> Node | None:
        """Return the last top-level node named *key*, or ``None``."""
        for node in reversed(self.nodes):
            if node.key == key:
                return node
        return None

    def to_python(self) -> dict[str, Any]:
        """Convert to plain Python data.

        Top-level keys map to their converted values; a repeated key keeps
        the value of its last occurrence, the same rule blocks follow.
        Annotations are dropped.
        """
        return {n.key: n.to_python() for n in self.nodes}
