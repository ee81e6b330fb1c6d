"""Arena-backed tree produced by the builder.

Nodes live in a dense, append-only list and refer to each other by index,
so a handle stays valid for as long as the tree exists.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

# Root label used when the input had no heading line
ROOT_PLACEHOLDER = "<...>"


@dataclass
class Node:
    label: str
    parent: int | None = None
    children: list[int] = field(default_factory=list)


class Tree:
    """Owns every node; the root is always handle 0 once created."""

    def __init__(self) -> None:
        self.nodes: list[Node] = []
        self.root: int | None = None

    def __len__(self) -> int:
        return len(self.nodes)

    def new_node(self, label: str) -> int:
        self.nodes.append(Node(label))
        return len(self.nodes) - 1

    def append(self, parent: int, child: int) -> None:
        """Attach *child* as the last child of *parent*."""
        self.nodes[child].parent = parent
        self.nodes[parent].children.append(child)

    def label(self, handle: int) -> str:
        return self.nodes[handle].label

    def children(self, handle: int) -> list[int]:
        return list(self.nodes[handle].children)

    def parent(self, handle: int) -> int | None:
        return self.nodes[handle].parent

    def find_by_label(self, label: str) -> int | None:
        """Return the first node, in creation order, whose label is *label*."""
        for handle, node in enumerate(self.nodes):
            if node.label == label:
                return handle
        return None

    def walk(self, start: int | None = None) -> Iterator[tuple[int, int]]:
        """Yield ``(depth, handle)`` pairs in depth-first pre-order."""
        start = self.root if start is None else start
        if start is None:
            return
        stack = [(0, start)]
        while stack:
            depth, handle = stack.pop()
            yield depth, handle
            for child in reversed(self.nodes[handle].children):
                stack.append((depth + 1, child))
