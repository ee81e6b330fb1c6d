"""Read-only view of a parsed tree for display layers.

The view adds duplicate folding on top of the arena: a leaf such as
``serde v1.0 (*)`` gets a reference entry to the first ``serde v1.0`` node
placed just before it, so its subtree can be expanded in both places. The
arena itself is never modified.
"""

from __future__ import annotations

from dataclasses import dataclass

from ReTree.models import DUPLICATE_MARKER
from ReTree.tree import Tree


@dataclass(frozen=True)
class ViewEntry:
    node: int
    reference: bool = False  # True when shown via a duplicate marker


class TreeView:
    def __init__(
        self,
        tree: Tree,
        fold_duplicates: bool = False,
        duplicate_marker: str = DUPLICATE_MARKER,
    ) -> None:
        self.tree = tree
        self.fold_duplicates = fold_duplicates
        self.duplicate_marker = duplicate_marker

    @property
    def root(self) -> ViewEntry:
        return ViewEntry(self.tree.root)

    def label(self, entry: ViewEntry) -> str:
        return self.tree.label(entry.node)

    def has_children(self, entry: ViewEntry) -> bool:
        return bool(self.children(entry))

    def children(self, entry: ViewEntry) -> list[ViewEntry]:
        """Return the entries to display under *entry*, in order."""
        entries: list[ViewEntry] = []
        for child in self.tree.children(entry.node):
            if self.fold_duplicates and not self.tree.children(child):
                original = self.resolve_duplicate(child)
                if original is not None:
                    entries.append(ViewEntry(original, reference=True))
            entries.append(ViewEntry(child))
        return entries

    def resolve_duplicate(self, handle: int) -> int | None:
        """Return the node a duplicate-marker leaf refers to, if any."""
        label = self.tree.label(handle)
        if not self.duplicate_marker or not label.endswith(self.duplicate_marker):
            return None
        original_label = label[: -len(self.duplicate_marker)]
        return self.tree.find_by_label(original_label)
