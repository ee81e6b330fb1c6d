"""Text, Markdown and dict output for parsed trees."""

from __future__ import annotations

import re

from ReTree.models import DUPLICATE_MARKER
from ReTree.tree import Tree
from ReTree.tree_view import TreeView, ViewEntry

# Text at the start of a line that Markdown would read as a heading,
# quote, list item or ordered list item
_BLOCK_START_RE = re.compile(r"^(\s*)(\d+[.)]|[#>+\-])")


def render_text(
    tree: Tree,
    fold_duplicates: bool = False,
    duplicate_marker: str = DUPLICATE_MARKER,
) -> str:
    """Render the tree with box-drawing connectors.

    Example output:
        myproject
        ├── src/
        │   ├── main.py
        │   └── utils.py
        └── README.md

    The output parses back into the same shape with the default pattern.
    With *fold_duplicates*, each label ending in *duplicate_marker* is
    preceded by the subtree it refers to.
    """
    view = TreeView(
        tree, fold_duplicates=fold_duplicates, duplicate_marker=duplicate_marker
    )
    lines = [view.label(view.root)]
    _render_entries(view, view.root, lines, prefix="", ancestors={view.root.node})
    return "\n".join(lines)


def _render_entries(
    view: TreeView,
    entry: ViewEntry,
    lines: list[str],
    prefix: str,
    ancestors: set[int],
) -> None:
    """Recursively render the children of *entry* into lines."""
    entries = view.children(entry)
    for i, child in enumerate(entries):
        is_last = i == len(entries) - 1
        connector = "└── " if is_last else "├── "
        lines.append(f"{prefix}{connector}{view.label(child)}")

        # A reference to one of its own ancestors would never terminate
        if child.reference and child.node in ancestors:
            continue

        extension = "    " if is_last else "│   "
        _render_entries(
            view, child, lines, prefix + extension, ancestors | {child.node}
        )


def render_markdown(tree: Tree, title: str | None = None) -> str:
    """Render the tree as a Markdown document with a nested bullet list."""
    parts: list[str] = []
    parts.append(f"# {_escape_markdown(title or tree.label(tree.root))}\n")

    for depth, handle in tree.walk():
        if handle == tree.root:
            continue
        indent = "  " * (depth - 1)
        parts.append(f"{indent}- {_escape_markdown(tree.label(handle))}")

    return "\n".join(parts) + "\n"


def _escape_markdown(text: str) -> str:
    for ch in ("\\", "`", "*", "_", "[", "]"):
        text = text.replace(ch, f"\\{ch}")
    return _BLOCK_START_RE.sub(_escape_block_start, text)


def _escape_block_start(match: re.Match[str]) -> str:
    marker = match.group(2)
    return f"{match.group(1)}{marker[:-1]}\\{marker[-1]}"


def to_dict(tree: Tree, handle: int | None = None) -> dict:
    """Return ``{"label": ..., "children": [...]}`` for JSON output."""
    handle = tree.root if handle is None else handle
    return {
        "label": tree.label(handle),
        "children": [to_dict(tree, child) for child in tree.children(handle)],
    }
