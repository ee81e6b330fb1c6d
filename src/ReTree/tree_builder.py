"""Rebuild a tree from the lines of a text tree drawing.

Example input:
    myproject
    ├── src/
    │   ├── main.py
    │   └── utils.py
    └── README.md

Each node line is registered under the column where its label starts.
A later line whose connector starts at that same column is its child, so
the most recent registration per column is all the state needed to find
a parent.
"""

from __future__ import annotations

import logging
from typing import Iterable

from ReTree.errors import DanglingAnchorError, EmptyInputError
from ReTree.line_classifier import LineClassifier
from ReTree.models import TreeConfig
from ReTree.text_input import split_lines
from ReTree.tree import ROOT_PLACEHOLDER, Tree

logger = logging.getLogger(__name__)


class TreeBuilder:
    """Single-pass builder; feed lines in order, then call :meth:`finish`."""

    def __init__(self, config: TreeConfig | None = None) -> None:
        self.config = config or TreeConfig()
        self._classifier = LineClassifier(self.config)
        self._tree = Tree()
        # column -> handle of the latest node registered there
        self._columns: dict[int, int] = {}
        self._heading: str | None = None
        self._line_index = 0

    def feed(self, line: str) -> None:
        """Process the next input line."""
        line_index = self._line_index
        self._line_index += 1
        if line_index < self.config.skip_lines:
            return

        node_line = self._classifier.classify(line)

        if node_line is None:
            if (
                self._tree.root is None
                and self.config.treat_first_nonmatch_as_heading
                and self._heading is None
                and line.strip()
            ):
                self._heading = line.strip()
            return

        if self._tree.root is None:
            root = self._tree.new_node(self._heading or ROOT_PLACEHOLDER)
            self._tree.root = root
            self._columns[node_line.anchor_column] = root

        parent = self._columns.get(node_line.anchor_column)
        if parent is None:
            raise DanglingAnchorError(line_index, line)

        current = self._tree.new_node(node_line.data)
        self._tree.append(parent, current)
        self._columns[node_line.data_column] = current

    def finish(self) -> Tree:
        """Return the finished tree; raises EmptyInputError if no node was seen."""
        if self._tree.root is None:
            raise EmptyInputError()
        logger.debug(
            "parsed %d lines into %d nodes", self._line_index, len(self._tree)
        )
        return self._tree


def parse_tree(lines: Iterable[str], config: TreeConfig | None = None) -> Tree:
    """Build a tree from already-cleaned lines."""
    builder = TreeBuilder(config)
    for line in lines:
        builder.feed(line)
    return builder.finish()


def parse_text(text: str, config: TreeConfig | None = None) -> Tree:
    """Build a tree from a block of text, stripping ANSI codes first."""
    return parse_tree(split_lines(text), config)
