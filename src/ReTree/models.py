"""Data classes for ReTree."""

from __future__ import annotations

import re
from dataclasses import dataclass

from ReTree.errors import InvalidPatternError

# Matches the connectors printed by `tree`, `cargo tree` and friends
DEFAULT_PATTERN = r"[│\s]*([├└]─*\s*)"

# Suffix `cargo tree` appends to dependencies it has already expanded
DUPLICATE_MARKER = " (*)"


@dataclass
class TreeConfig:
    pattern: str = DEFAULT_PATTERN
    anchor_group: int = 1
    data_group: int | None = None  # None: everything after the anchor group
    skip_lines: int = 0
    treat_first_nonmatch_as_heading: bool = True
    fold_duplicates: bool = False
    duplicate_marker: str = DUPLICATE_MARKER

    def compile(self) -> re.Pattern[str]:
        """Compile :attr:`pattern`, raising InvalidPatternError if it is bad."""
        try:
            return re.compile(self.pattern)
        except re.error as exc:
            raise InvalidPatternError(self.pattern, str(exc)) from exc


@dataclass(frozen=True)
class NodeLine:
    """A line that introduces a node.

    Columns are code point offsets into the cleaned line.
    """

    anchor_column: int
    data_column: int
    data: str
