"""Exceptions raised while rebuilding a tree."""

from __future__ import annotations


class TreeParseError(Exception):
    """Base class for errors that abort a parse."""


class EmptyInputError(TreeParseError):
    """Raised when no line produced a node, so there is no root."""

    def __init__(self) -> None:
        super().__init__("empty tree: no line matched the node pattern")


class DanglingAnchorError(TreeParseError):
    """Raised when a node line's anchor column has no registered ancestor."""

    def __init__(self, line_index: int, line: str) -> None:
        self.line_index = line_index
        self.line = line
        super().__init__(f"dangling node at line {line_index}: {line}")


class InvalidPatternError(TreeParseError):
    """Raised when the node pattern is not a valid regular expression."""

    def __init__(self, pattern: str, reason: str) -> None:
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"invalid node pattern `{pattern}`: {reason}")
