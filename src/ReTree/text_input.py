"""Turn raw terminal output into clean lines for the builder."""

from __future__ import annotations

import re
from typing import IO, Iterator

# CSI sequences (colors, cursor moves) and OSC sequences (hyperlinks, titles)
ANSI_ESCAPE_RE = re.compile(
    r"\x1b\[[0-?]*[ -/]*[@-~]"
    r"|\x1b\][^\x07\x1b]*(?:\x07|\x1b\\)"
    r"|\x1b[@-Z\\-_]"
)


def strip_ansi_codes(text: str) -> str:
    """Remove ANSI escape sequences from *text*."""
    return ANSI_ESCAPE_RE.sub("", text)


def _clean_line(raw: str) -> str:
    return strip_ansi_codes(raw.removesuffix("\n").removesuffix("\r"))


def split_lines(text: str) -> list[str]:
    r"""Split *text* on newlines into lines without terminators, stripping ANSI codes.

    Only ``\n`` (optionally preceded by ``\r``) ends a line, the same as
    iterating over a stream in :func:`read_lines`. Form feeds and other
    characters ``str.splitlines`` would break on stay inside the label.
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [_clean_line(line) for line in lines]


def read_lines(stream: IO[str] | IO[bytes]) -> Iterator[str]:
    """Yield cleaned lines from a text or binary stream.

    Bytes are decoded as UTF-8; undecodable bytes are replaced rather than
    aborting the read.
    """
    for raw in stream:
        if isinstance(raw, bytes):
            raw = raw.decode("utf-8", errors="replace")
        yield _clean_line(raw)
