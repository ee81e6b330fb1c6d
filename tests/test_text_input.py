"""Tests for text_input module."""

import io

from ReTree.text_input import read_lines, split_lines, strip_ansi_codes


class TestStripAnsiCodes:
    def test_colors(self):
        assert strip_ansi_codes("\x1b[1;32m├──\x1b[0m src") == "├── src"

    def test_hyperlink(self):
        text = "\x1b]8;;file:///tmp/a\x07a.txt\x1b]8;;\x07"
        assert strip_ansi_codes(text) == "a.txt"

    def test_plain_text_untouched(self):
        assert strip_ansi_codes("│   └── main.py") == "│   └── main.py"


class TestSplitLines:
    def test_drops_terminators(self):
        assert split_lines("a\r\nb\nc") == ["a", "b", "c"]

    def test_empty(self):
        assert split_lines("") == []

    def test_only_newline_ends_a_line(self):
        assert split_lines("a\x0cb\nc\x1ed\u2028e\n") == ["a\x0cb", "c\x1ed\u2028e"]

    def test_matches_read_lines(self):
        text = "root\r\n├── a\x0bb\n\n└── c"
        assert split_lines(text) == list(read_lines(io.StringIO(text)))

    def test_keeps_trailing_blank_line(self):
        assert split_lines("a\n\n") == ["a", ""]


class TestReadLines:
    def test_text_stream(self):
        stream = io.StringIO("root\n└── \x1b[34ma\x1b[0m\n")
        assert list(read_lines(stream)) == ["root", "└── a"]

    def test_binary_stream(self):
        stream = io.BytesIO("root\r\n└── a\r\n".encode("utf-8"))
        assert list(read_lines(stream)) == ["root", "└── a"]

    def test_invalid_utf8_replaced(self):
        stream = io.BytesIO(b"\xffroot\n")
        assert list(read_lines(stream)) == ["�root"]

    def test_keeps_trailing_spaces(self):
        stream = io.StringIO("└── a  \n")
        assert list(read_lines(stream)) == ["└── a  "]
