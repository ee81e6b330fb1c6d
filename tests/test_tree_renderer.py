"""Tests for tree_renderer module."""

from ReTree.models import TreeConfig
from ReTree.tree_builder import parse_text
from ReTree.tree_renderer import render_markdown, render_text, to_dict

SIMPLE = "root\n├── a\n│   └── b\n└── c"


class TestRenderText:
    def test_simple(self):
        assert render_text(parse_text(SIMPLE)) == SIMPLE

    def test_single_root(self):
        tree = parse_text("├── only")
        assert render_text(tree) == "<...>\n└── only"

    def test_normalises_connector_style(self):
        tree = parse_text("root\n├─ a\n│  └─ b\n└─ c")
        assert render_text(tree) == SIMPLE

    def test_fold_expands_reference(self):
        text = "\n".join([
            "app",
            "├── serde",
            "│   └── derive",
            "└── toml",
            "    └── serde (*)",
        ])
        result = render_text(parse_text(text), fold_duplicates=True)
        assert result.split("\n") == [
            "app",
            "├── serde",
            "│   └── derive",
            "└── toml",
            "    ├── serde",
            "    │   └── derive",
            "    └── serde (*)",
        ]

    def test_fold_does_not_recurse_into_ancestor(self):
        text = "a\n└── b\n    └── b (*)"
        result = render_text(parse_text(text), fold_duplicates=True)
        assert result.split("\n") == [
            "a",
            "└── b",
            "    ├── b",
            "    └── b (*)",
        ]


    def test_fold_uses_configured_marker(self):
        config = TreeConfig(fold_duplicates=True, duplicate_marker=" deduped")
        tree = parse_text("app\n├── lib@1\n│   └── dep@1\n└── lib@1 deduped", config)
        result = render_text(
            tree,
            fold_duplicates=config.fold_duplicates,
            duplicate_marker=config.duplicate_marker,
        )
        assert result.split("\n") == [
            "app",
            "├── lib@1",
            "│   └── dep@1",
            "└── lib@1 deduped",
            "    ├── lib@1",
            "    │   └── dep@1",
            "    └── lib@1 deduped",
        ]

    def test_default_marker_ignores_custom_suffix(self):
        tree = parse_text("app\n├── lib@1\n│   └── dep@1\n└── lib@1 deduped")
        assert render_text(tree, fold_duplicates=True).count("dep@1") == 1


class TestRenderMarkdown:
    def test_nested_list(self):
        result = render_markdown(parse_text(SIMPLE))
        assert result == "# root\n\n- a\n  - b\n- c\n"

    def test_custom_title(self):
        result = render_markdown(parse_text(SIMPLE), title="Listing")
        assert result.startswith("# Listing\n")

    def test_escapes_markdown(self):
        result = render_markdown(parse_text("root\n└── __init__.py"))
        assert "- \\_\\_init\\_\\_.py" in result

    def test_escapes_block_markers_at_line_start(self):
        tree = parse_text("root\n├── - x\n├── # y\n├── > q\n└── 1. z")
        lines = render_markdown(tree).split("\n")
        assert lines[2:6] == ["- \\- x", "- \\# y", "- \\> q", "- 1\\. z"]

    def test_escapes_title(self):
        result = render_markdown(parse_text(SIMPLE), title="# t")
        assert result.startswith("# \\# t\n")

    def test_block_marker_inside_label_untouched(self):
        result = render_markdown(parse_text("root\n└── a - b"))
        assert "- a - b" in result


class TestToDict:
    def test_structure(self):
        assert to_dict(parse_text(SIMPLE)) == {
            "label": "root",
            "children": [
                {"label": "a", "children": [{"label": "b", "children": []}]},
                {"label": "c", "children": []},
            ],
        }

    def test_subtree(self):
        tree = parse_text(SIMPLE)
        assert to_dict(tree, 1) == {"label": "a", "children": [{"label": "b", "children": []}]}
