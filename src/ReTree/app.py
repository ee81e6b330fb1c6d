"""Streamlit viewer for ReTree."""

from __future__ import annotations

import streamlit as st

from ReTree.errors import DanglingAnchorError, TreeParseError
from ReTree.models import DEFAULT_PATTERN, DUPLICATE_MARKER, TreeConfig
from ReTree.tree_builder import parse_text
from ReTree.tree_renderer import render_markdown, render_text
from ReTree.tree_view import TreeView, ViewEntry

# Rows drawn per rerun; deeper expansion beyond this is cut off
_MAX_ROWS = 1000


def _qp(key: str, default: str = "") -> str:
    """Read a query parameter, returning *default* if absent."""
    params = st.query_params
    return params.get(key, default)


def _qp_int(key: str, default: int) -> int:
    try:
        return int(_qp(key, str(default)))
    except ValueError:
        return default


def main() -> None:
    st.set_page_config(
        page_title="ReTree",
        page_icon="🌲",
        layout="wide",
    )

    st.title("ReTree")
    st.caption(
        "Paste the output of `tree`, `cargo tree` or any box-drawing listing "
        "and browse it as a collapsible tree."
    )

    config = _sidebar_config()

    uploaded = st.file_uploader("Upload a text file", type=None)
    text = st.text_area(
        "Tree text",
        value=_qp("text"),
        height=240,
        placeholder="project\n├── src\n│   └── main.py\n└── README.md",
    )
    if uploaded is not None:
        text = uploaded.getvalue().decode("utf-8", errors="replace")

    build_clicked = st.button(
        "Build tree",
        type="primary",
        use_container_width=True,
    )

    if build_clicked and text.strip():
        _run_parse(text, config)
    elif build_clicked:
        st.error("Please paste or upload some tree text.")

    if "result" in st.session_state:
        _show_result(st.session_state["result"])


def _sidebar_config() -> TreeConfig:
    with st.sidebar:
        st.subheader("Parser settings")

        pattern = st.text_input(
            "Node pattern (regex)",
            value=_qp("regex", DEFAULT_PATTERN),
            help="Searched in every line. The anchor group marks where the connector starts.",
        )
        anchor_group = st.number_input(
            "Anchor group",
            min_value=0,
            value=_qp_int("node", 1),
            step=1,
        )
        use_data_group = st.checkbox(
            "Use a data group",
            value=bool(_qp("data")),
            help="If unchecked, the label is everything after the anchor group.",
        )
        data_group = None
        if use_data_group:
            data_group = int(
                st.number_input(
                    "Data group",
                    min_value=0,
                    value=_qp_int("data", 2),
                    step=1,
                )
            )
        skip_lines = st.number_input(
            "Skip leading lines",
            min_value=0,
            value=_qp_int("skip", 0),
            step=1,
        )
        heading = st.checkbox(
            "Use first non-node line as root label",
            value=_qp("skip_head") != "1",
        )
        fold = st.checkbox(
            "Fold duplicates",
            value=_qp("cargo") == "1",
            help='Shows the subtree of the first matching node next to each "cargo tree" duplicate.',
        )
        marker = st.text_input(
            "Duplicate marker",
            value=_qp("marker", DUPLICATE_MARKER),
            disabled=not fold,
            help="Label suffix that marks a node already expanded elsewhere.",
        )

    return TreeConfig(
        pattern=pattern,
        anchor_group=int(anchor_group),
        data_group=data_group,
        skip_lines=int(skip_lines),
        treat_first_nonmatch_as_heading=heading,
        fold_duplicates=fold,
        duplicate_marker=marker,
    )


def _run_parse(text: str, config: TreeConfig) -> None:
    st.session_state.pop("result", None)
    try:
        tree = parse_text(text, config)
    except DanglingAnchorError as exc:
        st.error(
            f"Line {exc.line_index} does not line up with any earlier node:\n\n"
            f"`{exc.line}`"
        )
        return
    except TreeParseError as exc:
        st.error(str(exc))
        return

    st.session_state["result"] = {
        "view": TreeView(
            tree,
            fold_duplicates=config.fold_duplicates,
            duplicate_marker=config.duplicate_marker,
        ),
        "markdown": render_markdown(tree),
        "text": render_text(
            tree,
            fold_duplicates=config.fold_duplicates,
            duplicate_marker=config.duplicate_marker,
        ),
    }
    # Expansion state belongs to the previous tree
    st.session_state["expanded"] = {()}


def _show_result(result: dict) -> None:
    view: TreeView = result["view"]

    left, right = st.columns(2)
    with left:
        if st.button("Collapse all", use_container_width=True):
            st.session_state["expanded"] = {()}
    with right:
        st.download_button(
            label="Download Markdown",
            data=result["markdown"],
            file_name="tree.md",
            mime="text/markdown",
            use_container_width=True,
        )

    st.caption(f"{len(view.tree):,} nodes")

    rows = [0]
    _render_entry(view, view.root, (), 0, rows)
    if rows[0] > _MAX_ROWS:
        st.caption(
            f"Display is truncated to {_MAX_ROWS:,} rows. "
            "Collapse some branches or download the file for the full tree."
        )

    with st.expander("Text", expanded=False):
        st.code(result["text"], language="text")


def _render_entry(
    view: TreeView,
    entry: ViewEntry,
    path: tuple[int, ...],
    depth: int,
    rows: list[int],
) -> None:
    """Draw *entry* and, if it is expanded, its children.

    Children are only requested from the view for expanded rows.
    """
    rows[0] += 1
    if rows[0] > _MAX_ROWS:
        return

    expanded: set[tuple[int, ...]] = st.session_state.setdefault("expanded", {()})
    label = view.label(entry)
    if entry.reference:
        label = f"↪ {label}"

    _, body = st.columns([depth * 0.04 + 0.001, 1])
    with body:
        if not view.has_children(entry):
            st.text(f"• {label}")
            return
        is_open = path in expanded
        st.button(
            f"{'▾' if is_open else '▸'} {label}",
            key="row-" + "-".join(map(str, path)),
            on_click=_toggle,
            args=(path,),
        )

    if is_open:
        for i, child in enumerate(view.children(entry)):
            _render_entry(view, child, path + (i,), depth + 1, rows)


def _toggle(path: tuple[int, ...]) -> None:
    expanded: set[tuple[int, ...]] = st.session_state.setdefault("expanded", set())
    if path in expanded:
        expanded.discard(path)
    else:
        expanded.add(path)


if __name__ == "__main__":
    main()
