r"""retree: rebuild a tree from `tree`-style text output.

Usage:
  cargo tree | retree --cargo
  retree listing.txt --format json
  retree outline.txt -r '^\s*(- )'
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from importlib.metadata import PackageNotFoundError, version

from ReTree.errors import TreeParseError
from ReTree.models import DEFAULT_PATTERN, DUPLICATE_MARKER, TreeConfig
from ReTree.text_input import read_lines
from ReTree.tree_builder import parse_tree
from ReTree.tree_renderer import render_markdown, render_text, to_dict

logger = logging.getLogger(__name__)


def _version() -> str:
    try:
        return version("ReTree")
    except PackageNotFoundError:
        # Running from a source checkout without installing
        return "unknown"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="retree",
        description="Rebuild a tree from lines drawn with box-drawing connectors.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    parser.add_argument("--help", action="help", help="show this help message and exit")
    parser.add_argument("--version", action="version", version=f"retree {_version()}")
    parser.add_argument(
        "file",
        nargs="?",
        default="-",
        help="input file (default: stdin)",
    )
    parser.add_argument(
        "-c", "--cargo",
        action="store_true",
        help='fold duplicate nodes marked with the duplicate marker, as in "cargo tree"',
    )
    parser.add_argument(
        "-m", "--marker",
        default=DUPLICATE_MARKER,
        help="label suffix marking a duplicate node (default: '%(default)s')",
    )
    parser.add_argument(
        "-r", "--regex",
        default=DEFAULT_PATTERN,
        help="regex to capture the tree's node (default: %(default)s)",
    )
    parser.add_argument(
        "-n", "--node",
        type=int,
        default=1,
        help="group selected from regex as tree's node (default: %(default)s)",
    )
    parser.add_argument(
        "-d", "--data",
        type=int,
        default=None,
        help="group selected from regex as tree's data; if not set, all text after the node",
    )
    parser.add_argument(
        "-h", "--skip-head",
        action="store_true",
        help="do not use the first non-node line as the root label",
    )
    parser.add_argument(
        "-s", "--skip-lines",
        type=int,
        default=0,
        help="number of leading lines to skip (default: %(default)s)",
    )
    parser.add_argument(
        "-f", "--format",
        choices=("text", "json", "markdown"),
        default="text",
        help="output format (default: %(default)s)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="enable debug logging",
    )
    return parser


def config_from_args(args: argparse.Namespace) -> TreeConfig:
    return TreeConfig(
        pattern=args.regex,
        anchor_group=args.node,
        data_group=args.data,
        skip_lines=args.skip_lines,
        treat_first_nonmatch_as_heading=not args.skip_head,
        fold_duplicates=args.cargo,
        duplicate_marker=args.marker,
    )


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )

    config = config_from_args(args)
    logger.debug("parser config: %s", config)

    try:
        if args.file == "-":
            tree = parse_tree(read_lines(sys.stdin), config)
        else:
            with open(args.file, "rb") as fh:
                tree = parse_tree(read_lines(fh), config)
    except (OSError, TreeParseError) as exc:
        print(f"retree: error: {exc}", file=sys.stderr)
        return 1

    if args.format == "json":
        output = json.dumps(to_dict(tree), ensure_ascii=False, indent=2)
    elif args.format == "markdown":
        output = render_markdown(tree).rstrip("\n")
    else:
        output = render_text(
            tree,
            fold_duplicates=config.fold_duplicates,
            duplicate_marker=config.duplicate_marker,
        )

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
