"""Command-line front door for dirtree.

Parses the root path and depth limit, validates the root, then streams the
tree rows and the summary line to stdout.
"""

from __future__ import annotations

import argparse
import logging
import sys

from .config import load_color_enabled, load_default_depth
from .errors import TreeError, check_root
from .theme import resolve_theme
from .tree_model import DEFAULT_MAX_DEPTH, TreeStats, clamp_depth, iter_tree_lines

PROG = "dirtree"


def _depth_value(value: str) -> int:
    """argparse type for depth limits; values below 1 are clamped to 1."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    return clamp_depth(parsed)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="List directory contents as an indented tree.",
    )
    parser.add_argument("path", nargs="?", default=".", help="Directory to list. Defaults to current directory.")
    parser.add_argument(
        "depth",
        nargs="?",
        type=_depth_value,
        default=None,
        help="Maximum depth to descend (default: 1, or the configured default_depth).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument("--verbose", action="store_true", help="Log filesystem errors to stderr.")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and print the tree for the requested directory.

    Fatal root errors exit with status 1 and ``dirtree: <message>`` on stderr
    before anything is written to stdout.
    """
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(name)s: %(levelname)s: %(message)s",
        )

    try:
        root = check_root(args.path)
    except TreeError as exc:
        raise SystemExit(f"{PROG}: {exc.message}") from exc

    max_depth = args.depth
    if max_depth is None:
        max_depth = load_default_depth() or DEFAULT_MAX_DEPTH

    no_color = args.no_color or not load_color_enabled()
    theme = resolve_theme(no_color, sys.stdout)

    stats = TreeStats()
    out = sys.stdout
    out.write(f"{args.path}\n")
    for line in iter_tree_lines(root, max_depth, stats, theme):
        out.write(line + "\n")
    out.write(f"\n{stats.summary()}\n")
    out.flush()


if __name__ == "__main__":
    main()
