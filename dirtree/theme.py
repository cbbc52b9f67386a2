"""ANSI palettes for tree output.

Only directory names and symlink targets are colored. ``PLAIN_THEME`` keeps
output byte-identical to the uncolored format.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import TextIO


@dataclass(frozen=True)
class TreeTheme:
    """Semantic ANSI palette used by the line formatter."""

    name: str
    directory: str
    link_target: str
    reset: str


COLOR_THEME = TreeTheme(
    name="color",
    directory="\033[94m",
    link_target="\033[92m",
    reset="\033[0m",
)

PLAIN_THEME = TreeTheme(
    name="plain",
    directory="",
    link_target="",
    reset="",
)


def resolve_theme(no_color: bool, stream: TextIO) -> TreeTheme:
    """Pick the color theme only for interactive streams with color allowed."""
    if no_color or os.environ.get("NO_COLOR"):
        return PLAIN_THEME
    try:
        interactive = stream.isatty()
    except (AttributeError, ValueError):
        interactive = False
    return COLOR_THEME if interactive else PLAIN_THEME


__all__ = ["TreeTheme", "COLOR_THEME", "PLAIN_THEME", "resolve_theme"]
