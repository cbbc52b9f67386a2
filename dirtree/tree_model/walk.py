"""Depth-first tree drawing with an explicit work stack.

Each directory is listed once on entry. Its immediate child counts go into
the shared ``TreeStats`` before any child line is produced, so truncation by
the depth limit never changes what a directory contributes to the totals.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

from ..theme import PLAIN_THEME, TreeTheme
from .connectors import format_entry_line, render_connectors
from .fs import count_children, list_directory, probe_access
from .types import EntryKind, TraversalFrame, TreeStats

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 1


def clamp_depth(max_depth: int) -> int:
    """Clamp depth limits below 1 up to 1."""
    return max(1, int(max_depth))


def _enter_directory(directory: Path, depth: int, prefix: str, stats: TreeStats) -> TraversalFrame:
    """List ``directory``, record its child counts, and build its frame."""
    listing, error = list_directory(directory)
    if error is not None:
        logger.debug("treating %s as empty: %s", directory, error)
    stats.add(*count_children(listing))
    return TraversalFrame(directory=directory, depth=depth, prefix=prefix, listing=listing)


def iter_tree_lines(
    root: Path,
    max_depth: int = DEFAULT_MAX_DEPTH,
    stats: TreeStats | None = None,
    theme: TreeTheme = PLAIN_THEME,
) -> Iterator[str]:
    """Yield one rendered line per entry below ``root`` in pre-order.

    ``stats`` is only complete once the generator is exhausted. Symlinks are
    never descended into. A plain directory that cannot be enumerated is
    annotated as access denied only when the depth limit would otherwise have
    allowed descending into it.
    """
    max_depth = clamp_depth(max_depth)
    if stats is None:
        stats = TreeStats()

    stack: list[TraversalFrame] = [_enter_directory(root, 1, "", stats)]
    while stack:
        frame = stack[-1]
        if frame.index >= len(frame.listing):
            stack.pop()
            continue

        entry = frame.listing[frame.index]
        frame.index += 1

        access_denied = False
        if entry.kind is EntryKind.DIRECTORY:
            access_denied = probe_access(entry.path)
        can_descend = frame.depth != max_depth

        branch, continuation = render_connectors(frame.index, len(frame.listing))
        yield format_entry_line(
            frame.prefix,
            branch,
            entry,
            access_denied=access_denied and can_descend,
            theme=theme,
        )

        if entry.kind is EntryKind.DIRECTORY and not access_denied and can_descend:
            stack.append(_enter_directory(entry.path, frame.depth + 1, frame.prefix + continuation, stats))


def render_tree(
    root: Path | str,
    max_depth: int = DEFAULT_MAX_DEPTH,
    theme: TreeTheme = PLAIN_THEME,
) -> tuple[list[str], TreeStats]:
    """Render the full output for ``root`` and return ``(lines, stats)``.

    Lines are the root header exactly as given, the tree rows, a blank
    separator, and the summary line.
    """
    stats = TreeStats()
    lines_out: list[str] = [str(root)]
    lines_out.extend(iter_tree_lines(Path(root), max_depth, stats, theme))
    lines_out.append("")
    lines_out.append(stats.summary())
    return lines_out, stats


__all__ = [
    "DEFAULT_MAX_DEPTH",
    "clamp_depth",
    "iter_tree_lines",
    "render_tree",
]
