"""Non-UI tree primitives: entry classification, counting, glyphs, and the walker."""

from __future__ import annotations

from .types import EntryKind, FileSystemEntry, TraversalFrame, TreeStats
from .fs import (
    classify_entry,
    count_children,
    count_directory_children,
    list_directory,
    probe_access,
    resolve_symlink_target,
)
from .connectors import (
    BRANCH_LAST,
    BRANCH_MID,
    CONTINUE_LAST,
    CONTINUE_MID,
    format_entry_line,
    render_connectors,
)
from .walk import DEFAULT_MAX_DEPTH, clamp_depth, iter_tree_lines, render_tree

__all__ = [
    "EntryKind",
    "FileSystemEntry",
    "TraversalFrame",
    "TreeStats",
    "classify_entry",
    "count_children",
    "count_directory_children",
    "list_directory",
    "probe_access",
    "resolve_symlink_target",
    "BRANCH_LAST",
    "BRANCH_MID",
    "CONTINUE_LAST",
    "CONTINUE_MID",
    "format_entry_line",
    "render_connectors",
    "DEFAULT_MAX_DEPTH",
    "clamp_depth",
    "iter_tree_lines",
    "render_tree",
]
