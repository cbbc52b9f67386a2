"""Branch/continuation glyph selection and per-entry line formatting."""

from __future__ import annotations

from ..theme import PLAIN_THEME, TreeTheme
from .types import EntryKind, FileSystemEntry

BRANCH_MID = "├──"
BRANCH_LAST = "└──"
CONTINUE_MID = "│   "
CONTINUE_LAST = "    "
ACCESS_DENIED_LABEL = "access denied"


def render_connectors(index: int, total: int) -> tuple[str, str]:
    """Return ``(branch, continuation)`` for the 1-based ``index`` of ``total``.

    The last sibling gets the terminal branch and blank padding for its
    children; every other sibling gets the mid branch and a vertical guide.
    """
    if index < 1 or index > total:
        raise ValueError(f"index {index} out of range for {total} siblings")
    if index == total:
        return BRANCH_LAST, CONTINUE_LAST
    return BRANCH_MID, CONTINUE_MID


def format_entry_line(
    prefix: str,
    branch: str,
    entry: FileSystemEntry,
    access_denied: bool = False,
    theme: TreeTheme = PLAIN_THEME,
) -> str:
    """Format ``<prefix><branch> <name>[ -> <target>][ [access denied]]``."""
    head = f"{prefix}{branch} "
    if entry.kind is EntryKind.SYMLINK_DIRECTORY:
        name = f"{theme.directory}{entry.name}{theme.reset}"
        return f"{head}{name} -> {theme.link_target}{entry.target}{theme.reset}"
    if entry.kind is EntryKind.SYMLINK_FILE:
        return f"{head}{entry.name} -> {theme.link_target}{entry.target}{theme.reset}"
    if entry.kind is EntryKind.DIRECTORY:
        name = f"{theme.directory}{entry.name}{theme.reset}"
        if access_denied:
            return f"{head}{name} [{ACCESS_DENIED_LABEL}]"
        return f"{head}{name}"
    return f"{head}{entry.name}"


__all__ = [
    "BRANCH_MID",
    "BRANCH_LAST",
    "CONTINUE_MID",
    "CONTINUE_LAST",
    "ACCESS_DENIED_LABEL",
    "render_connectors",
    "format_entry_line",
]
