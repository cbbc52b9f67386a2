"""Filesystem classification, listing, and access probing.

Every helper here reports failures through its return value. Nothing raises
past this module so the walker can keep drawing siblings after a bad entry.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .types import EntryKind, FileSystemEntry

logger = logging.getLogger(__name__)


def resolve_symlink_target(path: Path) -> tuple[str, OSError | None]:
    """Return the fully dereferenced target of ``path`` or ``""`` on failure."""
    try:
        return os.path.realpath(path, strict=True), None
    except OSError as exc:
        logger.debug("cannot resolve symlink %s: %s", path, exc)
        return "", exc


def classify_entry(path: Path) -> tuple[FileSystemEntry, OSError | None]:
    """Classify ``path`` as file, directory, or symlink to either.

    The directory check follows symlinks, so a link to a directory becomes
    ``SYMLINK_DIRECTORY``. A dangling link is a ``SYMLINK_FILE`` with an empty
    target. The returned error is the first stat/resolve failure, if any.
    """
    error: OSError | None = None
    try:
        is_symlink = path.is_symlink()
    except OSError as exc:
        is_symlink = False
        error = exc
    try:
        is_directory = path.is_dir()
    except OSError as exc:
        is_directory = False
        error = error or exc

    if is_symlink:
        target, resolve_error = resolve_symlink_target(path)
        kind = EntryKind.SYMLINK_DIRECTORY if is_directory else EntryKind.SYMLINK_FILE
        return FileSystemEntry(name=path.name, path=path, kind=kind, target=target), error or resolve_error

    kind = EntryKind.DIRECTORY if is_directory else EntryKind.FILE
    return FileSystemEntry(name=path.name, path=path, kind=kind), error


def list_directory(directory: Path) -> tuple[tuple[FileSystemEntry, ...], OSError | None]:
    """Enumerate and classify ``directory`` children in native order.

    The scandir handle is closed before returning. Returns ``((), exc)`` when
    the directory cannot be enumerated.
    """
    entries: list[FileSystemEntry] = []
    try:
        with os.scandir(directory) as scan:
            child_paths = [Path(child.path) for child in scan]
    except OSError as exc:
        logger.debug("cannot list %s: %s", directory, exc)
        return (), exc

    for child_path in child_paths:
        entry, error = classify_entry(child_path)
        if error is not None:
            logger.debug("partial classification for %s: %s", child_path, error)
        entries.append(entry)
    return tuple(entries), None


def count_children(entries: tuple[FileSystemEntry, ...]) -> tuple[int, int]:
    """Split a buffered listing into ``(n_dirs, n_files)``."""
    n_dirs = sum(1 for entry in entries if entry.is_directory)
    return n_dirs, len(entries) - n_dirs


def count_directory_children(directory: Path) -> tuple[int, int]:
    """Enumerate ``directory`` once and return ``(n_dirs, n_files)``.

    Unlistable directories count as empty.
    """
    entries, _error = list_directory(directory)
    return count_children(entries)


def probe_access(directory: Path) -> bool:
    """Return whether enumerating ``directory`` fails with a permission error."""
    try:
        with os.scandir(directory):
            pass
    except PermissionError:
        return True
    except OSError as exc:
        logger.debug("probe of %s failed: %s", directory, exc)
    return False


__all__ = [
    "resolve_symlink_target",
    "classify_entry",
    "list_directory",
    "count_children",
    "count_directory_children",
    "probe_access",
]
