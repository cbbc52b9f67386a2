"""Domain datatypes for one tree-drawing run."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class EntryKind(Enum):
    """Closed set of entry kinds the renderer distinguishes."""

    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK_FILE = "symlink_file"
    SYMLINK_DIRECTORY = "symlink_directory"


@dataclass(frozen=True)
class FileSystemEntry:
    """One enumerated child of a listed directory.

    ``target`` holds the canonical symlink target and stays empty for plain
    entries or when the link cannot be resolved.
    """

    name: str
    path: Path
    kind: EntryKind
    target: str = ""

    @property
    def is_symlink(self) -> bool:
        return self.kind in (EntryKind.SYMLINK_FILE, EntryKind.SYMLINK_DIRECTORY)

    @property
    def is_directory(self) -> bool:
        """Directory after following symlinks."""
        return self.kind in (EntryKind.DIRECTORY, EntryKind.SYMLINK_DIRECTORY)


@dataclass
class TreeStats:
    """Running directory/file totals for a single traversal."""

    directories: int = 0
    files: int = 0

    def add(self, n_dirs: int, n_files: int) -> None:
        self.directories += n_dirs
        self.files += n_files

    def read(self) -> tuple[int, int]:
        return self.directories, self.files

    def summary(self) -> str:
        """Return ``"<N> directories, <M> files"`` with singular forms for 1."""
        dir_noun = "directory" if self.directories == 1 else "directories"
        file_noun = "file" if self.files == 1 else "files"
        return f"{self.directories} {dir_noun}, {self.files} {file_noun}"


@dataclass
class TraversalFrame:
    """Work-stack frame: a buffered listing plus the cursor into it."""

    directory: Path
    depth: int
    prefix: str
    listing: tuple[FileSystemEntry, ...] = field(default_factory=tuple)
    index: int = 0


__all__ = [
    "EntryKind",
    "FileSystemEntry",
    "TreeStats",
    "TraversalFrame",
]
