"""Fatal startup errors raised before any tree output is produced."""

from __future__ import annotations

from pathlib import Path


class TreeError(Exception):
    """Base error carrying a user-facing message."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class RootNotFoundError(TreeError):
    def __init__(self, root: Path | str) -> None:
        super().__init__(f"cannot access '{root}': No such directory")
        self.root = root


class RootNotDirectoryError(TreeError):
    def __init__(self, root: Path | str) -> None:
        super().__init__(f"{root}: Not a directory")
        self.root = root


def check_root(root: Path | str) -> Path:
    """Return ``root`` as a ``Path`` or raise when it is not a usable directory."""
    path = Path(root)
    if not path.exists():
        raise RootNotFoundError(root)
    if not path.is_dir():
        raise RootNotDirectoryError(root)
    return path


__all__ = ["TreeError", "RootNotFoundError", "RootNotDirectoryError", "check_root"]
