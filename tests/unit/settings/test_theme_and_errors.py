"""Tests for theme selection and fatal root checks."""

from __future__ import annotations

import io
import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from dirtree.errors import RootNotDirectoryError, RootNotFoundError, TreeError, check_root
from dirtree.theme import COLOR_THEME, PLAIN_THEME, resolve_theme


class _TtyStream(io.StringIO):
    def isatty(self) -> bool:
        return True


class ResolveThemeTests(unittest.TestCase):
    def test_tty_gets_color(self) -> None:
        with mock.patch.dict(os.environ, {}, clear=True):
            self.assertIs(resolve_theme(False, _TtyStream()), COLOR_THEME)

    def test_no_color_flag_or_env_or_pipe_gets_plain(self) -> None:
        with mock.patch.dict(os.environ, {}, clear=True):
            self.assertIs(resolve_theme(True, _TtyStream()), PLAIN_THEME)
            self.assertIs(resolve_theme(False, io.StringIO()), PLAIN_THEME)
        with mock.patch.dict(os.environ, {"NO_COLOR": "1"}, clear=True):
            self.assertIs(resolve_theme(False, _TtyStream()), PLAIN_THEME)


class CheckRootTests(unittest.TestCase):
    def test_existing_directory_passes(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            self.assertEqual(check_root(tmp), Path(tmp))

    def test_missing_root(self) -> None:
        with self.assertRaises(RootNotFoundError) as ctx:
            check_root("/definitely/not/here")
        self.assertIsInstance(ctx.exception, TreeError)
        self.assertEqual(ctx.exception.message, "cannot access '/definitely/not/here': No such directory")

    def test_file_root(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "f.txt"
            target.write_text("f", encoding="utf-8")
            with self.assertRaises(RootNotDirectoryError) as ctx:
                check_root(target)
        self.assertEqual(ctx.exception.message, f"{target}: Not a directory")


if __name__ == "__main__":
    unittest.main()
