"""Tests for join, split, basename, dirname, splitext and getext."""

import pytest
from pathstyle.core import PathOperations, UnixStyle, WindowsStyle, Config, StyleKind


class TestConstruction:
    def test_from_config(self, clean_env):
        ops = PathOperations.from_config(Config(style=StyleKind.WINDOWS, sep="/"))
        assert isinstance(ops.style, WindowsStyle)
        assert ops.sep == "/"

    def test_explicit_style(self):
        ops = PathOperations(UnixStyle())
        assert ops.sep == "/"

    def test_normalize_alias(self, unix):
        assert unix.normalize("a//b") == unix.norm("a//b") == "a/b"


class TestUnixJoin:
    def test_join_fragments(self, unix):
        assert unix.join("a", "b", "c") == "a/b/c"

    def test_later_absolute_wins(self, unix):
        assert unix.join("a", "/b") == "/b"
        assert unix.join("/x", "y", "/z", "w") == "/z/w"

    def test_no_fragments(self, unix):
        assert unix.join() == ""

    def test_single_fragment(self, unix):
        assert unix.join("a") == "a"

    def test_empty_fragments_skipped(self, unix):
        assert unix.join("", "a", "", "b", "") == "a/b"
        assert unix.join("", "") == ""

    def test_no_double_separator(self, unix):
        assert unix.join("a/", "b") == "a/b"
        assert unix.join("/", "b") == "/b"

    def test_fragments_kept_verbatim(self, unix):
        assert unix.join("a//", "b/") == "a//b/"
        assert unix.join("a", "../b") == "a/../b"

    def test_backslash_is_not_a_separator(self, unix):
        assert unix.join("a\\", "b") == "a\\/b"


class TestWindowsJoin:
    def test_join_fragments(self, win):
        assert win.join("a", "b", "c") == "a\\b\\c"

    def test_forward_slash_default(self, win_slash):
        assert win_slash.join("a", "b") == "a/b"

    def test_existing_separator_of_either_kind(self, win):
        assert win.join("a/", "b") == "a/b"
        assert win.join("C:\\", "b") == "C:\\b"

    def test_absolute_fragment_wins(self, win):
        assert win.join("a", "C:\\b") == "C:\\b"
        assert win.join("C:\\a", "\\b") == "\\b"
        assert win.join("x", "\\\\host\\share", "y") == "\\\\host\\share\\y"

    def test_bare_drive_stays_drive_relative(self, win):
        assert win.join("C:", "foo") == "C:foo"
        assert win.join("C:", "foo", "bar") == "C:foo\\bar"

    def test_drive_relative_fragment_is_appended(self, win):
        assert win.join("a", "D:b") == "a\\D:b"


class TestUnixSplit:
    @pytest.mark.parametrize("path,expected", [
        ("a/b/c", ("a/b", "c")),
        ("/a/b", ("/a", "b")),
        ("/a", ("/", "a")),
        ("/", ("/", "")),
        ("//", ("//", "")),
        ("a", ("", "a")),
        ("", ("", "")),
        ("a/b/", ("a/b", "")),
        ("a/b///", ("a/b", "")),
        ("a//b", ("a", "b")),
        ("a//b//c", ("a//b", "c")),
        ("//a", ("//", "a")),
    ])
    def test_split(self, unix, path, expected):
        assert unix.split(path) == expected

    def test_basename_and_dirname(self, unix):
        assert unix.basename("/usr/lib/libc.so") == "libc.so"
        assert unix.dirname("/usr/lib/libc.so") == "/usr/lib"
        assert unix.basename("/usr/lib/") == ""
        assert unix.dirname("/usr/lib/") == "/usr/lib"
        assert unix.dirname("file") == ""


class TestWindowsSplit:
    @pytest.mark.parametrize("path,expected", [
        ("C:\\a\\b", ("C:\\a", "b")),
        ("C:\\a", ("C:\\", "a")),
        ("C:\\", ("C:\\", "")),
        ("C:a", ("C:", "a")),
        ("C:", ("C:", "")),
        ("a/b\\c", ("a/b", "c")),
        ("\\a", ("\\", "a")),
        ("\\\\host\\share", ("\\\\host\\share", "")),
        ("\\\\host\\share\\", ("\\\\host\\share\\", "")),
        ("\\\\host\\share\\x", ("\\\\host\\share\\", "x")),
        ("\\\\host\\share\\x\\y", ("\\\\host\\share\\x", "y")),
    ])
    def test_split(self, win, path, expected):
        assert win.split(path) == expected

    def test_basename_ignores_prefix(self, win):
        assert win.basename("\\\\host\\share") == ""
        assert win.basename("C:file.txt") == "file.txt"
        assert win.dirname("C:file.txt") == "C:"


class TestUnixSplitext:
    @pytest.mark.parametrize("path,expected", [
        ("file.tar.gz", ("file.tar", ".gz")),
        ("file.txt", ("file", ".txt")),
        (".hidden", (".hidden", "")),
        (".hidden.txt", (".hidden", ".txt")),
        ("file", ("file", "")),
        ("file.", ("file", ".")),
        ("", ("", "")),
        ("dir.d/file", ("dir.d/file", "")),
        ("dir.d/.rc", ("dir.d/.rc", "")),
        ("/a/b.c/d.e", ("/a/b.c/d", ".e")),
        ("a/", ("a/", "")),
        (".", (".", "")),
        ("..", (".", ".")),
        ("...", ("..", ".")),
        ("a/..", ("a/.", ".")),
        ("..foo", (".", ".foo")),
    ])
    def test_splitext(self, unix, path, expected):
        assert unix.splitext(path) == expected

    def test_getext(self, unix):
        assert unix.getext("archive.tar.gz") == ".gz"
        assert unix.getext(".bashrc") == ""
        assert unix.getext("README") == ""


class TestWindowsSplitext:
    @pytest.mark.parametrize("path,expected", [
        ("C:\\dir\\file.txt", ("C:\\dir\\file", ".txt")),
        ("C:file.txt", ("C:file", ".txt")),
        ("C:.hidden", ("C:.hidden", "")),
        ("a.b\\c", ("a.b\\c", "")),
        ("a.b/c", ("a.b/c", "")),
        ("\\\\host.example\\share", ("\\\\host.example\\share", "")),
        ("\\\\host\\share.d", ("\\\\host\\share.d", "")),
        ("\\\\host\\share\\x.y", ("\\\\host\\share\\x", ".y")),
    ])
    def test_splitext(self, win, path, expected):
        assert win.splitext(path) == expected

    def test_getext(self, win):
        assert win.getext("C:\\Program Files\\app.exe") == ".exe"
