"""Tests for collector module."""

import os

import pytest

from lstree.collector import InvalidPathError, classify_path, collect, is_ignored
from lstree.models import EntryKind


def _touch(path):
    path.write_text("x", encoding="utf-8")
    return path


class TestClassifyPath:
    def test_file(self, tmp_path):
        assert classify_path(_touch(tmp_path / "a.txt")) is EntryKind.FILE

    def test_directory(self, tmp_path):
        assert classify_path(tmp_path) is EntryKind.DIRECTORY

    def test_missing(self, tmp_path):
        with pytest.raises(InvalidPathError, match="does not exist"):
            classify_path(tmp_path / "nope")

    def test_broken_symlink(self, tmp_path):
        link = tmp_path / "dangling"
        os.symlink(tmp_path / "missing", link)
        with pytest.raises(InvalidPathError, match="neither a file nor a directory") as exc:
            classify_path(link)
        assert exc.value.path == str(link)

    def test_symlink_to_directory_is_followed(self, tmp_path):
        (tmp_path / "real").mkdir()
        os.symlink(tmp_path / "real", tmp_path / "alias")
        assert classify_path(tmp_path / "alias") is EntryKind.DIRECTORY


class TestIsIgnored:
    def test_exact_match(self):
        assert is_ignored("build", {"build"}) is True

    def test_no_prefix_or_glob(self):
        assert is_ignored("builder", {"build"}) is False
        assert is_ignored(".build", {"build"}) is False
        assert is_ignored("build", {"b*"}) is False

    def test_case_sensitive(self):
        assert is_ignored("Build", {"build"}) is False


class TestCollect:
    def test_sorted_and_interleaved(self, tmp_path):
        _touch(tmp_path / "c.txt")
        (tmp_path / "b").mkdir()
        _touch(tmp_path / "a.txt")
        entries = collect(tmp_path)
        assert [e.name for e in entries] == ["a.txt", "b", "c.txt"]
        assert [e.kind for e in entries] == [
            EntryKind.FILE,
            EntryKind.DIRECTORY,
            EntryKind.FILE,
        ]

    def test_codepoint_order(self, tmp_path):
        for name in ("b", "C", "_x", "a"):
            _touch(tmp_path / name)
        assert [e.name for e in collect(tmp_path)] == ["C", "_x", "a", "b"]

    def test_unsorted_keeps_all_entries(self, tmp_path):
        for name in ("z", "m", "a"):
            _touch(tmp_path / name)
        entries = collect(tmp_path, sort=False)
        assert sorted(e.name for e in entries) == ["a", "m", "z"]

    def test_ignore(self, tmp_path):
        for name in ("build", "builder", ".build", "src"):
            (tmp_path / name).mkdir()
        names = [e.name for e in collect(tmp_path, ignore={"build"})]
        assert names == [".build", "builder", "src"]

    def test_entry_paths(self, tmp_path):
        _touch(tmp_path / "a.txt")
        (entry,) = collect(tmp_path)
        assert entry.path == tmp_path / "a.txt"

    def test_empty_directory(self, tmp_path):
        assert collect(tmp_path) == []

    def test_invalid_child(self, tmp_path):
        os.symlink(tmp_path / "missing", tmp_path / "dangling")
        with pytest.raises(InvalidPathError):
            collect(tmp_path)

    def test_invalid_child_can_be_ignored(self, tmp_path):
        os.symlink(tmp_path / "missing", tmp_path / "dangling")
        assert collect(tmp_path, ignore={"dangling"}) == []
