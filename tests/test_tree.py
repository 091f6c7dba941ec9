"""Tests for folder_mirror.utils.tree module."""

import os
from pathlib import Path

import pytest

from folder_mirror.utils.tree import (
    counterpart,
    is_regular_file,
    iter_files,
    list_files,
    relative_path,
)


class TestIterFiles:
    """Test recursive file enumeration."""

    def test_empty_directory(self, tmp_path):
        assert list_files(tmp_path) == set()

    def test_nested_directory(self, tmp_path):
        (tmp_path / "sub" / "deeper").mkdir(parents=True)
        (tmp_path / "sub" / "deeper" / "leaf.txt").write_text("leaf")
        (tmp_path / "sub" / "nested.txt").write_text("nested")
        (tmp_path / "root.txt").write_text("root")
        assert list_files(tmp_path) == {"root.txt", "sub/nested.txt", "sub/deeper/leaf.txt"}

    def test_directories_not_yielded(self, tmp_path):
        (tmp_path / "empty_dir").mkdir()
        (tmp_path / "full_dir").mkdir()
        (tmp_path / "full_dir" / "f").write_text("x")
        assert list(iter_files(tmp_path)) == ["full_dir/f"]

    def test_hidden_files_included(self, tmp_path):
        (tmp_path / ".hidden").write_text("x")
        assert list_files(tmp_path) == {".hidden"}

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
    def test_symlinks_skipped(self, tmp_path):
        root = tmp_path / "root"
        outside = tmp_path / "outside"
        root.mkdir()
        outside.mkdir()
        (outside / "target.txt").write_text("x")
        (root / "real.txt").write_text("y")
        (root / "link.txt").symlink_to(outside / "target.txt")
        (root / "linkdir").symlink_to(outside, target_is_directory=True)
        assert list_files(root) == {"real.txt"}

    def test_nonexistent_root_raises(self, tmp_path):
        with pytest.raises(OSError):
            list_files(tmp_path / "nonexistent")

    def test_file_root_raises(self, tmp_path):
        f = tmp_path / "file.txt"
        f.write_text("x")
        with pytest.raises(NotADirectoryError):
            list_files(f)

    def test_forward_slash_paths(self, tmp_path):
        (tmp_path / "a" / "b").mkdir(parents=True)
        (tmp_path / "a" / "b" / "c.txt").write_text("x")
        for rel in iter_files(tmp_path):
            assert "\\" not in rel


class TestPathMapping:
    """Test relative path computation and counterpart mapping."""

    def test_relative_path(self, tmp_path):
        assert relative_path(tmp_path / "a" / "x.txt", tmp_path) == "a/x.txt"

    def test_relative_path_accepts_strings(self, tmp_path):
        assert relative_path(str(tmp_path / "x.txt"), str(tmp_path)) == "x.txt"

    def test_counterpart(self, tmp_path):
        other = tmp_path / "replica"
        assert counterpart("a/x.txt", other) == other / "a" / "x.txt"

    def test_round_trip_between_roots(self, tmp_path):
        source = tmp_path / "source"
        replica = tmp_path / "replica"
        src_file = source / "deep" / "tree" / "f.bin"
        rel = relative_path(src_file, source)
        assert counterpart(rel, replica) == replica / "deep" / "tree" / "f.bin"
        assert relative_path(counterpart(rel, replica), replica) == rel


class TestIsRegularFile:

    def test_regular_file(self, tmp_path):
        f = tmp_path / "f"
        f.write_text("x")
        assert is_regular_file(f) is True

    def test_directory_and_missing(self, tmp_path):
        assert is_regular_file(tmp_path) is False
        assert is_regular_file(tmp_path / "missing") is False

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
    def test_symlink(self, tmp_path):
        target = tmp_path / "t"
        target.write_text("x")
        link = tmp_path / "l"
        link.symlink_to(target)
        assert is_regular_file(Path(link)) is False
