"""Unit tests for recursive deletion and clearing.

Tests the fail-fast and best-effort delete policies, expiry-based
clearing, and full clearing of directory trees.
"""

import os
import time
from pathlib import Path
from typing import Any
from unittest.mock import patch

import pytest
from fsops.filesystem.deletion import clear_all, clear_expired, delete, delete_best_effort

_real_unlink = Path.unlink
_real_rmdir = Path.rmdir


def _locked_unlink(self: Path, *args: Any, **kwargs: Any) -> None:
    """Path.unlink replacement that refuses to remove 'locked.txt'."""
    if self.name == "locked.txt":
        raise PermissionError(13, "Permission denied", str(self))
    _real_unlink(self, *args, **kwargs)


def _age(path: Path, seconds: float) -> None:
    """Set a path's modification time ``seconds`` into the past."""
    stamp = time.time() - seconds
    os.utime(path, (stamp, stamp))


@pytest.fixture
def locked_tree(tmp_path: Path) -> Path:
    """Directory with an undeletable file between two deletable ones."""
    root = tmp_path / "locked_tree"
    root.mkdir()
    (root / "a.txt").write_text("a")
    (root / "locked.txt").write_text("locked")
    (root / "z.txt").write_text("z")
    return root


class TestDelete:
    """Tests for the fail-fast delete."""

    @pytest.mark.parametrize("path", [None, "", "   "])
    def test_blank_path_is_success(self, path: str | None) -> None:
        """Deleting nothing trivially succeeds."""
        assert delete(path) is True

    def test_missing_path_is_success(self, tmp_path: Path) -> None:
        """A path that does not exist counts as deleted."""
        missing = tmp_path / "missing"

        assert delete(str(missing)) is True
        assert not missing.exists()

    def test_delete_file(self, tmp_path: Path) -> None:
        """A single file is removed."""
        target = tmp_path / "file.txt"
        target.write_text("content")

        assert delete(target) is True
        assert not target.exists()

    def test_delete_tree(self, sample_tree: Path) -> None:
        """A nested tree is removed completely."""
        assert delete(str(sample_tree)) is True
        assert not sample_tree.exists()

    def test_symlinked_directory_not_followed(self, tmp_path: Path) -> None:
        """A symlink to a directory is removed without touching the target."""
        real = tmp_path / "real"
        real.mkdir()
        (real / "keep.txt").write_text("keep")
        tree = tmp_path / "tree"
        tree.mkdir()
        (tree / "link").symlink_to(real, target_is_directory=True)

        assert delete(tree) is True
        assert not tree.exists()
        assert (real / "keep.txt").exists()

    def test_deep_tree_does_not_recurse(self, tmp_path: Path) -> None:
        """Trees deeper than the interpreter's recursion limit are deleted."""
        root = tmp_path / "deep"
        root.mkdir()
        current = root
        for _ in range(1100):
            current = current / "d"
            current.mkdir()

        assert delete(root) is True
        assert not root.exists()

    def test_aborts_on_first_failure(self, locked_tree: Path) -> None:
        """The first undeletable child stops the walk and reports failure."""
        with patch.object(Path, "unlink", autospec=True, side_effect=_locked_unlink):
            result = delete(locked_tree)

        assert result is False
        assert locked_tree.is_dir()
        assert not (locked_tree / "a.txt").exists()
        assert (locked_tree / "locked.txt").exists()
        # Entries after the failure are never visited
        assert (locked_tree / "z.txt").exists()


class TestDeleteBestEffort:
    """Tests for the best-effort delete."""

    def test_empty_and_missing_are_success(self, tmp_path: Path) -> None:
        """Empty and absent paths succeed without doing anything."""
        assert delete_best_effort("") is True
        assert delete_best_effort(None) is True
        assert delete_best_effort(tmp_path / "missing") is True

    def test_delete_file(self, tmp_path: Path) -> None:
        """A single file is removed and its outcome returned."""
        target = tmp_path / "file.txt"
        target.write_text("content")

        assert delete_best_effort(target) is True
        assert not target.exists()

    def test_delete_tree(self, sample_tree: Path) -> None:
        """A nested tree is removed completely."""
        assert delete_best_effort(sample_tree) is True
        assert not sample_tree.exists()

    def test_continues_past_failures(self, locked_tree: Path) -> None:
        """Siblings of an undeletable child are still removed."""
        with patch.object(Path, "unlink", autospec=True, side_effect=_locked_unlink):
            result = delete_best_effort(locked_tree)

        # The directory is not empty, so removing it fails
        assert result is False
        assert not (locked_tree / "a.txt").exists()
        assert not (locked_tree / "z.txt").exists()
        assert (locked_tree / "locked.txt").exists()

    def test_result_follows_top_level_removal(self, locked_tree: Path) -> None:
        """Child failures are ignored once the top-level node is removed."""

        def rmdir_ignoring_content(self: Path) -> None:
            if self == locked_tree:
                for child in self.iterdir():
                    _real_unlink(child)
            _real_rmdir(self)

        with (
            patch.object(Path, "unlink", autospec=True, side_effect=_locked_unlink),
            patch.object(Path, "rmdir", autospec=True, side_effect=rmdir_ignoring_content),
        ):
            result = delete_best_effort(locked_tree)

        assert result is True
        assert not locked_tree.exists()


class TestClearExpired:
    """Tests for clear_expired."""

    def test_removes_only_old_entries(self, tmp_path: Path) -> None:
        """One old and one new file: only the old one goes."""
        old = tmp_path / "old.log"
        new = tmp_path / "new.log"
        old.write_text("old")
        new.write_text("new")
        _age(old, 3600)

        result = clear_expired(tmp_path, max_age_ms=60_000)

        assert result.deleted == 1
        assert int(result) == 1
        assert result.failures == ()
        assert not old.exists()
        assert new.exists()

    def test_counts_nested_entries(self, sample_tree: Path) -> None:
        """Old entries in subdirectories are removed and counted."""
        _age(sample_tree / "nested" / "b.txt", 3600)
        _age(sample_tree / "nested" / "deeper" / "c.bin", 3600)

        result = clear_expired(sample_tree, max_age_ms=60_000)

        assert result.deleted == 2
        assert (sample_tree / "a.txt").exists()
        assert (sample_tree / "nested" / "deeper").is_dir()

    def test_old_empty_directory_is_removed(self, sample_tree: Path) -> None:
        """An aged, already empty directory is subject to the age check."""
        _age(sample_tree / "empty", 3600)

        result = clear_expired(sample_tree, max_age_ms=60_000)

        assert result.deleted == 1
        assert not (sample_tree / "empty").exists()

    def test_emptied_directory_checked_after_children(self, tmp_path: Path) -> None:
        """Clearing a directory's children refreshes its mtime, so it stays."""
        folder = tmp_path / "folder"
        folder.mkdir()
        (folder / "old.txt").write_text("old")
        _age(folder / "old.txt", 3600)
        _age(folder, 3600)

        result = clear_expired(tmp_path, max_age_ms=60_000)

        assert result.deleted == 1
        assert folder.is_dir()

    def test_missing_directory_yields_zero(self, tmp_path: Path) -> None:
        """A non-existent directory clears nothing."""
        assert clear_expired(tmp_path / "missing", 0).deleted == 0

    def test_file_input_yields_zero(self, tmp_path: Path) -> None:
        """A regular file is not a directory to clear."""
        target = tmp_path / "file.txt"
        target.write_text("content")

        assert clear_expired(target, 0).deleted == 0
        assert target.exists()

    def test_failures_are_collected_not_raised(self, tmp_path: Path) -> None:
        """An undeletable old entry is reported, others still removed."""
        for file_name in ("a.txt", "locked.txt"):
            (tmp_path / file_name).write_text(file_name)
            _age(tmp_path / file_name, 3600)

        with patch.object(Path, "unlink", autospec=True, side_effect=_locked_unlink):
            result = clear_expired(tmp_path, max_age_ms=1000)

        assert result.deleted == 1
        assert result.failures == (str(tmp_path / "locked.txt"),)

    def test_symlinked_root_is_cleared_through_link(self, tmp_path: Path) -> None:
        """A root that links to a directory is cleared in the link target."""
        real = tmp_path / "real"
        real.mkdir()
        old = real / "old.log"
        old.write_text("old")
        _age(old, 3600)
        link = tmp_path / "cache"
        link.symlink_to(real, target_is_directory=True)

        result = clear_expired(link, max_age_ms=60_000)

        assert result.deleted == 1
        assert not old.exists()
        assert link.is_symlink()
        assert real.is_dir()

    def test_symlinks_below_root_not_followed(self, tmp_path: Path) -> None:
        """A link inside the tree is removed as a link, its target kept."""
        outside = tmp_path / "outside"
        outside.mkdir()
        (outside / "keep.txt").write_text("keep")
        root = tmp_path / "root"
        root.mkdir()
        (root / "link").symlink_to(outside, target_is_directory=True)

        result = clear_all(root)

        assert result.deleted == 1
        assert (outside / "keep.txt").exists()


class TestClearAll:
    """Tests for clear_all."""

    def test_removes_every_entry(self, sample_tree: Path) -> None:
        """Every file and directory below the root is removed and counted."""
        result = clear_all(sample_tree)

        # a.txt, nested, b.txt, deeper, c.bin, empty
        assert result.deleted == 6
        assert sample_tree.is_dir()
        assert list(sample_tree.iterdir()) == []

    def test_symlinked_root(self, sample_tree: Path, tmp_path: Path) -> None:
        """Clearing through a symlinked root empties the real directory."""
        link = tmp_path / "link"
        link.symlink_to(sample_tree, target_is_directory=True)

        assert clear_all(link).deleted == 6
        assert list(sample_tree.iterdir()) == []

    def test_missing_directory_yields_zero(self, tmp_path: Path) -> None:
        """A non-existent directory clears nothing."""
        assert clear_all(tmp_path / "missing").deleted == 0
