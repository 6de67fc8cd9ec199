"""Unit tests for cleaner domain models."""

import os
from datetime import UTC, datetime
from pathlib import Path

import pytest
from tempsweep.cleaner.models import (
    CleanSummary,
    DeletionOutcome,
    EntryKind,
    FileSystemEntry,
    OutcomeStatus,
)

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


class TestEntryKind:
    """Tests for EntryKind enum."""

    def test_values(self) -> None:
        """EntryKind values are lowercase strings."""
        assert EntryKind.FILE.value == "file"
        assert EntryKind.DIRECTORY.value == "directory"

    def test_log_labels(self) -> None:
        """Run log labels match the FILE/FOLDER convention."""
        assert EntryKind.FILE.label == "FILE"
        assert EntryKind.DIRECTORY.label == "FOLDER"


class TestFileSystemEntry:
    """Tests for FileSystemEntry."""

    def test_from_path_file(self, tmp_path: Path) -> None:
        """A regular file snapshot has no emptiness state."""
        target = tmp_path / "old.txt"
        target.write_text("content")

        entry = FileSystemEntry.from_path(target)

        assert entry.path == target
        assert entry.kind == EntryKind.FILE
        assert entry.is_empty is None
        assert entry.is_directory is False
        assert entry.modified.tzinfo is not None
        assert entry.accessed.tzinfo is not None
        assert entry.created.tzinfo is not None

    def test_from_path_empty_directory(self, tmp_path: Path) -> None:
        """An empty directory snapshot records is_empty=True."""
        target = tmp_path / "oldDir"
        target.mkdir()

        entry = FileSystemEntry.from_path(target)

        assert entry.kind == EntryKind.DIRECTORY
        assert entry.is_empty is True

    def test_from_path_non_empty_directory(self, tmp_path: Path) -> None:
        """A directory with a child records is_empty=False."""
        target = tmp_path / "oldDir"
        target.mkdir()
        (target / "child.txt").write_text("x")

        entry = FileSystemEntry.from_path(target)

        assert entry.is_empty is False

    def test_from_path_reflects_current_state(self, tmp_path: Path) -> None:
        """Each snapshot reads the child list afresh."""
        target = tmp_path / "oldDir"
        target.mkdir()
        child = target / "child.txt"
        child.write_text("x")
        assert FileSystemEntry.from_path(target).is_empty is False

        child.unlink()

        assert FileSystemEntry.from_path(target).is_empty is True

    def test_from_path_symlink_to_directory_is_file(self, tmp_path: Path) -> None:
        """Symlinks are not followed and count as files."""
        real_dir = tmp_path / "real"
        real_dir.mkdir()
        link = tmp_path / "link"
        link.symlink_to(real_dir)

        entry = FileSystemEntry.from_path(link)

        assert entry.kind == EntryKind.FILE
        assert entry.is_empty is None

    def test_from_path_dead_symlink(self, tmp_path: Path) -> None:
        """A dangling symlink can still be snapshotted."""
        link = tmp_path / "dead"
        link.symlink_to(tmp_path / "missing")

        entry = FileSystemEntry.from_path(link)

        assert entry.kind == EntryKind.FILE

    def test_from_stat_keeps_earlier_timestamps(self, tmp_path: Path) -> None:
        """Timestamps come from the given stat; only emptiness is read now."""
        target = tmp_path / "oldDir"
        target.mkdir()
        child = target / "child.txt"
        child.write_text("x")
        os.utime(target, (1_000_000, 2_000_000))
        st = target.lstat()

        child.unlink()
        entry = FileSystemEntry.from_stat(target, st)

        assert entry.is_empty is True
        assert entry.accessed == datetime.fromtimestamp(1_000_000, tz=UTC)
        assert entry.modified == datetime.fromtimestamp(2_000_000, tz=UTC)
        assert target.lstat().st_mtime != st.st_mtime

    def test_from_path_missing(self, tmp_path: Path) -> None:
        """A vanished path raises OSError."""
        with pytest.raises(FileNotFoundError):
            FileSystemEntry.from_path(tmp_path / "gone")

    def test_file_with_emptiness_rejected(self) -> None:
        """Files cannot carry an emptiness state."""
        with pytest.raises(ValueError, match="no emptiness"):
            FileSystemEntry(Path("/tmp/f"), EntryKind.FILE, EPOCH, EPOCH, EPOCH, is_empty=True)

    def test_directory_without_emptiness_rejected(self) -> None:
        """Directory snapshots must record emptiness."""
        with pytest.raises(ValueError, match="must record emptiness"):
            FileSystemEntry(Path("/tmp/d"), EntryKind.DIRECTORY, EPOCH, EPOCH, EPOCH)

    def test_immutable(self) -> None:
        """Snapshots are frozen."""
        entry = FileSystemEntry(Path("/tmp/f"), EntryKind.FILE, EPOCH, EPOCH, EPOCH)
        with pytest.raises(AttributeError):
            entry.kind = EntryKind.DIRECTORY  # type: ignore[misc]


class TestDeletionOutcome:
    """Tests for DeletionOutcome."""

    def test_error_flag(self) -> None:
        """Only SKIPPED_ERROR outcomes are errors."""
        error = DeletionOutcome(
            Path("/tmp/a"), EntryKind.FILE, OutcomeStatus.SKIPPED_ERROR, "Permission denied"
        )
        kept = DeletionOutcome(Path("/tmp/b"), EntryKind.FILE, OutcomeStatus.SKIPPED_INELIGIBLE)

        assert error.is_error is True
        assert kept.is_error is False
        assert kept.reason is None


class TestCleanSummary:
    """Tests for CleanSummary."""

    def test_counts_each_status(self) -> None:
        """Summary counts outcomes by status and works as a sink."""
        summary = CleanSummary()
        summary(DeletionOutcome(Path("/tmp/a"), EntryKind.FILE, OutcomeStatus.DELETED))
        summary(DeletionOutcome(Path("/tmp/b"), EntryKind.DIRECTORY, OutcomeStatus.DELETED))
        summary(DeletionOutcome(Path("/tmp/c"), EntryKind.FILE, OutcomeStatus.SKIPPED_INELIGIBLE))
        summary.add(
            DeletionOutcome(Path("/tmp/d"), EntryKind.FILE, OutcomeStatus.SKIPPED_ERROR, "busy")
        )

        assert summary.deleted == 2
        assert summary.ineligible == 1
        assert summary.errors == 1
        assert summary.total == 4
