"""Cleaner domain models.

This module defines the data structures the tree cleaner works with:
live snapshots of filesystem entries and the per-entry outcome of a
cleaning pass.
"""

import os
import stat
from dataclasses import dataclass
from datetime import UTC, datetime
from enum import Enum
from pathlib import Path


class EntryKind(str, Enum):
    """Kind of filesystem entry.

    Symbolic links are never followed and count as files.

    Attributes:
        FILE: Regular file, symlink, or other non-directory entry.
        DIRECTORY: Real directory.
    """

    FILE = "file"
    DIRECTORY = "directory"

    @property
    def label(self) -> str:
        """Upper-case label used in the run log."""
        return "FOLDER" if self is EntryKind.DIRECTORY else "FILE"


class OutcomeStatus(str, Enum):
    """Terminal state of an entry after evaluation.

    Attributes:
        DELETED: Entry was eligible and removed.
        SKIPPED_INELIGIBLE: Entry failed the eligibility test and was kept.
        SKIPPED_ERROR: Entry could not be inspected, enumerated or removed.
    """

    DELETED = "deleted"
    SKIPPED_INELIGIBLE = "skipped_ineligible"
    SKIPPED_ERROR = "skipped_error"


def _to_utc(timestamp: float) -> datetime:
    return datetime.fromtimestamp(timestamp, tz=UTC)


def creation_timestamp(st: os.stat_result) -> float:
    """Best available creation time of a stat result, in epoch seconds."""
    # st_ctime is inode change time on POSIX, which is never before birth
    birthtime: float | None = getattr(st, "st_birthtime", None)
    return birthtime if birthtime is not None else st.st_ctime


def directory_is_empty(path: Path) -> bool:
    """Read at most one child of a directory to decide if it is empty."""
    with os.scandir(path) as it:
        return next(it, None) is None


@dataclass(frozen=True, slots=True)
class FileSystemEntry:
    """Point-in-time snapshot of a file or directory.

    Attributes:
        path: Absolute path of the entry.
        kind: File or directory.
        created: Creation time in UTC.
        accessed: Last access time in UTC.
        modified: Last modification time in UTC.
        is_empty: Whether a directory had no children when the snapshot
            was taken. Always None for files.
    """

    path: Path
    kind: EntryKind
    created: datetime
    accessed: datetime
    modified: datetime
    is_empty: bool | None = None

    def __post_init__(self) -> None:
        """Validate that emptiness is only recorded for directories."""
        if self.kind == EntryKind.FILE and self.is_empty is not None:
            msg = f"Files have no emptiness state: {self.path}"
            raise ValueError(msg)
        if self.kind == EntryKind.DIRECTORY and self.is_empty is None:
            msg = f"Directory snapshot must record emptiness: {self.path}"
            raise ValueError(msg)

    @property
    def is_directory(self) -> bool:
        return self.kind == EntryKind.DIRECTORY

    @classmethod
    def from_path(cls, path: Path) -> "FileSystemEntry":
        """Take a fresh snapshot of an entry without following symlinks.

        For directories the child list is read immediately, so the
        emptiness recorded reflects the directory at this moment.

        Args:
            path: Path to inspect.

        Returns:
            FileSystemEntry for the path.

        Raises:
            OSError: If the entry vanished or cannot be inspected.
        """
        return cls.from_stat(path, path.lstat())

    @classmethod
    def from_stat(cls, path: Path, st: os.stat_result) -> "FileSystemEntry":
        """Build a snapshot from timestamps already read with lstat.

        Only the emptiness of a directory is read from disk here, so the
        timestamps stay as they were when ``st`` was taken even if the
        directory's children have been removed since.

        Args:
            path: Path the stat result belongs to.
            st: Result of ``path.lstat()``.

        Returns:
            FileSystemEntry for the path.

        Raises:
            OSError: If a directory cannot be read for emptiness.
        """
        is_dir = stat.S_ISDIR(st.st_mode)
        return cls(
            path=path,
            kind=EntryKind.DIRECTORY if is_dir else EntryKind.FILE,
            created=_to_utc(creation_timestamp(st)),
            accessed=_to_utc(st.st_atime),
            modified=_to_utc(st.st_mtime),
            is_empty=directory_is_empty(path) if is_dir else None,
        )


@dataclass(frozen=True, slots=True)
class DeletionOutcome:
    """Result of evaluating a single entry.

    Attributes:
        path: Absolute path of the entry.
        kind: File or directory.
        status: Terminal state reached.
        reason: OS error message for SKIPPED_ERROR, None otherwise.
    """

    path: Path
    kind: EntryKind
    status: OutcomeStatus
    reason: str | None = None

    @property
    def is_error(self) -> bool:
        return self.status == OutcomeStatus.SKIPPED_ERROR


@dataclass(slots=True)
class CleanSummary:
    """Running tally of outcomes for one pass.

    Instances are callable so they can be passed directly as an outcome sink.

    Attributes:
        deleted: Number of entries removed.
        ineligible: Number of entries kept because they failed the test.
        errors: Number of entries that hit an error.
    """

    deleted: int = 0
    ineligible: int = 0
    errors: int = 0

    def __call__(self, outcome: DeletionOutcome) -> None:
        self.add(outcome)

    def add(self, outcome: DeletionOutcome) -> None:
        """Count one outcome."""
        if outcome.status == OutcomeStatus.DELETED:
            self.deleted += 1
        elif outcome.status == OutcomeStatus.SKIPPED_INELIGIBLE:
            self.ineligible += 1
        else:
            self.errors += 1

    @property
    def total(self) -> int:
        return self.deleted + self.ineligible + self.errors
