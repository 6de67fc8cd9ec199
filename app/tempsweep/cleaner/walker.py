"""Recursive post-order cleaner for the temp directory.

Walks a directory tree depth-first and evaluates every entry only after
all of its descendants have reached a terminal state, so a directory is
judged empty or not against what is actually left on disk. Failures are
turned into outcomes for the affected entry; none of them stops the walk.
"""

import logging
import os
import stat
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from tempsweep.cleaner.eligibility import can_delete
from tempsweep.cleaner.models import DeletionOutcome, EntryKind, FileSystemEntry, OutcomeStatus

logger = logging.getLogger(__name__)

OutcomeSink = Callable[[DeletionOutcome], None]


def fan_out(*sinks: OutcomeSink | None) -> OutcomeSink:
    """Combine several outcome sinks into one.

    Args:
        sinks: Sinks to call in order. None entries are ignored.

    Returns:
        A sink that forwards every outcome to each given sink.
    """
    targets = [s for s in sinks if s is not None]

    def _forward(outcome: DeletionOutcome) -> None:
        for target in targets:
            target(outcome)

    return _forward


def _describe(error: OSError) -> str:
    return error.strerror or str(error)


class TreeCleaner:
    """Deletes stale entries below a root directory.

    The root itself is never deleted. Directories are removed with
    rmdir only, so a directory that gains a child after its emptiness
    check simply fails to delete.

    Args:
        boot_instant: Last boot instant in UTC. Entries touched at or
            after this instant on any time axis are kept.
        sink: Optional callable receiving one DeletionOutcome per entry.
    """

    def __init__(self, boot_instant: datetime, sink: OutcomeSink | None = None) -> None:
        self._boot_instant = boot_instant
        self._sink = sink

    def clean(self, root: Path) -> None:
        """Run one best-effort pass over everything below root.

        Args:
            root: Directory whose contents should be cleaned.
        """
        try:
            is_dir = stat.S_ISDIR(root.stat().st_mode)
        except OSError as e:
            self._emit(self._error(root, EntryKind.DIRECTORY, e))
            return

        if not is_dir:
            self._emit(
                DeletionOutcome(
                    path=root,
                    kind=EntryKind.DIRECTORY,
                    status=OutcomeStatus.SKIPPED_ERROR,
                    reason="Not a directory",
                )
            )
            return

        logger.debug("Cleaning %s (boot instant %s)", root, self._boot_instant.isoformat())
        failure = self._clean_directory(root)
        if failure is not None:
            self._emit(failure)

    def _clean_directory(self, directory: Path) -> DeletionOutcome | None:
        """Process every child of a directory, deepest entries first.

        Returns:
            An error outcome for the directory itself if it could not be
            enumerated, None otherwise.
        """
        try:
            children = sorted(directory.iterdir())
        except OSError as e:
            logger.warning("Cannot enumerate directory %s: %s", directory, _describe(e))
            return self._error(directory, EntryKind.DIRECTORY, e)

        for child in children:
            self._emit(self._process(child))
        return None

    def _process(self, path: Path) -> DeletionOutcome:
        """Recurse into a directory child if needed, then evaluate it.

        Timestamps come from the lstat taken before the walk touches the
        entry. Listing a directory can bump its atime and removing its
        children bumps its mtime; neither is activity since boot.
        """
        try:
            st = path.lstat()
        except OSError as e:
            return self._error(path, EntryKind.FILE, e)

        if stat.S_ISDIR(st.st_mode):
            failure = self._clean_directory(path)
            if failure is not None:
                return failure

        return self._evaluate(path, st)

    def _evaluate(self, path: Path, st: os.stat_result) -> DeletionOutcome:
        """Check emptiness now and delete the entry if it is eligible."""
        try:
            entry = FileSystemEntry.from_stat(path, st)
        except OSError as e:
            return self._error(path, EntryKind.DIRECTORY, e)

        if not can_delete(entry, self._boot_instant):
            return DeletionOutcome(
                path=path,
                kind=entry.kind,
                status=OutcomeStatus.SKIPPED_INELIGIBLE,
            )

        return self._delete(entry)

    def _delete(self, entry: FileSystemEntry) -> DeletionOutcome:
        """Remove a single entry, never forcing or retrying."""
        try:
            if entry.is_directory:
                entry.path.rmdir()
            else:
                entry.path.unlink()
        except OSError as e:
            # Most likely held open by another process; leave it be
            return self._error(entry.path, entry.kind, e)

        return DeletionOutcome(path=entry.path, kind=entry.kind, status=OutcomeStatus.DELETED)

    @staticmethod
    def _error(path: Path, kind: EntryKind, error: OSError) -> DeletionOutcome:
        return DeletionOutcome(
            path=path,
            kind=kind,
            status=OutcomeStatus.SKIPPED_ERROR,
            reason=_describe(error),
        )

    def _emit(self, outcome: DeletionOutcome) -> None:
        if outcome.status == OutcomeStatus.DELETED:
            logger.info("Deleted %s %s", outcome.kind.value, outcome.path)
        elif outcome.status == OutcomeStatus.SKIPPED_INELIGIBLE:
            logger.debug("Kept %s %s", outcome.kind.value, outcome.path)
        else:
            logger.info("Skipped %s %s: %s", outcome.kind.value, outcome.path, outcome.reason)

        if self._sink is not None:
            self._sink(outcome)
