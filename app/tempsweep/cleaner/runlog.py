"""Per-day append-only run log.

This module provides the RunLog class, the write-only sink that records
run events and skipped entries in a plain text file. A new file is
started for every calendar day; all runs on that day append to it.
"""

import logging
from collections.abc import Callable
from datetime import UTC, datetime
from pathlib import Path

from tempsweep.cleaner.models import DeletionOutcome
from tempsweep.core.paths import ensure_log_dir, get_log_path

logger = logging.getLogger(__name__)


class RunLog:
    """Appends tab-separated lines to the day's log file.

    Storage location: ~/.local/share/tempsweep/logs/YYYY-MM-DD - Log.txt

    Each line starts with a UTC timestamp in ISO 8601 round-trip form,
    followed by the bracketed entry type. Entry lines also carry the
    path before the message::

        2024-01-15T10:30:00.123456+00:00	[INFO]	START RUN
        2024-01-15T10:30:01.000000+00:00	[FILE]	/tmp/app.lock	Permission denied

    Write failures are logged and swallowed so that the cleaner is never
    interrupted by its own log.

    Args:
        log_dir: Optional override for the log directory.
        clock: Returns the current UTC time.
    """

    def __init__(
        self,
        log_dir: Path | None = None,
        *,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._log_dir = log_dir
        self._clock = clock or (lambda: datetime.now(UTC))
        self._write_failed = False

    @property
    def log_path(self) -> Path:
        """Path to today's log file (local calendar day)."""
        return get_log_path(self._clock().astimezone().date(), self._log_dir)

    def write_event(self, entry_type: str, message: str) -> None:
        """Record a run-level event such as START RUN.

        Args:
            entry_type: Bracketed type, e.g. "INFO".
            message: Free-form message.
        """
        self.write(entry_type, "", message)

    def write(self, entry_type: str, path: str, message: str) -> None:
        """Record one line.

        Args:
            entry_type: Bracketed type, e.g. "FILE" or "FOLDER".
            path: Affected path, or an empty string for run events.
            message: Free-form message.
        """
        timestamp = self._clock().astimezone(UTC).isoformat()
        if path.strip():
            line = f"{timestamp}\t[{entry_type}]\t{path}\t{message}\n"
        else:
            line = f"{timestamp}\t[{entry_type}]\t{message}\n"
        self._append(line)

    def __call__(self, outcome: DeletionOutcome) -> None:
        """Outcome sink: record entries that were skipped because of an error."""
        if outcome.is_error:
            self.write(outcome.kind.label, str(outcome.path), outcome.reason or "")

    def _append(self, line: str) -> None:
        try:
            ensure_log_dir(self._log_dir)
            with self.log_path.open(mode="a", encoding="utf-8") as f:
                f.write(line)
        except (OSError, RuntimeError) as e:
            # Only report the first failure of a run
            if not self._write_failed:
                logger.warning("Cannot write run log %s: %s", self.log_path, e)
            self._write_failed = True
