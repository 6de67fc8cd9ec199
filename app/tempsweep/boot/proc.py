"""Linux boot time source backed by /proc/stat."""

import logging
from datetime import UTC, datetime
from pathlib import Path

from tempsweep.boot.base import BootTimeSource

logger = logging.getLogger(__name__)

_PROC_STAT = Path("/proc/stat")


class ProcStatSource(BootTimeSource):
    """Reads the ``btime`` line of /proc/stat.

    The kernel reports boot time as whole seconds since the Unix epoch.

    Args:
        path: Location of the stat file, overridable for testing.
    """

    def __init__(self, path: Path = _PROC_STAT) -> None:
        self._path = path

    @property
    def name(self) -> str:
        return "proc-stat"

    def is_available(self) -> bool:
        """Check if the stat file exists."""
        return self._path.is_file()

    def read(self) -> datetime | None:
        """Parse the boot instant out of /proc/stat.

        Returns:
            UTC boot instant, or None if no ``btime`` line is present.

        Raises:
            OSError: If the file cannot be read.
            ValueError: If the ``btime`` value is not an integer.
        """
        text = self._path.read_text(encoding="ascii", errors="replace")
        for line in text.splitlines():
            parts = line.split()
            if len(parts) == 2 and parts[0] == "btime":
                return datetime.fromtimestamp(int(parts[1]), tz=UTC)

        logger.debug("No btime line found in %s", self._path)
        return None
