"""BSD/macOS boot time source backed by ``sysctl kern.boottime``."""

import logging
import re
from datetime import UTC, datetime, timedelta

from tempsweep.boot.base import BootTimeSource
from tempsweep.utils.shell import command_exists, run_command

logger = logging.getLogger(__name__)

# "{ sec = 1705314600, usec = 123456 } Mon Jan 15 10:30:00 2024"
_BOOTTIME_PATTERN = re.compile(r"sec\s*=\s*(\d+)(?:,\s*usec\s*=\s*(\d+))?")


class SysctlSource(BootTimeSource):
    """Reads ``kern.boottime`` via the sysctl command."""

    @property
    def name(self) -> str:
        return "sysctl"

    def is_available(self) -> bool:
        """Check if the sysctl command is on PATH."""
        return command_exists("sysctl")

    def read(self) -> datetime | None:
        """Run sysctl and parse the boot timeval.

        Returns:
            UTC boot instant, or None if sysctl printed nothing.

        Raises:
            RuntimeError: If sysctl exits with an error.
            ValueError: If the output has no ``sec =`` field.
        """
        result = run_command(["sysctl", "-n", "kern.boottime"], timeout=10.0)
        if not result.success:
            msg = f"sysctl kern.boottime failed: {result.stderr.strip()}"
            raise RuntimeError(msg)

        output = result.stdout.strip()
        if not output:
            return None

        match = _BOOTTIME_PATTERN.search(output)
        if match is None:
            msg = f"Unrecognized kern.boottime output: {output[:100]!r}"
            raise ValueError(msg)

        seconds, micros = match.groups()
        instant = datetime.fromtimestamp(int(seconds), tz=UTC)
        return instant + timedelta(microseconds=int(micros or 0))
