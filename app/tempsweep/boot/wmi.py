"""Windows boot time source backed by WMI.

Queries ``Win32_OperatingSystem.LastBootUpTime`` through Windows
PowerShell. ``Get-WmiObject`` is used rather than ``Get-CimInstance``
because it returns the raw DMTF datetime string, which carries an
explicit UTC offset and does not depend on the host's locale.

Note that Windows with Fast Startup enabled only refreshes
LastBootUpTime on a full restart, not after shutdown, sleep or
hibernate. The reported instant can therefore be older than the real
one, which only makes the cleaner delete less.
"""

import logging
import re
from datetime import UTC, datetime, timedelta, timezone

from tempsweep.boot.base import BootTimeSource
from tempsweep.utils.shell import command_exists, run_command

logger = logging.getLogger(__name__)

_POWERSHELL = "powershell"

_QUERY = (
    "Get-WmiObject -Class Win32_OperatingSystem | "
    "Select-Object -First 1 -ExpandProperty LastBootUpTime"
)

# yyyymmddHHMMSS.mmmmmmsUUU where UUU is the UTC offset in minutes
_DMTF_PATTERN = re.compile(r"^(\d{14})\.(\d{6})([+-])(\d{3})$")


def parse_dmtf_datetime(value: str) -> datetime:
    """Convert a DMTF (CIM) datetime string to a UTC datetime.

    Args:
        value: String such as ``20240115103000.500000+060``.

    Returns:
        Timezone-aware datetime in UTC.

    Raises:
        ValueError: If the string is not a DMTF datetime.
    """
    match = _DMTF_PATTERN.match(value.strip())
    if match is None:
        msg = f"Not a DMTF datetime: {value!r}"
        raise ValueError(msg)

    stamp, micros, sign, offset = match.groups()
    minutes = int(offset) if sign == "+" else -int(offset)
    local = datetime.strptime(stamp, "%Y%m%d%H%M%S").replace(
        microsecond=int(micros),
        tzinfo=timezone(timedelta(minutes=minutes)),
    )
    return local.astimezone(UTC)


class WmiSource(BootTimeSource):
    """Reads LastBootUpTime from the first Win32_OperatingSystem instance."""

    @property
    def name(self) -> str:
        return "wmi"

    def is_available(self) -> bool:
        """Check if Windows PowerShell is on PATH."""
        return command_exists(_POWERSHELL)

    def read(self) -> datetime | None:
        """Run the WMI query and parse its result.

        Returns:
            UTC boot instant, or None if the query returned no instance.

        Raises:
            RuntimeError: If PowerShell exits with an error.
            ValueError: If the returned value is not a DMTF datetime.
        """
        result = run_command(
            [_POWERSHELL, "-NoProfile", "-NonInteractive", "-Command", _QUERY],
            timeout=30.0,
        )
        if not result.success:
            msg = f"WMI query failed: {result.stderr.strip()}"
            raise RuntimeError(msg)

        value = result.stdout.strip()
        if not value:
            logger.debug("WMI query returned no Win32_OperatingSystem instance")
            return None

        return parse_dmtf_datetime(value.splitlines()[0])
