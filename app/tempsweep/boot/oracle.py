"""Boot instant resolution.

The boot instant is resolved once per run and then treated as a
constant. Any failure resolves to BOOT_INSTANT_MIN, the earliest
representable instant, so that no entry can ever satisfy the
"older than boot" test and nothing gets deleted.
"""

import logging
import subprocess
import sys
from collections.abc import Callable, Iterable
from datetime import UTC, datetime

from tempsweep.boot.base import BootTimeSource
from tempsweep.boot.proc import ProcStatSource
from tempsweep.boot.sysctl import SysctlSource
from tempsweep.boot.wmi import WmiSource

logger = logging.getLogger(__name__)

BOOT_INSTANT_MIN = datetime.min.replace(tzinfo=UTC)


def default_sources(platform: str | None = None) -> list[BootTimeSource]:
    """Get the boot time sources appropriate for a platform.

    Args:
        platform: A ``sys.platform`` value. Defaults to the running platform.

    Returns:
        Ordered list of sources to consider.
    """
    platform = platform or sys.platform
    if platform.startswith(("win32", "cygwin")):
        return [WmiSource()]
    if platform == "darwin" or "bsd" in platform:
        return [SysctlSource()]
    return [ProcStatSource()]


class BootTimeOracle:
    """Answers "when did this host last boot?" once per run.

    The first available source is queried exactly once; the answer, or
    BOOT_INSTANT_MIN on failure, is cached for the lifetime of the oracle.

    Args:
        sources: Sources to consider, in priority order. Defaults to
            default_sources() for the running platform.
        clock: Returns the current UTC time; used to reject boot
            instants that lie in the future.
    """

    def __init__(
        self,
        sources: Iterable[BootTimeSource] | None = None,
        *,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._sources = list(sources) if sources is not None else default_sources()
        self._clock = clock or (lambda: datetime.now(UTC))
        self._instant: datetime | None = None

    def resolve(self) -> datetime:
        """Return the last boot instant in UTC.

        Returns:
            The boot instant, or BOOT_INSTANT_MIN if it cannot be determined.
        """
        if self._instant is None:
            self._instant = self._query()
        return self._instant

    def _query(self) -> datetime:
        source = next((s for s in self._sources if s.is_available()), None)
        if source is None:
            logger.warning("No boot time source available; nothing will be deleted")
            return BOOT_INSTANT_MIN

        try:
            instant = source.read()
        except (OSError, ValueError, RuntimeError, subprocess.SubprocessError) as e:
            logger.warning("Boot time query via %s failed: %s", source.name, e)
            return BOOT_INSTANT_MIN

        if instant is None:
            logger.warning("Boot time query via %s returned no value", source.name)
            return BOOT_INSTANT_MIN

        if instant.tzinfo is None:
            logger.warning("Boot time from %s has no timezone: %s", source.name, instant)
            return BOOT_INSTANT_MIN

        instant = instant.astimezone(UTC)
        if instant > self._clock():
            logger.warning("Boot time from %s lies in the future: %s", source.name, instant)
            return BOOT_INSTANT_MIN

        logger.debug("Last boot via %s: %s", source.name, instant.isoformat())
        return instant
