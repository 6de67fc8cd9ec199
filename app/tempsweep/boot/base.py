"""Abstract base class for boot time sources.

This module defines the BootTimeSource interface that every host
metadata query used to find the last boot instant must implement.
"""

from abc import ABC, abstractmethod
from datetime import datetime


class BootTimeSource(ABC):
    """Abstract base class for all boot time sources.

    A source queries one kind of operating system metadata for the
    instant the host last booted. Sources perform a single read per call
    and never retry.

    Example:
        >>> source = ProcStatSource()
        >>> if source.is_available():
        ...     print(source.read())
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return a short human-readable name for log messages."""

    @abstractmethod
    def is_available(self) -> bool:
        """Check if this source can be queried on the running host.

        Returns:
            True if the underlying interface exists, False otherwise.
        """

    @abstractmethod
    def read(self) -> datetime | None:
        """Query the host for its last boot instant.

        Returns:
            Timezone-aware UTC datetime, or None if the query returned no value.

        Raises:
            OSError: If the interface cannot be read.
            ValueError: If the returned value cannot be parsed.
            RuntimeError: If the query command reports failure.
        """
