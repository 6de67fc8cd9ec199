"""Boot instant resolution from host operating system metadata.

This module exports the oracle that resolves the last boot instant
and the per-platform sources it queries.
"""

from tempsweep.boot.base import BootTimeSource
from tempsweep.boot.oracle import BOOT_INSTANT_MIN, BootTimeOracle, default_sources
from tempsweep.boot.proc import ProcStatSource
from tempsweep.boot.sysctl import SysctlSource
from tempsweep.boot.wmi import WmiSource, parse_dmtf_datetime

__all__ = [
    "BOOT_INSTANT_MIN",
    "BootTimeOracle",
    "BootTimeSource",
    "ProcStatSource",
    "SysctlSource",
    "WmiSource",
    "default_sources",
    "parse_dmtf_datetime",
]
