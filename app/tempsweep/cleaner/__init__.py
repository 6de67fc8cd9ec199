"""Temp directory cleaning.

This module provides the entry snapshot and outcome models, the
eligibility test, the post-order tree cleaner, and the run log sink.
"""

from tempsweep.cleaner.eligibility import can_delete, predates_boot
from tempsweep.cleaner.models import (
    CleanSummary,
    DeletionOutcome,
    EntryKind,
    FileSystemEntry,
    OutcomeStatus,
)
from tempsweep.cleaner.runlog import RunLog
from tempsweep.cleaner.walker import OutcomeSink, TreeCleaner, fan_out

__all__ = [
    "CleanSummary",
    "DeletionOutcome",
    "EntryKind",
    "FileSystemEntry",
    "OutcomeSink",
    "OutcomeStatus",
    "RunLog",
    "TreeCleaner",
    "can_delete",
    "fan_out",
    "predates_boot",
]
