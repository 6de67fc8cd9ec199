"""Deletion eligibility test.

An entry may be removed only if nothing has touched it since the last
boot: its creation, access and modification times must all be strictly
earlier than the boot instant. A directory must additionally be empty.
"""

from datetime import datetime

from tempsweep.cleaner.models import FileSystemEntry


def predates_boot(entry: FileSystemEntry, boot_instant: datetime) -> bool:
    """Check that every timestamp of an entry is strictly before boot."""
    return (
        entry.created < boot_instant
        and entry.accessed < boot_instant
        and entry.modified < boot_instant
    )


def can_delete(entry: FileSystemEntry, boot_instant: datetime) -> bool:
    """Decide whether an entry is eligible for deletion.

    Args:
        entry: Snapshot taken at decision time.
        boot_instant: Last boot instant in UTC.

    Returns:
        True if the entry predates boot on all three time axes and, for
        a directory, had no children when the snapshot was taken.
    """
    if not predates_boot(entry, boot_instant):
        return False
    if entry.is_directory:
        return bool(entry.is_empty)
    return True
