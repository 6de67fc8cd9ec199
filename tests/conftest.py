"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import os
from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest
from tempsweep.cleaner.models import DeletionOutcome


@pytest.fixture
def boot_instant() -> datetime:
    """A boot instant one hour in the future.

    Anything created by the test itself therefore predates "boot" on
    every axis, including POSIX ctime, which tests cannot set.
    """
    return datetime.now(UTC).replace(microsecond=0) + timedelta(hours=1)


@pytest.fixture
def touch() -> Callable[..., Path]:
    """Set the access and modification times of a path."""

    def _touch(path: Path, *, accessed: datetime, modified: datetime) -> Path:
        os.utime(path, (accessed.timestamp(), modified.timestamp()))
        return path

    return _touch


@pytest.fixture
def stale(boot_instant: datetime, touch: Callable[..., Path]) -> Callable[[Path], Path]:
    """Mark a path as last accessed and modified a day before boot."""
    before = boot_instant - timedelta(days=1)

    def _stale(path: Path) -> Path:
        return touch(path, accessed=before, modified=before)

    return _stale


@pytest.fixture
def outcomes() -> list[DeletionOutcome]:
    """Collects outcomes when passed as a cleaner sink via .append."""
    return []
