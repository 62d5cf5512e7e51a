"""
Fake Schedule Storage for testing.

This module provides an in-memory implementation of ScheduleStorage
for fast, isolated testing without touching the filesystem.
"""
from typing import Dict, List, Optional, Tuple

from application.exceptions import ScheduleStorageError


class FakeScheduleStorage:
    """
    In-memory fake implementation of ScheduleStorage for testing.

    Records every write so tests can assert when persistence happened.

    Usage:
        storage = FakeScheduleStorage()
        storage.seed({"pulseflow-schedule-v1": "{...}"})
        storage.fail_writes = True  # next set() raises ScheduleStorageError
    """

    def __init__(self):
        """Initialize with empty storage."""
        self._values: Dict[str, str] = {}
        self.writes: List[Tuple[str, str]] = []
        self.reads: List[str] = []
        self.fail_writes = False

    def reset(self) -> None:
        """Clear stored values and recorded calls."""
        self._values.clear()
        self.writes.clear()
        self.reads.clear()
        self.fail_writes = False

    def seed(self, values: Dict[str, str]) -> None:
        """
        Seed the storage with test data.

        Seeding is not recorded as a write.
        """
        self._values.update(values)

    @property
    def write_count(self) -> int:
        return len(self.writes)

    # =========================================================================
    # ScheduleStorage Protocol Methods
    # =========================================================================

    def get(self, key: str) -> Optional[str]:
        self.reads.append(key)
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        if self.fail_writes:
            raise ScheduleStorageError(f"Simulated write failure for {key}")
        self._values[key] = value
        self.writes.append((key, value))
