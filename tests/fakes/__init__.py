"""
Fake Storage Implementations for Testing.

This package provides in-memory fake implementations of the storage
interfaces for fast, isolated testing. No filesystem access required.

Features:
- Fakes implement the same Protocol interfaces as real implementations
- Supports seeding with test data
- Supports reset() for test isolation
- Factory functions for common test scenarios

Usage:
    from tests.fakes import FakeScheduleStorage, create_schedule_storage

    # Direct instantiation
    storage = FakeScheduleStorage()

    # Factory function with a stored snapshot
    storage = create_schedule_storage(payload='{"mon": {"workouts": []}}')
"""
from typing import Optional

from application.services import SCHEDULE_STORAGE_KEY
from tests.fakes.schedule_storage import FakeScheduleStorage


# =============================================================================
# Factory Functions
# =============================================================================


def create_schedule_storage(
    *,
    payload: Optional[str] = None,
    key: str = SCHEDULE_STORAGE_KEY,
) -> FakeScheduleStorage:
    """
    Create a FakeScheduleStorage with an optional stored snapshot.

    Args:
        payload: Raw text to store under the key (nothing stored when None)
        key: Storage slot name

    Returns:
        Pre-populated FakeScheduleStorage
    """
    storage = FakeScheduleStorage()
    if payload is not None:
        storage.seed({key: payload})
    return storage


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Fake implementations
    "FakeScheduleStorage",
    # Factory functions
    "create_schedule_storage",
]
