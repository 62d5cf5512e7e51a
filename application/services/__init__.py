"""
Application services coordinating the schedule engine.

- ScheduleStore: owns the live Schedule and its mutation operations
- PersistenceReconciler: hydrate-then-persist lifecycle over ScheduleStorage
"""

from application.services.persistence_reconciler import (
    SCHEDULE_STORAGE_KEY,
    PersistenceReconciler,
    ReconcilerState,
    merge_with_seed,
    serialize_schedule,
)
from application.services.schedule_store import ScheduleListener, ScheduleStore

__all__ = [
    "ScheduleStore",
    "ScheduleListener",
    "PersistenceReconciler",
    "ReconcilerState",
    "SCHEDULE_STORAGE_KEY",
    "merge_with_seed",
    "serialize_schedule",
]
