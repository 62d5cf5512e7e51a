"""
Infrastructure Layer for the PulseFlow planner.

This package contains concrete implementations of the storage interfaces:
- storage/: Local JSON file implementation of ScheduleStorage
"""

from infrastructure.storage import FileScheduleStorage

__all__ = [
    "FileScheduleStorage",
]
