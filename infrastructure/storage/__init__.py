"""
Infrastructure Storage Layer.

This package provides local implementations of the ScheduleStorage port
defined in application.ports.

Usage:
    from infrastructure.storage import FileScheduleStorage

    storage = FileScheduleStorage("~/.pulseflow/storage.json")
    storage.set("pulseflow-schedule-v1", payload)
"""

from infrastructure.storage.file_schedule_storage import FileScheduleStorage

__all__ = [
    "FileScheduleStorage",
]
