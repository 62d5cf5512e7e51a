"""
Schedule Storage Interface (Port).

This module defines the abstract interface for the key-value slot the
persisted schedule lives in. Implementations may use a local JSON file,
in-memory storage, or other local backends.
"""
from typing import Optional, Protocol


class ScheduleStorage(Protocol):
    """
    Abstract interface for a synchronous local key-value store of text.

    Values are opaque serialized text; parsing and validation belong to the
    reconciler, so a store never rejects a payload for its content.
    """

    def get(self, key: str) -> Optional[str]:
        """
        Read the text stored under a key.

        Args:
            key: Storage slot name (e.g., "pulseflow-schedule-v1")

        Returns:
            Stored text, or None if the slot is empty or unreadable
        """
        ...

    def set(self, key: str, value: str) -> None:
        """
        Write text under a key, replacing any previous value.

        Args:
            key: Storage slot name
            value: Serialized payload

        Raises:
            ScheduleStorageError: If the backing store cannot be written
        """
        ...
