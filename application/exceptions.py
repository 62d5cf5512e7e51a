"""
Application-layer exceptions.

These exceptions are used across application, backend and infrastructure layers.
"""


class CatalogLoadError(Exception):
    """Error loading the shipped workout library.

    Raised when the library file is missing, is not valid YAML, fails
    model validation, or defines the same workout id twice.
    """

    pass


class ScheduleStorageError(Exception):
    """Error writing the persisted schedule.

    Raised by storage adapters when the backing store cannot be written.
    The reconciler logs it and keeps planning in memory.
    """

    pass
