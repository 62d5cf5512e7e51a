"""
Pytest fixtures for planner tests.
"""

import pytest

from application.services import PersistenceReconciler, ScheduleStore
from backend.core.catalog import WorkoutCatalog, get_default_catalog
from backend.settings import Settings
from tests.fakes import FakeScheduleStorage


class StepClock:
    """Deterministic clock advancing one second per reading."""

    def __init__(self, start: float = 1_700_000_000.0):
        self.now = start

    def __call__(self) -> float:
        value = self.now
        self.now += 1.0
        return value


@pytest.fixture
def catalog() -> WorkoutCatalog:
    """The shipped workout library."""
    return get_default_catalog()


@pytest.fixture
def clock() -> StepClock:
    return StepClock()


@pytest.fixture
def store(catalog, clock) -> ScheduleStore:
    """Store holding a fresh seed week."""
    return ScheduleStore(catalog, clock=clock)


@pytest.fixture
def fake_storage() -> FakeScheduleStorage:
    return FakeScheduleStorage()


@pytest.fixture
def reconciler(fake_storage, catalog) -> PersistenceReconciler:
    return PersistenceReconciler(fake_storage, catalog=catalog)


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    """Test settings storing the schedule under tmp_path."""
    return Settings(
        environment="test",
        schedule_storage_path=str(tmp_path / "storage.json"),
        _env_file=None,
    )
