"""
Planner factory.

create_planner() wires the catalog, the ScheduleStore, the storage adapter
and the PersistenceReconciler, hydrates the store exactly once, and returns
a ready Planner for the presentation layer.

Usage:
    from backend.main import create_planner
    from backend.settings import Settings

    # Default planner (uses get_settings())
    planner = create_planner()

    # Test planner with custom settings and storage
    planner = create_planner(
        settings=Settings(environment="test", _env_file=None),
        storage=FakeScheduleStorage(),
    )
    planner.store.add_workout("sun", planner.catalog.lookup("wrk-sprint-intervals"))
"""

import logging
from dataclasses import dataclass
from typing import Optional

import sentry_sdk

from application.ports import ScheduleStorage
from application.services import PersistenceReconciler, ScheduleStore
from backend.core.catalog import WorkoutCatalog, load_catalog
from backend.settings import Settings, get_settings
from infrastructure.storage import FileScheduleStorage

logger = logging.getLogger(__name__)

# Packages whose loggers follow settings.log_level
PLANNER_LOGGERS = ("application", "backend", "domain", "infrastructure")


@dataclass
class Planner:
    """Wired schedule engine handed to the presentation layer."""

    settings: Settings
    catalog: WorkoutCatalog
    store: ScheduleStore
    reconciler: PersistenceReconciler
    storage: ScheduleStorage


def create_planner(
    settings: Optional[Settings] = None,
    *,
    storage: Optional[ScheduleStorage] = None,
) -> Planner:
    """
    Create and hydrate a Planner.

    Args:
        settings: Optional Settings instance. If not provided, uses get_settings()
                  which loads from environment variables.
        storage: Optional storage adapter. Defaults to a FileScheduleStorage at
                 settings.schedule_storage_path.

    Returns:
        Planner whose store holds the hydrated Schedule and persists changes.

    Raises:
        CatalogLoadError: If the workout library cannot be loaded.
    """
    if settings is None:
        settings = get_settings()

    _configure_logging(settings)
    _init_sentry(settings)

    catalog = load_catalog(settings.workout_library_path)
    if storage is None:
        storage = FileScheduleStorage(settings.schedule_storage_path)

    store = ScheduleStore(catalog)
    reconciler = PersistenceReconciler(
        storage, catalog=catalog, key=settings.schedule_storage_key
    )
    reconciler.hydrate(store)

    logger.info(
        "Planner ready (%s, %d catalog workouts)", settings.environment, len(catalog)
    )
    return Planner(
        settings=settings,
        catalog=catalog,
        store=store,
        reconciler=reconciler,
        storage=storage,
    )


def _configure_logging(settings: Settings) -> None:
    """Apply the configured level to the planner's package loggers."""
    for name in PLANNER_LOGGERS:
        logging.getLogger(name).setLevel(settings.log_level_value)


def _init_sentry(settings: Settings) -> None:
    """Initialize Sentry SDK if DSN is configured."""
    if settings.sentry_dsn:
        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            environment=settings.environment,
        )
        logger.info("Sentry initialized for planner")
