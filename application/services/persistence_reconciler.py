"""
PersistenceReconciler - load-then-save lifecycle of the stored schedule.

Two phases, modelled as an explicit state machine:

    UNINITIALIZED -> HYDRATING -> READY

1. Hydrate (once): read the stored snapshot, merge it day by day over a
   fresh seed template, and install the result in the ScheduleStore.
   Missing, unparsable or invalid snapshots fall back to the seed.
2. Persist (READY only): every Schedule the store publishes afterwards is
   serialized and written back. Nothing is written before hydration has
   completed, so an unhydrated default can never overwrite a valid snapshot.
"""

import json
import logging
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import ValidationError

from application.exceptions import ScheduleStorageError
from application.ports import ScheduleStorage
from application.services.schedule_store import ScheduleStore
from backend.core.catalog import WorkoutCatalog
from backend.core.seed_template import build_seed
from domain.models import DAY_IDS, Schedule

logger = logging.getLogger(__name__)

SCHEDULE_STORAGE_KEY = "pulseflow-schedule-v1"


class ReconcilerState(str, Enum):
    UNINITIALIZED = "uninitialized"
    HYDRATING = "hydrating"
    READY = "ready"


def serialize_schedule(schedule: Schedule) -> str:
    """Encode a Schedule as the stored JSON text (camelCase, absent fields omitted)."""
    return schedule.model_dump_json(by_alias=True, exclude_none=True)


def merge_with_seed(payload: Any, catalog: Optional[WorkoutCatalog] = None) -> Schedule:
    """
    Per-day shallow merge of a parsed snapshot over a fresh seed template.

    For each fixed day present in the payload, the stored fields overlay the
    seed day's fields, label/focus/energyTarget included. `workouts` comes
    from the stored day whenever it is present and not null, even if empty.
    The day id stays pinned to its key and unknown top-level keys are ignored.

    Args:
        payload: Parsed JSON value of the stored snapshot
        catalog: Catalog the seed is built from

    Returns:
        The merged Schedule

    Raises:
        ValueError: If the payload or a stored day is not an object
        ValidationError: If the merged result is not a valid Schedule
    """
    if not isinstance(payload, dict):
        raise ValueError(f"Stored schedule must be an object, got {type(payload).__name__}")

    seed = build_seed(catalog)
    merged: Dict[str, Dict[str, Any]] = {}
    for day_id in DAY_IDS:
        day = seed[day_id].to_payload()
        stored = payload.get(day_id)
        if stored:
            if not isinstance(stored, dict):
                raise ValueError(f"Stored day '{day_id}' must be an object")
            workouts = stored.get("workouts")
            day = {
                **day,
                **stored,
                "id": day_id,
                "workouts": workouts if workouts is not None else day["workouts"],
            }
        merged[day_id] = day

    return Schedule.model_validate(merged)


class PersistenceReconciler:
    """
    Hydrates a ScheduleStore from storage once, then persists every change.

    Usage:
        >>> store = ScheduleStore(catalog)
        >>> reconciler = PersistenceReconciler(storage, catalog=catalog)
        >>> reconciler.hydrate(store)
        >>> store.clear_week()   # written to storage
    """

    def __init__(
        self,
        storage: ScheduleStorage,
        *,
        catalog: Optional[WorkoutCatalog] = None,
        key: str = SCHEDULE_STORAGE_KEY,
    ) -> None:
        """
        Initialize the reconciler.

        Args:
            storage: Key-value slot holding the serialized schedule
            catalog: Catalog used to build the seed template
            key: Storage slot name
        """
        self._storage = storage
        self._catalog = catalog
        self._key = key
        self._state = ReconcilerState.UNINITIALIZED
        self._store: Optional[ScheduleStore] = None

    @property
    def state(self) -> ReconcilerState:
        return self._state

    @property
    def key(self) -> str:
        return self._key

    def hydrate(self, store: ScheduleStore) -> Schedule:
        """
        Load the stored snapshot into the store and start persisting changes.

        Runs at most once; later calls log a warning and return the store's
        current value without reading storage again.

        Args:
            store: The store to initialize

        Returns:
            The Schedule installed in the store
        """
        if self._state is not ReconcilerState.UNINITIALIZED:
            logger.warning("Schedule already hydrated; ignoring repeated hydrate")
            return (self._store or store).schedule

        self._state = ReconcilerState.HYDRATING
        self._store = store
        store.subscribe(self._on_change)

        schedule = store.load(self._read_snapshot())

        self._state = ReconcilerState.READY
        logger.info("Schedule hydrated (%d sessions planned)", schedule.session_count)
        return schedule

    def persist(self, schedule: Schedule) -> bool:
        """
        Write a Schedule to storage.

        Returns:
            True if written, False if the storage rejected the write
        """
        try:
            self._storage.set(self._key, serialize_schedule(schedule))
        except ScheduleStorageError as e:
            logger.warning("Failed to persist schedule: %s", e)
            return False
        return True

    def _on_change(self, schedule: Schedule) -> None:
        if self._state is not ReconcilerState.READY:
            logger.debug("Skipping persist while %s", self._state.value)
            return
        self.persist(schedule)

    def _read_snapshot(self) -> Schedule:
        raw = self._storage.get(self._key)
        if raw is None:
            logger.info("No stored schedule under %s; using seed template", self._key)
            return build_seed(self._catalog)

        try:
            payload = json.loads(raw)
        except ValueError as e:
            logger.warning("Discarding unparsable stored schedule: %s", e)
            return build_seed(self._catalog)

        try:
            return merge_with_seed(payload, self._catalog)
        except (ValidationError, ValueError) as e:
            logger.warning("Discarding invalid stored schedule: %s", e)
            return build_seed(self._catalog)
