"""
Workout catalog - read-only lookup over the shipped session library.

The library ships as package data (backend/core/data/workout_library.yaml)
and is loaded once per path. Lookups are dict-backed; listing keeps library order.
"""

import logging
import pathlib
from functools import lru_cache
from importlib import resources
from typing import Dict, Iterable, List, Optional, Tuple, Union

import yaml
from pydantic import ValidationError

from application.exceptions import CatalogLoadError
from domain.models import DayPlan, PlannedWorkout, Workout, WorkoutCategory

logger = logging.getLogger(__name__)

LIBRARY_PACKAGE = "backend.core.data"
LIBRARY_RESOURCE = "workout_library.yaml"

DEFAULT_LIBRARY_PATH = resources.files(LIBRARY_PACKAGE).joinpath(LIBRARY_RESOURCE)


class WorkoutCatalog:
    """
    Immutable collection of catalog workouts.

    Usage:
        catalog = WorkoutCatalog.from_yaml(DEFAULT_LIBRARY_PATH)
        workout = catalog.lookup("wrk-bench-press")
        strength = catalog.by_category(WorkoutCategory.STRENGTH)
    """

    def __init__(self, workouts: Iterable[Workout]):
        self._workouts: Tuple[Workout, ...] = tuple(workouts)
        self._by_id: Dict[str, Workout] = {}
        for workout in self._workouts:
            if workout.id in self._by_id:
                raise CatalogLoadError(f"Duplicate workout id '{workout.id}' in library")
            self._by_id[workout.id] = workout

    @classmethod
    def from_yaml(cls, path: Union[str, pathlib.Path]) -> "WorkoutCatalog":
        """
        Load a catalog from a YAML list of workout definitions.

        Accepts a filesystem path or a package resource such as
        DEFAULT_LIBRARY_PATH.

        Raises:
            CatalogLoadError: If the file cannot be read, parsed or validated.
        """
        if isinstance(path, str):
            path = pathlib.Path(path)
        try:
            raw = yaml.safe_load(path.read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as e:
            raise CatalogLoadError(f"Cannot load workout library {path}: {e}") from e

        if not isinstance(raw, list):
            raise CatalogLoadError(f"Workout library {path} must be a list of workouts")

        try:
            workouts = [Workout.model_validate(item) for item in raw]
        except ValidationError as e:
            raise CatalogLoadError(f"Invalid workout in library {path}: {e}") from e

        logger.debug("Loaded %d workouts from %s", len(workouts), path)
        return cls(workouts)

    def __len__(self) -> int:
        return len(self._workouts)

    def __contains__(self, workout_id: object) -> bool:
        return workout_id in self._by_id

    def lookup(self, workout_id: str) -> Optional[Workout]:
        """Get a workout by id, or None if the catalog does not know it."""
        return self._by_id.get(workout_id)

    def all(self) -> List[Workout]:
        """All workouts in library order."""
        return list(self._workouts)

    def categories(self) -> List[WorkoutCategory]:
        """Distinct categories in order of first appearance."""
        seen: List[WorkoutCategory] = []
        for workout in self._workouts:
            if workout.category not in seen:
                seen.append(workout.category)
        return seen

    def by_category(self, category: Union[WorkoutCategory, str]) -> List[Workout]:
        """Workouts in one category, in library order."""
        category = WorkoutCategory(category)
        return [w for w in self._workouts if w.category == category]

    def resolve(self, day: DayPlan) -> List[Tuple[PlannedWorkout, Workout]]:
        """
        Pair each planned workout with its catalog entry.

        Orphaned entries (unknown workout_id) are skipped; they remain in the
        day until removed or reset.
        """
        resolved = []
        for plan in day.workouts:
            workout = self._by_id.get(plan.workout_id)
            if workout is None:
                logger.debug("Skipping orphaned plan %s on %s", plan.id, day.id)
                continue
            resolved.append((plan, workout))
        return resolved

    def orphans(self, day: DayPlan) -> List[PlannedWorkout]:
        """Planned workouts on the day whose catalog reference is dangling."""
        return [plan for plan in day.workouts if plan.workout_id not in self._by_id]


@lru_cache
def load_catalog(path: Optional[str] = None) -> WorkoutCatalog:
    """
    Get the cached catalog for a library path (default library when None).

    For testing, clear the cache with load_catalog.cache_clear().
    """
    return WorkoutCatalog.from_yaml(path or DEFAULT_LIBRARY_PATH)


def get_default_catalog() -> WorkoutCatalog:
    """Get the catalog built from the shipped library."""
    return load_catalog()
