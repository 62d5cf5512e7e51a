"""
ScheduleStore - owner of the live Schedule value.

The presentation layer never changes Schedule fields directly; it calls the
operations here. Every operation builds a new Schedule from the previous one
plus a change, so snapshots held by callers are never affected. Results equal
to the current value are not published, which keeps listeners (persistence,
re-render) quiet on no-ops.

Usage:
    >>> store = ScheduleStore()
    >>> sprint = store.catalog.lookup("wrk-sprint-intervals")
    >>> plan = store.add_workout("sun", sprint)
    >>> store.update_workout("sun", plan.id, {"intensity": "Power"})
    >>> store.week_stats().sessions
    13
"""

import logging
import time
from typing import Any, Callable, List, Mapping, Optional, Tuple, Union

from backend.core import stats
from backend.core.catalog import WorkoutCatalog, get_default_catalog
from backend.core.seed_template import build_seed
from domain.models import (
    DayPlan,
    DayStats,
    Intensity,
    PlannedWorkout,
    PlannedWorkoutPatch,
    Schedule,
    WeekStats,
    Workout,
)

logger = logging.getLogger(__name__)

ScheduleListener = Callable[[Schedule], None]
PatchLike = Union[PlannedWorkoutPatch, Mapping[str, Any]]


class ScheduleStore:
    """
    Holds the current Schedule and applies mutations one at a time.

    Single-threaded: each operation completes, and its listeners run, before
    the call returns.
    """

    def __init__(
        self,
        catalog: Optional[WorkoutCatalog] = None,
        *,
        initial: Optional[Schedule] = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """
        Initialize the store.

        Args:
            catalog: Workout catalog (default library when None)
            initial: Starting Schedule (fresh seed when None)
            clock: Seconds-since-epoch source used to stamp new plan ids
        """
        self._catalog = catalog if catalog is not None else get_default_catalog()
        self._schedule = initial if initial is not None else build_seed(self._catalog)
        self._clock = clock
        self._last_stamp = 0
        self._listeners: List[ScheduleListener] = []
        self._week_stats_cache: Optional[Tuple[Schedule, WeekStats]] = None

    # =========================================================================
    # Read access
    # =========================================================================

    @property
    def schedule(self) -> Schedule:
        """The current Schedule value."""
        return self._schedule

    @property
    def catalog(self) -> WorkoutCatalog:
        return self._catalog

    def day(self, day_id: str) -> Optional[DayPlan]:
        """Current DayPlan for a day, or None for an unknown id."""
        return self._schedule.get(day_id)

    def day_stats(self, day_id: str) -> Optional[DayStats]:
        day = self._schedule.get(day_id)
        return stats.day_stats(day) if day is not None else None

    def week_stats(self) -> WeekStats:
        """Week totals, memoized against the current Schedule value."""
        cached = self._week_stats_cache
        if cached is not None and cached[0] is self._schedule:
            return cached[1]
        result = stats.week_stats(self._schedule)
        self._week_stats_cache = (self._schedule, result)
        return result

    # =========================================================================
    # Change notification
    # =========================================================================

    def subscribe(self, listener: ScheduleListener) -> Callable[[], None]:
        """
        Register a listener called with every new Schedule.

        Returns:
            A callable that unsubscribes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def load(self, schedule: Schedule) -> Schedule:
        """Install a Schedule built elsewhere (e.g., a hydrated snapshot)."""
        return self._commit(schedule)

    def _commit(self, schedule: Schedule) -> Schedule:
        if schedule == self._schedule:
            return self._schedule
        self._schedule = schedule
        for listener in list(self._listeners):
            listener(schedule)
        return schedule

    # =========================================================================
    # Mutations
    # =========================================================================

    def add_workout(self, day_id: str, workout: Workout) -> Optional[PlannedWorkout]:
        """
        Append a catalog workout to a day with the workout's defaults.

        Args:
            day_id: Fixed day identifier
            workout: Catalog workout to schedule

        Returns:
            The new PlannedWorkout, or None if day_id is unknown
        """
        day = self._schedule.get(day_id)
        if day is None:
            logger.debug("add_workout ignored unknown day %s", day_id)
            return None

        plan = PlannedWorkout(
            id=self._next_plan_id(day, workout.id),
            workout_id=workout.id,
            sets=workout.default_sets,
            reps=workout.default_reps,
            interval=workout.default_interval,
            duration=workout.duration,
            intensity=Intensity.MODERATE,
        )
        self._commit(self._schedule.with_day(day.with_workout(plan)))
        return plan

    def update_workout(self, day_id: str, plan_id: str, patch: PatchLike) -> Schedule:
        """
        Apply a field-level patch to one planned workout.

        Unknown day or plan ids leave the Schedule unchanged; the patch is
        not validated for them.

        Args:
            day_id: Fixed day identifier
            plan_id: Planned workout id within the day
            patch: PlannedWorkoutPatch or mapping of sets/reps/duration/
                   interval/intensity/notes

        Returns:
            The current Schedule after the update

        Raises:
            pydantic.ValidationError: If the patch has unknown fields or invalid values
        """
        day = self._schedule.get(day_id)
        if day is None:
            logger.debug("update_workout ignored unknown day %s", day_id)
            return self._schedule
        if day.find(plan_id) is None:
            logger.debug("update_workout ignored unknown plan %s on %s", plan_id, day_id)
            return self._schedule

        if not isinstance(patch, PlannedWorkoutPatch):
            patch = PlannedWorkoutPatch.model_validate(patch)
        return self._commit(self._schedule.with_day(day.with_workout_patched(plan_id, patch)))

    def remove_workout(self, day_id: str, plan_id: str) -> Schedule:
        """Remove one planned workout; unknown ids leave the Schedule unchanged."""
        day = self._schedule.get(day_id)
        if day is None:
            logger.debug("remove_workout ignored unknown day %s", day_id)
            return self._schedule
        return self._commit(self._schedule.with_day(day.without_workout(plan_id)))

    def reset_day(self, day_id: str) -> Schedule:
        """Replace one day with its seed template, discarding its edits."""
        if day_id not in self._schedule:
            logger.debug("reset_day ignored unknown day %s", day_id)
            return self._schedule
        seed = build_seed(self._catalog)
        return self._commit(self._schedule.with_day(seed[day_id]))

    def clear_week(self) -> Schedule:
        """Replace the whole Schedule with a fresh seed template."""
        return self._commit(build_seed(self._catalog))

    # =========================================================================
    # Helpers
    # =========================================================================

    def _next_plan_id(self, day: DayPlan, workout_id: str) -> str:
        """
        Id of the form "{day}-{workout}-{stamp}" unique within the day.

        The stamp is a millisecond clock reading, strictly increasing across
        calls on this store.
        """
        stamp = max(int(self._clock() * 1000), self._last_stamp + 1)
        taken = set(day.plan_ids)
        while f"{day.id}-{workout_id}-{stamp}" in taken:
            stamp += 1
        self._last_stamp = stamp
        return f"{day.id}-{workout_id}-{stamp}"
