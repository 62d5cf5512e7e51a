"""
Seed template - the canonical default week.

build_seed() is a pure function of the fixed day definitions, the fixed
seed assignments and the catalog. It serves as the initial schedule, the
hydration fallback, and the target of reset_day / clear_week.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from backend.core.catalog import WorkoutCatalog, get_default_catalog
from domain.models import (
    DayPlan,
    Intensity,
    PlannedWorkout,
    Schedule,
    Workout,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DayDefinition:
    """Fixed display metadata of one weekday."""

    id: str
    label: str
    focus: str
    energy_target: int


@dataclass(frozen=True)
class SeedAssignment:
    """A catalog workout placed on a day, with optional overrides."""

    day: str
    workout_id: str
    sets: Optional[int] = None
    reps: Optional[int] = None
    duration: Optional[int] = None
    interval: Optional[str] = None
    intensity: Optional[Intensity] = None
    notes: Optional[str] = None


WEEK_DAYS: Tuple[DayDefinition, ...] = (
    DayDefinition("mon", "Mon", "Push Power + Core", 76),
    DayDefinition("tue", "Tue", "Pull Strength", 70),
    DayDefinition("wed", "Wed", "Active Recovery", 38),
    DayDefinition("thu", "Thu", "Legs + Conditioning", 82),
    DayDefinition("fri", "Fri", "Hybrid Athlete Day", 88),
    DayDefinition("sat", "Sat", "Endurance Session", 62),
    DayDefinition("sun", "Sun", "Mobility Reset", 30),
)

SEED_ASSIGNMENTS: Tuple[SeedAssignment, ...] = (
    SeedAssignment(
        "mon", "wrk-bench-press", sets=4, reps=6, duration=20,
        intensity=Intensity.POWER, notes="2 warm-up sets before working sets.",
    ),
    SeedAssignment(
        "mon", "wrk-dumbbell-shoulder-press", sets=3, reps=10, duration=15,
        intensity=Intensity.MODERATE,
    ),
    SeedAssignment(
        "mon", "wrk-core-ladder", duration=18, intensity=Intensity.MODERATE,
        interval="60s EMOM",
    ),
    SeedAssignment(
        "tue", "wrk-deadlift", sets=5, reps=5, duration=22,
        intensity=Intensity.POWER, notes="Reset between reps, hook grip focus.",
    ),
    SeedAssignment(
        "tue", "wrk-assisted-pullups", sets=4, reps=8, duration=16,
        intensity=Intensity.MODERATE,
    ),
    SeedAssignment("wed", "wrk-yoga-flow", duration=35, intensity=Intensity.RECOVERY),
    SeedAssignment(
        "thu", "wrk-hang-clean", sets=5, reps=3, duration=15, intensity=Intensity.POWER,
    ),
    SeedAssignment(
        "thu", "wrk-rower-emom", duration=24, interval="90s threshold / 60s easy",
        intensity=Intensity.MODERATE,
    ),
    SeedAssignment(
        "fri", "wrk-push-circuit", duration=18, interval="40s ON / 20s OFF",
        intensity=Intensity.POWER,
    ),
    SeedAssignment("fri", "wrk-core-ladder", duration=18, intensity=Intensity.MODERATE),
    SeedAssignment(
        "sat", "wrk-long-run", duration=60, intensity=Intensity.MODERATE,
        notes="Hold 145-150 bpm.",
    ),
    SeedAssignment("sun", "wrk-soft-tissue", duration=20, intensity=Intensity.RECOVERY),
)


def seed_plan_id(day_id: str, workout_id: str, ordinal: int) -> str:
    """Deterministic id of the `ordinal`-th (1-based) seeded workout of a day."""
    return f"{day_id}-{workout_id}-{ordinal}"


def _plan_from_assignment(
    assignment: SeedAssignment, workout: Workout, ordinal: int
) -> PlannedWorkout:
    """Overrides win; otherwise fall back to the workout's defaults."""

    def pick(override, default):
        return override if override is not None else default

    return PlannedWorkout(
        id=seed_plan_id(assignment.day, assignment.workout_id, ordinal),
        workout_id=assignment.workout_id,
        sets=pick(assignment.sets, workout.default_sets),
        reps=pick(assignment.reps, workout.default_reps),
        interval=pick(assignment.interval, workout.default_interval),
        duration=pick(assignment.duration, workout.duration),
        intensity=pick(assignment.intensity, Intensity.MODERATE),
        notes=assignment.notes,
    )


def build_seed(catalog: Optional[WorkoutCatalog] = None) -> Schedule:
    """
    Build the canonical default week.

    Assignments whose workout is not in the catalog are skipped.

    Args:
        catalog: Catalog to resolve assignments against (default library when None).

    Returns:
        A new Schedule; repeated calls return equal values.
    """
    if catalog is None:
        catalog = get_default_catalog()

    workouts_by_day: Dict[str, List[PlannedWorkout]] = {day.id: [] for day in WEEK_DAYS}

    for assignment in SEED_ASSIGNMENTS:
        workout = catalog.lookup(assignment.workout_id)
        if workout is None:
            logger.debug("Seed skips unknown workout %s", assignment.workout_id)
            continue
        day_workouts = workouts_by_day.get(assignment.day)
        if day_workouts is None:
            continue
        day_workouts.append(
            _plan_from_assignment(assignment, workout, ordinal=len(day_workouts) + 1)
        )

    return Schedule(
        {
            day.id: DayPlan(
                id=day.id,
                label=day.label,
                focus=day.focus,
                energy_target=day.energy_target,
                workouts=tuple(workouts_by_day[day.id]),
            )
            for day in WEEK_DAYS
        }
    )


def seed_day(day_id: str, catalog: Optional[WorkoutCatalog] = None) -> Optional[DayPlan]:
    """The seed template's DayPlan for one day, or None for an unknown id."""
    return build_seed(catalog).get(day_id)
