"""
Domain models for the PulseFlow planner.

This package contains pure domain models that are independent of
infrastructure concerns (storage, presentation, configuration).

These models represent the core planning concepts:
- Workout: A read-only catalog definition with default prescription
- PlannedWorkout: A customizable instance of a Workout on one day
- DayPlan: One day's ordered sessions plus display metadata
- Schedule: The aggregate week, exactly seven DayPlans
- DayStats / WeekStats / WeekProgress: Aggregate totals

All models are frozen. Updates go through domain methods that return new
instances, so a previously held Schedule is never affected by a later change.

Usage:
    >>> from domain.models import DayPlan, PlannedWorkout, Schedule

    >>> day = DayPlan(id="sun", label="Sun", focus="Mobility Reset", energy_target=30)
    >>> day = day.with_workout(
    ...     PlannedWorkout(id="sun-wrk-yoga-flow-1", workout_id="wrk-yoga-flow", duration=35)
    ... )

    >>> # Serialize to the stored camelCase shape
    >>> day.to_payload()["energyTarget"]
    30
"""

from domain.models.day_plan import DayPlan
from domain.models.planned_workout import Intensity, PlannedWorkout, PlannedWorkoutPatch
from domain.models.schedule import DAY_IDS, Schedule
from domain.models.stats import DayStats, WeekProgress, WeekStats
from domain.models.workout import Workout, WorkoutCategory

__all__ = [
    # Main entities
    "Schedule",
    "DayPlan",
    "PlannedWorkout",
    "PlannedWorkoutPatch",
    "Workout",
    # Aggregates
    "DayStats",
    "WeekStats",
    "WeekProgress",
    # Enums and constants
    "Intensity",
    "WorkoutCategory",
    "DAY_IDS",
]
