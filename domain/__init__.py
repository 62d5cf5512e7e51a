"""
Domain layer for the PulseFlow planner.

This package contains pure domain models that are independent of
infrastructure concerns (storage, presentation, configuration).
"""

from domain.models import (
    DAY_IDS,
    DayPlan,
    DayStats,
    Intensity,
    PlannedWorkout,
    PlannedWorkoutPatch,
    Schedule,
    WeekProgress,
    WeekStats,
    Workout,
    WorkoutCategory,
)

__all__ = [
    "DAY_IDS",
    "DayPlan",
    "DayStats",
    "Intensity",
    "PlannedWorkout",
    "PlannedWorkoutPatch",
    "Schedule",
    "WeekProgress",
    "WeekStats",
    "Workout",
    "WorkoutCategory",
]
