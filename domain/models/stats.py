"""
Aggregate statistics value objects for days and weeks.
"""

from pydantic import Field

from domain.models.base import PlannerModel


class DayStats(PlannerModel):
    """Totals for a single day."""

    total_duration: int = Field(default=0, ge=0, description="Minutes planned")
    total_sets: int = Field(default=0, ge=0, description="Sets planned")


class WeekStats(PlannerModel):
    """Totals for the whole week."""

    minutes: int = Field(default=0, ge=0)
    sets: int = Field(default=0, ge=0)
    sessions: int = Field(default=0, ge=0)


class WeekProgress(PlannerModel):
    """
    Week totals expressed against the weekly goals.

    Ratios are clamped to [0, 1] so they can drive progress bars directly.
    """

    minutes_ratio: float = Field(default=0.0, ge=0.0, le=1.0)
    sets_ratio: float = Field(default=0.0, ge=0.0, le=1.0)
    recovery_days: int = Field(default=1, ge=1, le=7)
