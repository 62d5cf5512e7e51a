"""
PlannedWorkout value object and the field-level patch applied to it.
"""

from enum import Enum
from typing import Optional

from pydantic import Field

from domain.models.base import PlannerModel


class Intensity(str, Enum):
    """Intensity the user assigns to a scheduled session."""

    RECOVERY = "Recovery"
    MODERATE = "Moderate"
    POWER = "Power"


class PlannedWorkout(PlannerModel):
    """
    A user-customizable instance of a catalog workout assigned to one day.

    `workout_id` references a catalog Workout. When the catalog no longer
    knows that id the entry is orphaned: it stays in the schedule but the
    display layer skips it.

    Examples:
        >>> plan = PlannedWorkout(
        ...     id="mon-wrk-bench-press-1",
        ...     workout_id="wrk-bench-press",
        ...     sets=4,
        ...     reps=6,
        ...     duration=20,
        ...     intensity=Intensity.POWER,
        ... )
        >>> plan.apply(PlannedWorkoutPatch(sets=5)).sets
        5
    """

    id: str = Field(..., min_length=1, description="Identifier, unique within its day")
    workout_id: str = Field(..., description="Catalog workout reference")

    sets: Optional[int] = Field(default=None, ge=0, description="Number of sets")
    reps: Optional[int] = Field(default=None, ge=0, description="Reps per set")
    interval: Optional[str] = Field(default=None, description="Interval scheme")
    duration: int = Field(..., ge=0, description="Planned duration in minutes")
    intensity: Intensity = Field(default=Intensity.MODERATE)
    notes: Optional[str] = Field(default=None, description="Free-text notes")

    def apply(self, patch: "PlannedWorkoutPatch") -> "PlannedWorkout":
        """
        Return a new PlannedWorkout with the patch's provided fields applied.

        Fields the patch does not set are left untouched; a field explicitly
        set to None clears the optional value.

        Args:
            patch: Field-level changes.

        Returns:
            New PlannedWorkout, or self when the patch changes nothing.
        """
        changes = patch.changes()
        if all(getattr(self, name) == value for name, value in changes.items()):
            return self
        return self.model_copy(update=changes)


class PlannedWorkoutPatch(PlannerModel):
    """
    Partial update for a PlannedWorkout.

    Only sets, reps, duration, interval, intensity and notes are patchable;
    identity fields are rejected.
    """

    sets: Optional[int] = Field(default=None, ge=0)
    reps: Optional[int] = Field(default=None, ge=0)
    duration: Optional[int] = Field(default=None, ge=0)
    interval: Optional[str] = None
    intensity: Optional[Intensity] = None
    notes: Optional[str] = None

    model_config = {"extra": "forbid"}

    def changes(self) -> dict:
        """Fields explicitly provided by the caller, keyed by attribute name."""
        changes = {name: getattr(self, name) for name in self.model_fields_set}
        # duration and intensity are required on PlannedWorkout
        for required in ("duration", "intensity"):
            if required in changes and changes[required] is None:
                del changes[required]
        return changes
