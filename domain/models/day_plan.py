"""
DayPlan value object - one day's ordered list of planned sessions.
"""

from typing import List, Optional, Tuple

from pydantic import Field

from domain.models.base import PlannerModel
from domain.models.planned_workout import PlannedWorkout, PlannedWorkoutPatch


class DayPlan(PlannerModel):
    """
    One day of the week plan plus its display metadata.

    The order of `workouts` is insertion order. It matters for display and
    carries no other meaning. All domain methods return a new DayPlan (or
    self when nothing changes); the receiver is never modified.
    """

    id: str = Field(..., description="Fixed day identifier (mon..sun)")
    label: str = Field(..., description="Short display label")
    focus: str = Field(default="", description="Training focus of the day")
    energy_target: int = Field(
        default=0, ge=0, le=100, description="Target load percentage (0-100)"
    )
    workouts: Tuple[PlannedWorkout, ...] = Field(default_factory=tuple)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    @property
    def plan_ids(self) -> List[str]:
        """Ids of the planned workouts in display order."""
        return [plan.id for plan in self.workouts]

    @property
    def session_count(self) -> int:
        """Number of planned workouts on this day."""
        return len(self.workouts)

    @property
    def is_rest_day(self) -> bool:
        """Check if nothing is planned."""
        return not self.workouts

    def find(self, plan_id: str) -> Optional[PlannedWorkout]:
        """Get the planned workout with the given id, or None."""
        return next((plan for plan in self.workouts if plan.id == plan_id), None)

    # -------------------------------------------------------------------------
    # Domain Methods (return new instances for immutability)
    # -------------------------------------------------------------------------

    def with_workout(self, plan: PlannedWorkout) -> "DayPlan":
        """
        Return a new DayPlan with the plan appended.

        Args:
            plan: Planned workout to append; its id must not already be used.

        Returns:
            New DayPlan.

        Raises:
            ValueError: If the id is already present on this day.
        """
        if self.find(plan.id) is not None:
            raise ValueError(f"Planned workout id '{plan.id}' already exists on {self.id}")
        return self.model_copy(update={"workouts": (*self.workouts, plan)})

    def with_workout_patched(self, plan_id: str, patch: PlannedWorkoutPatch) -> "DayPlan":
        """Return a new DayPlan with `plan_id` patched; self if not found or unchanged."""
        changed = False
        workouts = []
        for plan in self.workouts:
            if plan.id == plan_id:
                updated = plan.apply(patch)
                changed = changed or updated is not plan
                plan = updated
            workouts.append(plan)
        if not changed:
            return self
        return self.model_copy(update={"workouts": tuple(workouts)})

    def without_workout(self, plan_id: str) -> "DayPlan":
        """Return a new DayPlan without `plan_id`; self if not found."""
        remaining = tuple(plan for plan in self.workouts if plan.id != plan_id)
        if len(remaining) == len(self.workouts):
            return self
        return self.model_copy(update={"workouts": remaining})
