"""
Workout catalog entry - a read-only definition from the session library.
"""

from enum import Enum
from typing import Optional, Tuple

from pydantic import Field, field_validator

from domain.models.base import PlannerModel


class WorkoutCategory(str, Enum):
    """
    Fixed set of categories a catalog workout belongs to.

    The presentation layer filters the session library by these.
    """

    STRENGTH = "Strength"
    CONDITIONING = "Conditioning"
    MOBILITY = "Mobility"
    RECOVERY = "Recovery"
    CORE = "Core"
    ENDURANCE = "Endurance"


class Workout(PlannerModel):
    """
    Value object describing a workout the user can schedule.

    Catalog entries are never created, mutated or removed at runtime; the
    defaults they carry are copied into a PlannedWorkout when scheduled.

    Examples:
        >>> workout = Workout(
        ...     id="wrk-sprint-intervals",
        ...     name="Sprint Intervals",
        ...     category=WorkoutCategory.ENDURANCE,
        ...     duration=25,
        ...     equipment=["Track", "Treadmill"],
        ...     focus=["Anaerobic", "Speed"],
        ...     description="10 rounds: 30s sprint, 90s walk.",
        ...     default_interval="30s sprint / 90s walk",
        ... )
        >>> workout.default_sets is None
        True
    """

    # Identity
    id: str = Field(..., min_length=1, description="Unique catalog identifier")
    name: str = Field(..., min_length=1, description="Display name")
    category: WorkoutCategory = Field(..., description="Library category")

    # Prescription defaults
    duration: int = Field(..., gt=0, description="Block duration in minutes")
    default_sets: Optional[int] = Field(
        default=None, ge=0, description="Default number of sets"
    )
    default_reps: Optional[int] = Field(
        default=None, ge=0, description="Default reps per set"
    )
    default_interval: Optional[str] = Field(
        default=None,
        description="Free-text interval scheme (e.g., '40s ON / 20s OFF')",
    )

    # Descriptive metadata
    equipment: Tuple[str, ...] = Field(
        default_factory=tuple, description="Equipment used, in display order"
    )
    focus: Tuple[str, ...] = Field(
        default_factory=tuple, description="Focus tags, in display order"
    )
    description: str = Field(default="", description="Coaching description")

    @field_validator("equipment", "focus")
    @classmethod
    def strip_blank_tags(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        """Drop blank entries while preserving order."""
        return tuple(tag.strip() for tag in v if tag.strip())
