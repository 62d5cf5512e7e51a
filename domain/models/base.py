"""
Shared base class for planner domain models.

Attributes are snake_case in Python and camelCase on the wire, so a stored
schedule keeps the `workoutId` / `energyTarget` shape of the planner payload.
"""

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class PlannerModel(BaseModel):
    """Immutable value object with camelCase serialization aliases."""

    model_config = {
        "frozen": True,
        "alias_generator": to_camel,
        "populate_by_name": True,
    }

    def to_payload(self) -> dict:
        """Serialize to the JSON-compatible wire shape (absent fields omitted)."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
