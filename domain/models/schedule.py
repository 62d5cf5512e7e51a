"""
Schedule aggregate - the full week plan, one DayPlan per fixed day.
"""

from typing import Dict, Iterator, List, Optional, Tuple

from pydantic import RootModel, field_validator

from domain.models.day_plan import DayPlan

# Fixed day identifiers, in display order
DAY_IDS: Tuple[str, ...] = ("mon", "tue", "wed", "thu", "fri", "sat", "sun")


class Schedule(RootModel[Dict[str, DayPlan]]):
    """
    Mapping from day identifier to DayPlan.

    Exactly the seven ids in DAY_IDS are present at all times, keyed in week
    order, and every DayPlan's id matches its key. Days are never added or
    removed; `with_day` swaps one DayPlan for another and returns a new
    Schedule so earlier snapshots stay valid.

    Examples:
        >>> from backend.core.seed_template import build_seed
        >>> schedule = build_seed()
        >>> schedule["mon"].label
        'Mon'
        >>> payload = schedule.model_dump_json(by_alias=True, exclude_none=True)
        >>> Schedule.model_validate_json(payload) == schedule
        True
    """

    model_config = {"frozen": True}

    @field_validator("root")
    @classmethod
    def validate_days(cls, v: Dict[str, DayPlan]) -> Dict[str, DayPlan]:
        """Require exactly the fixed days and order them Monday first."""
        missing = [day_id for day_id in DAY_IDS if day_id not in v]
        unknown = [day_id for day_id in v if day_id not in DAY_IDS]
        if missing or unknown:
            raise ValueError(
                f"Schedule must contain exactly {list(DAY_IDS)} "
                f"(missing: {missing}, unknown: {unknown})"
            )
        for day_id in DAY_IDS:
            if v[day_id].id != day_id:
                raise ValueError(
                    f"Day keyed '{day_id}' has mismatched id '{v[day_id].id}'"
                )
        return {day_id: v[day_id] for day_id in DAY_IDS}

    def __getitem__(self, day_id: str) -> DayPlan:
        return self.root[day_id]

    def __contains__(self, day_id: object) -> bool:
        return day_id in self.root

    def __iter__(self) -> Iterator[str]:  # type: ignore[override]
        return iter(self.root)

    def get(self, day_id: str) -> Optional[DayPlan]:
        """Get a day by id, or None for an unknown id."""
        return self.root.get(day_id)

    @property
    def days(self) -> List[DayPlan]:
        """All days in week order."""
        return list(self.root.values())

    @property
    def session_count(self) -> int:
        """Total planned workouts across the week."""
        return sum(day.session_count for day in self.root.values())

    def with_day(self, day: DayPlan) -> "Schedule":
        """
        Return a new Schedule with `day` replacing the DayPlan of the same id.

        Args:
            day: Replacement DayPlan; its id must be a fixed day id.

        Returns:
            New Schedule, or self when `day` is the current DayPlan.

        Raises:
            KeyError: If day.id is not one of the fixed days.
        """
        if day.id not in self.root:
            raise KeyError(day.id)
        if self.root[day.id] is day:
            return self
        return Schedule({**self.root, day.id: day})
