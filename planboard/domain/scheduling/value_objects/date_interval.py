"""Inclusive day intervals and tentative interval edits."""

from datetime import date

from pydantic import Field, computed_field, model_validator

from ...shared.base import ValueObject
from .time_units import add_days, days_between, to_iso_date


class DateInterval(ValueObject):
    """
    Inclusive calendar-day interval.

    Order is not enforced: stored data can combine an actual start with a
    planned end that lies before it, and such stages must still render.
    Use ``is_inverted`` to detect that case.
    """

    start: date
    end: date

    @property
    def duration_days(self) -> int:
        """Number of days covered, counting both ends."""
        return days_between(self.start, self.end) + 1

    @property
    def is_inverted(self) -> bool:
        return self.end < self.start

    def shifted(self, days: int) -> "DateInterval":
        return DateInterval(start=add_days(self.start, days), end=add_days(self.end, days))

    def __str__(self) -> str:
        return f"{to_iso_date(self.start)}..{to_iso_date(self.end)}"


class PendingEdit(ValueObject):
    """A tentative, uncommitted interval change for one stage."""

    unit_id: str = Field(min_length=1)
    stage_id: str = Field(min_length=1)
    new_start: date
    new_end: date

    @model_validator(mode="after")
    def _end_not_before_start(self) -> "PendingEdit":
        if self.new_end < self.new_start:
            raise ValueError("Pending edit end must not be before its start")
        return self

    @property
    def key(self) -> tuple[str, str]:
        return (self.unit_id, self.stage_id)

    @property
    def interval(self) -> DateInterval:
        return DateInterval(start=self.new_start, end=self.new_end)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def new_start_iso(self) -> str:
        return to_iso_date(self.new_start)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def new_end_iso(self) -> str:
        return to_iso_date(self.new_end)
