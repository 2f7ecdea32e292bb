"""Visible timeline range, its day grid and stage bar geometry."""

from datetime import date

from pydantic import Field, computed_field

from ...shared.base import ValueObject
from .time_units import days_between


class ViewWindow(ValueObject):
    """The visible date range. Derived from anchor and view mode, never stored."""

    start: date
    end: date

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_days(self) -> int:
        """Day count between start and end, both included."""
        return days_between(self.start, self.end) + 1

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end


class TimelineColumn(ValueObject):
    """One day column of the board grid."""

    day: date
    label: str
    is_weekend: bool
    is_today: bool
    is_month_start: bool


class MonthHeader(ValueObject):
    """A month band spanning consecutive day columns."""

    label: str
    year: int
    start_column: int = Field(ge=0)
    span: int = Field(ge=1)


class StagePosition(ValueObject):
    """Horizontal placement of a stage bar, in percent of the track width."""

    left_percent: float = Field(ge=0.0, le=100.0)
    width_percent: float = Field(ge=0.0, le=100.0)
    start: date
    end: date
    clipped_left: bool = False
    clipped_right: bool = False

    @property
    def right_percent(self) -> float:
        return self.left_percent + self.width_percent
