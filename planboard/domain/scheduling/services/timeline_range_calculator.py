"""
Timeline Range Calculator

Computes the visible window and its day-by-day column grid from an anchor
date and a view mode. The result depends only on those two inputs (plus
"today" for the highlight flag); navigation returns a new anchor and keeps
no hidden state between calls.
"""

from collections.abc import Callable
from datetime import date

from ..value_objects.enums import NavigationDirection, ViewMode
from ..value_objects.time_units import (
    add_days,
    add_months,
    is_weekend,
    month_end,
    month_start,
)
from ..value_objects.view_window import MonthHeader, TimelineColumn, ViewWindow


class TimelineRangeCalculator:
    """Domain service for view window and column grid computation."""

    def __init__(self, today: Callable[[], date] = date.today) -> None:
        """
        Initialize the calculator.

        Args:
            today: Clock returning the current calendar date
        """
        self._today = today

    def window(self, anchor: date, mode: ViewMode) -> ViewWindow:
        """
        Visible range for an anchor date.

        Month shows the anchor's month, quarter shows the anchor's month and
        the two following months, year shows January 1 to December 31.

        Args:
            anchor: Any date inside the period to show
            mode: View granularity

        Returns:
            The visible window
        """
        if mode == ViewMode.YEAR:
            return ViewWindow(start=date(anchor.year, 1, 1), end=date(anchor.year, 12, 31))

        start = month_start(anchor)
        end = month_end(add_months(start, mode.months - 1))
        return ViewWindow(start=start, end=end)

    def columns(self, window: ViewWindow) -> list[TimelineColumn]:
        """One column per day from window start to window end, inclusive."""
        today = self._today()
        columns = []
        current = window.start
        while current <= window.end:
            columns.append(
                TimelineColumn(
                    day=current,
                    label=str(current.day),
                    is_weekend=is_weekend(current),
                    is_today=current == today,
                    is_month_start=current.day == 1,
                )
            )
            current = add_days(current, 1)
        return columns

    @staticmethod
    def month_headers(columns: list[TimelineColumn]) -> list[MonthHeader]:
        """Group consecutive columns of the same calendar month into header bands."""
        headers: list[MonthHeader] = []
        start_col = 0
        for idx, column in enumerate(columns):
            previous = columns[idx - 1].day if idx else None
            if previous is None or (previous.year, previous.month) != (
                column.day.year,
                column.day.month,
            ):
                if previous is not None:
                    headers.append(_month_header(columns[start_col].day, start_col, idx - start_col))
                start_col = idx
        if columns:
            headers.append(
                _month_header(columns[start_col].day, start_col, len(columns) - start_col)
            )
        return headers

    @staticmethod
    def today_column_index(columns: list[TimelineColumn]) -> int | None:
        for idx, column in enumerate(columns):
            if column.is_today:
                return idx
        return None

    def navigate(
        self, anchor: date, mode: ViewMode, direction: NavigationDirection
    ) -> date:
        """
        New anchor after a previous/next/today action.

        Previous and next shift by one view unit (1, 3 or 12 months).
        """
        if direction == NavigationDirection.TODAY:
            return self._today()
        step = mode.months if direction == NavigationDirection.NEXT else -mode.months
        return add_months(anchor, step)


def _month_header(first_day: date, start_column: int, span: int) -> MonthHeader:
    return MonthHeader(
        label=first_day.strftime("%b"),
        year=first_day.year,
        start_column=start_column,
        span=span,
    )
