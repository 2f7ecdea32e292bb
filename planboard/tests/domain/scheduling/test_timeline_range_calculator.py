"""
Unit tests for TimelineRangeCalculator.
"""

from datetime import date

import pytest

from planboard.domain.scheduling.services import TimelineRangeCalculator
from planboard.domain.scheduling.value_objects import NavigationDirection, ViewMode


@pytest.fixture
def calculator() -> TimelineRangeCalculator:
    return TimelineRangeCalculator(today=lambda: date(2024, 1, 15))


class TestWindow:
    """Test window computation per view mode."""

    def test_month_window(self, calculator):
        window = calculator.window(date(2024, 2, 17), ViewMode.MONTH)

        assert window.start == date(2024, 2, 1)
        assert window.end == date(2024, 2, 29)
        assert window.total_days == 29

    def test_quarter_window(self, calculator):
        window = calculator.window(date(2024, 1, 1), ViewMode.QUARTER)

        assert window.start == date(2024, 1, 1)
        assert window.end == date(2024, 3, 31)
        assert window.total_days == 91

    def test_quarter_window_follows_anchor_month(self, calculator):
        window = calculator.window(date(2024, 11, 30), ViewMode.QUARTER)

        assert window.start == date(2024, 11, 1)
        assert window.end == date(2025, 1, 31)

    def test_year_window(self, calculator):
        window = calculator.window(date(2023, 6, 15), ViewMode.YEAR)

        assert window.start == date(2023, 1, 1)
        assert window.end == date(2023, 12, 31)
        assert window.total_days == 365


class TestColumns:
    """Test the day column grid."""

    def test_one_column_per_day(self, calculator):
        window = calculator.window(date(2024, 1, 1), ViewMode.QUARTER)
        columns = calculator.columns(window)

        assert len(columns) == window.total_days
        assert columns[0].day == window.start
        assert columns[-1].day == window.end

    def test_column_flags(self, calculator):
        columns = calculator.columns(calculator.window(date(2024, 1, 1), ViewMode.MONTH))

        assert columns[0].is_month_start
        assert columns[0].label == "1"
        assert columns[5].is_weekend  # Jan 6, Saturday
        assert not columns[7].is_weekend
        assert calculator.today_column_index(columns) == 14

    def test_today_outside_window(self, calculator):
        columns = calculator.columns(calculator.window(date(2024, 5, 1), ViewMode.MONTH))
        assert calculator.today_column_index(columns) is None

    def test_month_headers(self, calculator):
        columns = calculator.columns(calculator.window(date(2024, 1, 1), ViewMode.QUARTER))
        headers = calculator.month_headers(columns)

        assert [h.label for h in headers] == ["Jan", "Feb", "Mar"]
        assert [h.span for h in headers] == [31, 29, 31]
        assert [h.start_column for h in headers] == [0, 31, 60]
        assert sum(h.span for h in headers) == len(columns)

    def test_month_headers_empty(self):
        assert TimelineRangeCalculator.month_headers([]) == []


class TestNavigation:
    """Test previous/next/today navigation."""

    @pytest.mark.parametrize(
        "mode, expected",
        [
            (ViewMode.MONTH, date(2024, 2, 1)),
            (ViewMode.QUARTER, date(2024, 4, 1)),
            (ViewMode.YEAR, date(2025, 1, 1)),
        ],
    )
    def test_next_moves_one_view_unit(self, calculator, mode, expected):
        assert calculator.navigate(date(2024, 1, 1), mode, NavigationDirection.NEXT) == expected

    def test_prev_clamps_day(self, calculator):
        anchor = calculator.navigate(date(2024, 3, 31), ViewMode.MONTH, NavigationDirection.PREV)
        assert anchor == date(2024, 2, 29)

    def test_today_resets_anchor(self, calculator):
        anchor = calculator.navigate(date(2020, 7, 1), ViewMode.YEAR, NavigationDirection.TODAY)
        assert anchor == date(2024, 1, 15)

    def test_prev_then_next_same_window(self, calculator):
        anchor = date(2024, 5, 20)
        back = calculator.navigate(anchor, ViewMode.QUARTER, NavigationDirection.PREV)
        again = calculator.navigate(back, ViewMode.QUARTER, NavigationDirection.NEXT)

        assert calculator.window(again, ViewMode.QUARTER) == calculator.window(
            anchor, ViewMode.QUARTER
        )
