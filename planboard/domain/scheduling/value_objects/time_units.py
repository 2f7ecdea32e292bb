"""
Day-granularity date arithmetic.

Every scheduling computation on the board works in whole calendar days.
These helpers never coerce bad input: anything that is not a date (or a
parsable ISO string, for ``parse_iso_date``) raises ``InvalidDateError``.
"""

import calendar
from datetime import date, datetime, timedelta

from ...shared.exceptions import InvalidDateError


def _as_date(value: object) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raise InvalidDateError(value)


def days_between(start: date, end: date) -> int:
    """Whole calendar days from ``start`` to ``end``; negative if ``end`` is earlier."""
    return (_as_date(end) - _as_date(start)).days


def add_days(value: date, days: int) -> date:
    if isinstance(days, bool) or not isinstance(days, int):
        raise InvalidDateError(days, field_name="days")
    try:
        return _as_date(value) + timedelta(days=days)
    except OverflowError as e:
        raise InvalidDateError(value) from e


def add_months(value: date, months: int) -> date:
    """
    Shift by calendar months, clamping the day to the target month's length.

    Jan 31 + 1 month is Feb 29 in a leap year, not an overflow into March.
    """
    current = _as_date(value)
    month_index = current.year * 12 + (current.month - 1) + months
    year, month = divmod(month_index, 12)
    month += 1
    if not 1 <= year <= 9999:
        raise InvalidDateError(value)
    day = min(current.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def to_iso_date(value: date) -> str:
    """Format as ``YYYY-MM-DD``."""
    return _as_date(value).isoformat()


def parse_iso_date(text: object) -> date:
    """
    Parse an ISO date or date-time string.

    Date-time strings (as written by the registry for actual start/end
    stamps) are read by their calendar date.

    Raises:
        InvalidDateError: If the value is not a parsable ISO string
    """
    if isinstance(text, date):
        return _as_date(text)
    if not isinstance(text, str) or not text.strip():
        raise InvalidDateError(text)

    raw = text.strip()
    try:
        if len(raw) == 10:
            return date.fromisoformat(raw)
        return datetime.fromisoformat(raw).date()
    except ValueError as e:
        raise InvalidDateError(text) from e


def month_start(value: date) -> date:
    current = _as_date(value)
    return current.replace(day=1)


def month_end(value: date) -> date:
    current = _as_date(value)
    return current.replace(day=calendar.monthrange(current.year, current.month)[1])


def is_weekend(value: date) -> bool:
    return _as_date(value).weekday() >= 5
