"""Calendar boundary and stepping arithmetic on civil dates.

Every function accepts either a ``date`` or a ``datetime``. Boundary helpers
always return plain dates; stepping helpers return the same type they were
given so a ``datetime`` keeps its time of day.
"""

import calendar
from datetime import date, datetime, timedelta
from typing import TypeVar

DateT = TypeVar("DateT", bound=date)

SUNDAY = 6  # date.weekday() numbering, Monday == 0
SATURDAY = 5


def normalize(value: date) -> date:
    """Return the civil date of ``value``, dropping any time of day."""
    if isinstance(value, datetime):
        return value.date()
    return value


def first_of_month(value: date) -> date:
    """Return the first day of the month containing ``value``."""
    return date(value.year, value.month, 1)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in the given month."""
    return calendar.monthrange(year, month)[1]


def last_of_month(value: date) -> date:
    """Return the last day of the month containing ``value``."""
    return date(value.year, value.month, days_in_month(value.year, value.month))


def leading_sunday(value: date) -> date:
    """Return the Sunday on or immediately before the first of the month."""
    first = first_of_month(value)
    return first - timedelta(days=(first.weekday() + 1) % 7)


def trailing_sunday(value: date) -> date:
    """Return the exclusive end of the month grid.

    This is the first Sunday on or after the day following the last of the
    month, so a month ending on Saturday stops exactly at the next day.
    """
    day_after = last_of_month(value) + timedelta(days=1)
    return day_after + timedelta(days=(SUNDAY - day_after.weekday()) % 7)


def add_days(value: DateT, days: int) -> DateT:
    return value + timedelta(days=days)


def add_weeks(value: DateT, weeks: int) -> DateT:
    return value + timedelta(weeks=weeks)


def add_months(value: DateT, months: int) -> DateT:
    """Add ``months`` calendar months using rollover semantics.

    The day of month is never clamped: when it exceeds the length of the
    target month the surplus days spill into the following month, so
    October 31 plus one month is December 1 and March 31 minus one month
    lands in early March.

    Args:
        value: Date or datetime to step from
        months: Number of months to add (negative to go back)

    Returns:
        Stepped value of the same type as ``value``

    Raises:
        OverflowError: If the result falls outside the supported year range
    """
    index = value.year * 12 + (value.month - 1) + months
    year, month = divmod(index, 12)
    if not date.min.year <= year <= date.max.year:
        raise OverflowError(f"year {year} is out of range")
    anchored = value.replace(year=year, month=month + 1, day=1)
    return anchored + timedelta(days=value.day - 1)


def add_years(value: DateT, years: int) -> DateT:
    """Add ``years`` calendar years; February 29 rolls to March 1 when needed."""
    return add_months(value, years * 12)
