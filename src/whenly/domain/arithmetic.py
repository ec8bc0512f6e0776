"""Pure calendar arithmetic built on epoch-day conversion."""

from __future__ import annotations

from whenly.domain.calendar import (
    MAX_YEAR,
    MIN_YEAR,
    Date,
    date_to_epoch_days,
    days_in_month,
    epoch_days_to_date,
)
from whenly.domain.clock import Clock, system_clock, today
from whenly.domain.errors import YearOutOfRangeError


def add_days(value: Date, days: int) -> Date:
    return epoch_days_to_date(date_to_epoch_days(value) + days)


def add_months(value: Date, months: int) -> Date:
    """Shift ``value`` by whole months, clamping the day to the target month.

    ``Jan 31 + 1 month`` is the last day of February. Raises
    ``YearOutOfRangeError`` when the result leaves the supported years.
    """

    total_months = value.year * 12 + (value.month - 1) + months
    year, month_index = divmod(total_months, 12)
    _check_year(year)
    month = month_index + 1
    return Date.unchecked(year, month, min(value.day, days_in_month(year, month)))


def add_years(value: Date, years: int) -> Date:
    """Shift ``value`` by whole years; Feb 29 becomes Feb 28 outside leap years."""

    year = value.year + years
    _check_year(year)
    return Date.unchecked(year, value.month, min(value.day, days_in_month(year, value.month)))


def days_between(start: Date, end: Date) -> int:
    """Signed number of days from ``start`` to ``end``."""

    return date_to_epoch_days(end) - date_to_epoch_days(start)


def days_until(value: Date, *, clock: Clock = system_clock) -> int:
    return days_between(today(clock=clock), value)


def day_of_week(value: Date) -> int:
    """Return 0 for Monday through 6 for Sunday."""

    # 1970-01-01 was a Thursday; Python's modulo is already non-negative.
    return (date_to_epoch_days(value) + 3) % 7


def first_day_of_month(value: Date) -> Date:
    return Date.unchecked(value.year, value.month, 1)


def last_day_of_month(value: Date) -> Date:
    return Date.unchecked(value.year, value.month, days_in_month(value.year, value.month))


def start_of_week(value: Date) -> Date:
    return add_days(value, -day_of_week(value))


def end_of_week(value: Date) -> Date:
    return add_days(value, 6 - day_of_week(value))


def first_day_of_year(value: Date) -> Date:
    return Date.unchecked(value.year, 1, 1)


def last_day_of_year(value: Date) -> Date:
    return Date.unchecked(value.year, 12, 31)


def _check_year(year: int) -> None:
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise YearOutOfRangeError(f"Year {year} is outside {MIN_YEAR}..{MAX_YEAR}")


__all__ = [
    "add_days",
    "add_months",
    "add_years",
    "day_of_week",
    "days_between",
    "days_until",
    "end_of_week",
    "first_day_of_month",
    "first_day_of_year",
    "last_day_of_month",
    "last_day_of_year",
    "start_of_week",
]
