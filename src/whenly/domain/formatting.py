"""Short human-readable renderings of dates relative to a reference day."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from whenly.domain.arithmetic import days_between
from whenly.domain.model import ClearResult, DateResult, Granularity, PeriodResult

if TYPE_CHECKING:
    from whenly.domain.calendar import Date
    from whenly.domain.model import ParsedDate, Period

MONTH_ABBREVIATIONS: Final[tuple[str, ...]] = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
MONTH_NAMES: Final[tuple[str, ...]] = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

# Beyond this many days the absolute month/day form is used.
RELATIVE_WINDOW_DAYS: Final[int] = 14


def format_relative(value: Date, reference: Date) -> str:
    """Render ``value`` as "today", "in 5 days", "Jun 20" or "Jun 20, 2025"."""

    diff = days_between(reference, value)
    if diff == 0:
        return "today"
    if diff == 1:
        return "tomorrow"
    if diff == -1:
        return "yesterday"
    if 1 < diff <= RELATIVE_WINDOW_DAYS:
        return f"in {diff} days"
    if -RELATIVE_WINDOW_DAYS <= diff < -1:
        return f"{-diff} days ago"

    return _month_day(value, reference)


def _month_day(value: Date, reference: Date) -> str:
    month = MONTH_ABBREVIATIONS[value.month - 1]
    if value.year == reference.year:
        return f"{month} {value.day}"
    return f"{month} {value.day}, {value.year}"


def _describe_period(period: Period, reference: Date) -> str:
    start = period.start
    match period.granularity:
        case Granularity.DAY:
            return format_relative(start, reference)
        case Granularity.WEEK:
            return f"week of {_month_day(start, reference)}"
        case Granularity.MONTH:
            return f"{MONTH_NAMES[start.month - 1]} {start.year}"
        case Granularity.YEAR:
            return str(start.year)


def describe(parsed: ParsedDate, reference: Date) -> str:
    match parsed:
        case DateResult(date=value):
            return format_relative(value, reference)
        case PeriodResult(period=period):
            return _describe_period(period, reference)
        case ClearResult():
            return "no date"


__all__ = ["describe", "format_relative"]
