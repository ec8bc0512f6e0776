"""Natural-language date parsing and calendar arithmetic."""

from __future__ import annotations

from importlib import metadata

from whenly.domain.arithmetic import (
    add_days,
    add_months,
    add_years,
    day_of_week,
    days_between,
    days_until,
    end_of_week,
    first_day_of_month,
    last_day_of_month,
    start_of_week,
)
from whenly.domain.calendar import Date, days_in_month, is_leap_year
from whenly.domain.clock import Clock, today
from whenly.domain.errors import (
    CalendarError,
    InvalidDayError,
    InvalidFormatError,
    InvalidMonthError,
    InvalidOffsetError,
    InvalidYearError,
    ParseError,
    WhenlyError,
    YearOutOfRangeError,
)
from whenly.domain.formatting import describe, format_relative
from whenly.domain.model import (
    ClearResult,
    DateResult,
    Granularity,
    ParsedDate,
    Period,
    PeriodResult,
    ResultKind,
)
from whenly.domain.parsing import parse, parse_with_reference

try:
    __version__ = metadata.version("whenly")
except metadata.PackageNotFoundError:
    __version__ = "0.0.0+local"

__all__ = [  # noqa: RUF022
    # calendar
    "Date",
    "is_leap_year",
    "days_in_month",
    "today",
    "Clock",
    # arithmetic
    "add_days",
    "add_months",
    "add_years",
    "days_between",
    "days_until",
    "day_of_week",
    "start_of_week",
    "end_of_week",
    "first_day_of_month",
    "last_day_of_month",
    # results
    "Granularity",
    "Period",
    "ResultKind",
    "ParsedDate",
    "DateResult",
    "PeriodResult",
    "ClearResult",
    # parsing and formatting
    "parse",
    "parse_with_reference",
    "format_relative",
    "describe",
    # errors
    "WhenlyError",
    "CalendarError",
    "InvalidYearError",
    "InvalidMonthError",
    "InvalidDayError",
    "YearOutOfRangeError",
    "ParseError",
    "InvalidFormatError",
    "InvalidOffsetError",
]
