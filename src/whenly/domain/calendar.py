"""Calendar primitives: the validated ``Date`` value and epoch-day conversion.

Every cross-month or cross-year computation in whenly goes through the signed
epoch-day count (days since 1970-01-01) implemented here. The conversion uses
the proleptic Gregorian calendar over 400-year eras, with March as the first
month of the computational year so that the leap day falls at its end.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date as _stdlib_date
from typing import Final, Self

from whenly.domain.errors import (
    InvalidDayError,
    InvalidMonthError,
    InvalidYearError,
    YearOutOfRangeError,
)

MIN_YEAR: Final[int] = 1
MAX_YEAR: Final[int] = 65535

_DAYS_IN_MONTH: Final[tuple[int, ...]] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

# Days from 0000-03-01 to 1970-01-01 in the proleptic Gregorian calendar.
_EPOCH_SHIFT: Final[int] = 719468
_DAYS_PER_ERA: Final[int] = 146097


def is_leap_year(year: int) -> bool:
    if year % 400 == 0:
        return True
    if year % 100 == 0:
        return False
    return year % 4 == 0


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in ``month`` of ``year`` (``month`` must be 1..12)."""

    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


@dataclass(frozen=True, slots=True, order=True)
class Date:
    """A calendar day between 0001-01-01 and 65535-12-31.

    The constructor validates its fields and raises ``InvalidYearError``,
    ``InvalidMonthError`` or ``InvalidDayError`` (checked in that order).
    Arithmetic that already guarantees a valid triple builds instances through
    :meth:`unchecked` instead.
    """

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        if not MIN_YEAR <= self.year <= MAX_YEAR:
            raise InvalidYearError(
                f"Year must be between {MIN_YEAR} and {MAX_YEAR}, got {self.year}"
            )
        if not 1 <= self.month <= 12:
            raise InvalidMonthError(f"Month must be between 1 and 12, got {self.month}")
        max_day = days_in_month(self.year, self.month)
        if not 1 <= self.day <= max_day:
            raise InvalidDayError(
                f"Day must be between 1 and {max_day} for {self.year:04d}-{self.month:02d}, "
                f"got {self.day}"
            )

    @classmethod
    def unchecked(cls, year: int, month: int, day: int) -> Self:
        instance = object.__new__(cls)
        object.__setattr__(instance, "year", year)
        object.__setattr__(instance, "month", month)
        object.__setattr__(instance, "day", day)
        return instance

    @classmethod
    def from_date(cls, value: _stdlib_date) -> Self:
        return cls.unchecked(value.year, value.month, value.day)

    def to_date(self) -> _stdlib_date:
        """Convert to ``datetime.date`` (only possible up to year 9999)."""

        return _stdlib_date(self.year, self.month, self.day)

    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def __str__(self) -> str:
        return self.isoformat()


def date_to_epoch_days(value: Date) -> int:
    """Return the signed number of days between 1970-01-01 and ``value``."""

    year = value.year - (1 if value.month <= 2 else 0)
    era = year // 400
    year_of_era = year - era * 400
    shifted_month = (value.month + 9) % 12  # March == 0
    day_of_year = (153 * shifted_month + 2) // 5 + value.day - 1
    day_of_era = year_of_era * 365 + year_of_era // 4 - year_of_era // 100 + day_of_year
    return era * _DAYS_PER_ERA + day_of_era - _EPOCH_SHIFT


def epoch_days_to_date(epoch_day: int) -> Date:
    """Inverse of :func:`date_to_epoch_days`.

    Raises ``YearOutOfRangeError`` when the day falls outside the supported years.
    """

    shifted = epoch_day + _EPOCH_SHIFT
    era = shifted // _DAYS_PER_ERA
    day_of_era = shifted - era * _DAYS_PER_ERA
    year_of_era = (
        day_of_era - day_of_era // 1460 + day_of_era // 36524 - day_of_era // 146096
    ) // 365
    day_of_year = day_of_era - (365 * year_of_era + year_of_era // 4 - year_of_era // 100)
    shifted_month = (5 * day_of_year + 2) // 153
    day = day_of_year - (153 * shifted_month + 2) // 5 + 1
    month = shifted_month + 3 if shifted_month < 10 else shifted_month - 9
    year = year_of_era + era * 400 + (1 if month <= 2 else 0)

    if not MIN_YEAR <= year <= MAX_YEAR:
        raise YearOutOfRangeError(
            f"Epoch day {epoch_day} falls outside years {MIN_YEAR}..{MAX_YEAR}"
        )
    return Date.unchecked(year, month, day)


__all__ = [
    "MAX_YEAR",
    "MIN_YEAR",
    "Date",
    "date_to_epoch_days",
    "days_in_month",
    "epoch_days_to_date",
    "is_leap_year",
]
