"""Error taxonomy shared by the calendar, arithmetic and parsing layers."""

from __future__ import annotations


class WhenlyError(ValueError):
    """Base class for every error raised by whenly."""


class CalendarError(WhenlyError):
    """A (year, month, day) triple or a date computation is not valid."""


class InvalidYearError(CalendarError):
    """Raised when a year is outside the supported range (year 0 included)."""


class InvalidMonthError(CalendarError):
    """Raised when a month is outside 1..12."""


class InvalidDayError(CalendarError):
    """Raised when a day does not exist in its month."""


class YearOutOfRangeError(CalendarError):
    """Raised when arithmetic would move a date outside the supported years."""


class ParseError(WhenlyError):
    """Input text could not be turned into a parsed date."""


class InvalidFormatError(ParseError):
    """Raised when the text matches no grammar or a matched rule is malformed."""


class InvalidOffsetError(ParseError):
    """Raised for a well-formed offset whose magnitude is zero."""


__all__ = [
    "CalendarError",
    "InvalidDayError",
    "InvalidFormatError",
    "InvalidMonthError",
    "InvalidOffsetError",
    "InvalidYearError",
    "ParseError",
    "WhenlyError",
    "YearOutOfRangeError",
]
