"""Sub-grammars tried by the dispatcher, one function per input form.

Each grammar receives a prepared :class:`Expression` and either

- returns a parsed result when the input is its form,
- raises a ``WhenlyError`` when the input is its form but invalid
  (this stops the cascade), or
- returns ``None`` so the next grammar is tried.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Final, TypeAlias

from whenly.domain.arithmetic import add_days, add_years, day_of_week
from whenly.domain.calendar import Date
from whenly.domain.errors import InvalidFormatError, InvalidOffsetError
from whenly.domain.model import (
    CLEAR,
    DateResult,
    Granularity,
    ParsedDate,
    Period,
    PeriodResult,
)
from whenly.domain.parsing.offsets import Offset, OffsetUnit, shift
from whenly.domain.parsing.vocabulary import (
    BOUNDARY_EDGES,
    CLEAR_KEYWORDS,
    MODIFIERS,
    MONTHS,
    NATURAL_UNITS,
    ORDINAL_SUFFIXES,
    PERIOD_UNITS,
    RELATIVE_DAYS,
    WEEKDAYS,
    Edge,
)

_ORDINAL_PATTERN: Final[re.Pattern[str]] = re.compile(
    rf"([0-9]+)(?:{'|'.join(ORDINAL_SUFFIXES)})"
)
_SIGNS: Final[str] = "+-"


@dataclass(frozen=True, slots=True)
class Expression:
    """Input text prepared for matching.

    ``text`` is the trimmed input in its original case, ``lowered`` the
    (possibly truncated) case-folded copy used for keyword matching and
    ``tokens`` its whitespace-separated words.
    """

    text: str
    lowered: str
    tokens: tuple[str, ...]
    reference: Date


Grammar: TypeAlias = Callable[[Expression], ParsedDate | None]


def _is_digits(value: str) -> bool:
    return value.isascii() and value.isdigit()


def _positive_count(token: str) -> int | None:
    if not _is_digits(token):
        return None
    count = int(token)
    return count or None


def _strict_number(field: str, text: str) -> int:
    if not _is_digits(field):
        raise InvalidFormatError(f"Expected digits in {text!r}, got {field!r}")
    return int(field)


def _next_weekday(reference: Date, weekday: int) -> Date:
    """Next occurrence of ``weekday``, 1 to 7 days after ``reference``."""

    days_ahead = weekday - day_of_week(reference)
    if days_ahead <= 0:
        days_ahead += 7
    return add_days(reference, days_ahead)


def _previous_weekday(reference: Date, weekday: int) -> Date:
    """Closest past occurrence of ``weekday``, 1 to 7 days before ``reference``."""

    days_back = day_of_week(reference) - weekday
    if days_back <= 0:
        days_back += 7
    return add_days(reference, -days_back)


def _adjacent_period(reference: Date, granularity: Granularity, steps: int) -> Period:
    pivot = shift(reference, OffsetUnit.for_granularity(granularity), steps)
    return Period.containing(pivot, granularity)


def match_clear(expression: Expression) -> ParsedDate | None:
    if expression.lowered in CLEAR_KEYWORDS:
        return CLEAR
    return None


def match_boundary(expression: Expression) -> ParsedDate | None:
    """``end of month``, ``beginning of next week``, ``start of last year``."""

    tokens = expression.tokens
    if len(tokens) not in (3, 4) or tokens[1] != "of":
        return None
    edge = BOUNDARY_EDGES.get(tokens[0])
    if edge is None:
        return None

    if len(tokens) == 3:
        steps: int | None = 0
        unit = tokens[2]
    else:
        steps = MODIFIERS.get(tokens[2])
        unit = tokens[3]
    granularity = PERIOD_UNITS.get(unit)
    if steps is None or granularity is None:
        return None

    period = _adjacent_period(expression.reference, granularity, steps)
    return DateResult(period.start if edge is Edge.START else period.end())


def match_weekday_modifier(expression: Expression) -> ParsedDate | None:
    """``next friday`` and ``last monday``.

    "next" means the occurrence in the following week: when the weekday is
    still ahead in the current week the plain next occurrence is pushed out
    by another seven days.
    """

    tokens = expression.tokens
    if len(tokens) != 2 or tokens[0] not in ("next", "last"):
        return None
    weekday = WEEKDAYS.get(tokens[1])
    if weekday is None:
        return None

    reference = expression.reference
    if tokens[0] == "last":
        return DateResult(_previous_weekday(reference, weekday))

    target = _next_weekday(reference, weekday)
    if weekday > day_of_week(reference):
        target = add_days(target, 7)
    return DateResult(target)


def match_period_reference(expression: Expression) -> ParsedDate | None:
    """``next week``, ``this month``, ``last year``."""

    tokens = expression.tokens
    if len(tokens) != 2:
        return None
    steps = MODIFIERS.get(tokens[0])
    granularity = PERIOD_UNITS.get(tokens[1])
    if steps is None or granularity is None:
        return None
    return PeriodResult(_adjacent_period(expression.reference, granularity, steps))


def match_natural_offset(expression: Expression) -> ParsedDate | None:
    """``in 3 days`` and ``2 weeks ago``; a zero or non-numeric count declines."""

    tokens = expression.tokens
    if len(tokens) != 3:
        return None
    if tokens[0] == "in":
        count_token, unit_token, sign = tokens[1], tokens[2], 1
    elif tokens[2] == "ago":
        count_token, unit_token, sign = tokens[0], tokens[1], -1
    else:
        return None

    count = _positive_count(count_token)
    unit = NATURAL_UNITS.get(unit_token)
    if count is None or unit is None:
        return None
    return DateResult(Offset(count, unit, sign).apply(expression.reference))


def match_relative_keyword(expression: Expression) -> ParsedDate | None:
    days = RELATIVE_DAYS.get(expression.lowered)
    if days is None:
        return None
    return DateResult(add_days(expression.reference, days))


def match_weekday(expression: Expression) -> ParsedDate | None:
    """Bare weekday names; today's own weekday means next week."""

    weekday = WEEKDAYS.get(expression.lowered)
    if weekday is None:
        return None
    return DateResult(_next_weekday(expression.reference, weekday))


def match_month_name(expression: Expression) -> ParsedDate | None:
    """Bare month names resolve to the next month with that name (never the current one)."""

    month = MONTHS.get(expression.lowered)
    if month is None:
        return None
    reference = expression.reference
    start = Date.unchecked(reference.year, month, 1)
    if month <= reference.month:
        start = add_years(start, 1)
    return PeriodResult(Period(start=start, granularity=Granularity.MONTH))


def match_ordinal_day(expression: Expression) -> ParsedDate | None:
    """``15th`` is the 15th of the reference month."""

    match = _ORDINAL_PATTERN.fullmatch(expression.lowered)
    if match is None:
        return None
    reference = expression.reference
    return DateResult(Date(reference.year, reference.month, int(match.group(1))))


def match_signed_offset(expression: Expression) -> ParsedDate | None:
    """``+3d``, ``-2w``, ``+1m``, ``+1y``.

    A leading sign commits the input to this form, so malformed offsets raise
    instead of declining. A zero magnitude raises ``InvalidOffsetError``.
    """

    text = expression.lowered
    if text[0] not in _SIGNS:
        return None
    if len(text) < 3 or text[1] in _SIGNS:
        raise InvalidFormatError(f"Malformed offset {expression.text!r}")

    try:
        unit = OffsetUnit(text[-1])
    except ValueError as exc:
        raise InvalidFormatError(
            f"Offset {expression.text!r} must end with one of: d, w, m, y"
        ) from exc

    value = _strict_number(text[1:-1], expression.text)
    if value == 0:
        raise InvalidOffsetError(f"Offset {expression.text!r} must be non-zero")
    sign = 1 if text[0] == "+" else -1
    return DateResult(Offset(value, unit, sign).apply(expression.reference))


def match_absolute(expression: Expression) -> ParsedDate:
    """Numeric forms: ``YYYY-MM-DD``, ``MM-DD``, ``YYYY`` and a bare day ``D``/``DD``.

    Works on the original-case text and is the last grammar: anything it does
    not recognise is an invalid format.
    """

    text = expression.text
    reference = expression.reference

    if len(text) == 10 and text[4] == "-" and text[7] == "-":
        return DateResult(parse_iso_date(text))

    if len(text) == 5 and text[2] == "-":
        month = _strict_number(text[0:2], text)
        day = _strict_number(text[3:5], text)
        return DateResult(Date(reference.year, month, day))

    if len(text) == 4 and _is_digits(text):
        return PeriodResult(Period(start=Date(int(text), 1, 1), granularity=Granularity.YEAR))

    if len(text) <= 2 and _is_digits(text):
        return DateResult(Date(reference.year, reference.month, int(text)))

    raise InvalidFormatError(f"Unrecognised date expression {text!r}")


def parse_iso_date(text: str) -> Date:
    """Parse a strict ``YYYY-MM-DD`` string into a validated ``Date``."""

    if len(text) != 10 or text[4] != "-" or text[7] != "-":
        raise InvalidFormatError(f"Expected YYYY-MM-DD, got {text!r}")
    year = _strict_number(text[0:4], text)
    month = _strict_number(text[5:7], text)
    day = _strict_number(text[8:10], text)
    return Date(year, month, day)


__all__ = [
    "Expression",
    "Grammar",
    "match_absolute",
    "match_boundary",
    "match_clear",
    "match_month_name",
    "match_natural_offset",
    "match_ordinal_day",
    "match_period_reference",
    "match_relative_keyword",
    "match_signed_offset",
    "match_weekday",
    "match_weekday_modifier",
    "parse_iso_date",
]
