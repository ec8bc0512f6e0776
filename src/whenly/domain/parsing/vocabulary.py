"""English keyword tables recognised by the grammars."""

from __future__ import annotations

from enum import StrEnum
from typing import Final

from whenly.domain.model import Granularity
from whenly.domain.parsing.offsets import OffsetUnit


class Edge(StrEnum):
    START = "start"
    END = "end"


CLEAR_KEYWORDS: Final[frozenset[str]] = frozenset({"none", "clear"})

RELATIVE_DAYS: Final[dict[str, int]] = {
    "today": 0,
    "tomorrow": 1,
    "yesterday": -1,
}

_WEEKDAY_NAMES: Final[tuple[str, ...]] = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)

_MONTH_NAMES: Final[tuple[str, ...]] = (
    "january",
    "february",
    "march",
    "april",
    "may",
    "june",
    "july",
    "august",
    "september",
    "october",
    "november",
    "december",
)


def _with_abbreviations(names: tuple[str, ...], *, first: int) -> dict[str, int]:
    table: dict[str, int] = {}
    for index, name in enumerate(names, start=first):
        table[name] = index
        table[name[:3]] = index
    return table


# Monday == 0, matching ``day_of_week``.
WEEKDAYS: Final[dict[str, int]] = _with_abbreviations(_WEEKDAY_NAMES, first=0)
MONTHS: Final[dict[str, int]] = _with_abbreviations(_MONTH_NAMES, first=1)

# Steps relative to the period containing the reference day.
MODIFIERS: Final[dict[str, int]] = {
    "last": -1,
    "this": 0,
    "next": 1,
}

PERIOD_UNITS: Final[dict[str, Granularity]] = {
    "week": Granularity.WEEK,
    "month": Granularity.MONTH,
    "year": Granularity.YEAR,
}

BOUNDARY_EDGES: Final[dict[str, Edge]] = {
    "beginning": Edge.START,
    "start": Edge.START,
    "end": Edge.END,
}

NATURAL_UNITS: Final[dict[str, OffsetUnit]] = {
    "day": OffsetUnit.DAY,
    "days": OffsetUnit.DAY,
    "week": OffsetUnit.WEEK,
    "weeks": OffsetUnit.WEEK,
    "month": OffsetUnit.MONTH,
    "months": OffsetUnit.MONTH,
    "year": OffsetUnit.YEAR,
    "years": OffsetUnit.YEAR,
}

ORDINAL_SUFFIXES: Final[tuple[str, ...]] = ("st", "nd", "rd", "th")
