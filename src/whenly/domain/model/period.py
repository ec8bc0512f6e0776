"""Contiguous spans of calendar time."""

from __future__ import annotations

from dataclasses import dataclass

from whenly.domain.arithmetic import (
    add_days,
    first_day_of_month,
    first_day_of_year,
    last_day_of_month,
    last_day_of_year,
    start_of_week,
)
from whenly.domain.calendar import Date
from whenly.domain.model.enums import Granularity


def _canonical_start(value: Date, granularity: Granularity) -> Date:
    match granularity:
        case Granularity.DAY:
            return value
        case Granularity.WEEK:
            return start_of_week(value)
        case Granularity.MONTH:
            return first_day_of_month(value)
        case Granularity.YEAR:
            return first_day_of_year(value)


@dataclass(frozen=True, slots=True)
class Period:
    """A span identified by its first day and its granularity.

    ``start`` must be the canonical first day of the span: a Monday for weeks,
    the 1st for months and January 1st for years. Use :meth:`containing`
    to build a period around an arbitrary day.
    """

    start: Date
    granularity: Granularity

    def __post_init__(self) -> None:
        if _canonical_start(self.start, self.granularity) != self.start:
            raise ValueError(f"{self.start} does not start a {self.granularity}")

    @classmethod
    def containing(cls, value: Date, granularity: Granularity) -> Period:
        return cls(start=_canonical_start(value, granularity), granularity=granularity)

    def end(self) -> Date:
        """Return the last day of the span."""

        match self.granularity:
            case Granularity.DAY:
                return self.start
            case Granularity.WEEK:
                return add_days(self.start, 6)
            case Granularity.MONTH:
                return last_day_of_month(self.start)
            case Granularity.YEAR:
                return last_day_of_year(self.start)

    def __contains__(self, value: object) -> bool:
        if not isinstance(value, Date):
            return False
        return self.start <= value <= self.end()
