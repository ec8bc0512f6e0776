"""Signed calendar offsets such as ``+3d`` or ``2 weeks ago``."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Literal

from whenly.domain.arithmetic import add_days, add_months, add_years
from whenly.domain.calendar import Date  # noqa: TC001
from whenly.domain.model import Granularity


class OffsetUnit(StrEnum):
    """Offset units, valued by their one-letter suffix."""

    DAY = "d"
    WEEK = "w"
    MONTH = "m"
    YEAR = "y"

    @classmethod
    def for_granularity(cls, granularity: Granularity) -> OffsetUnit:
        return _UNIT_BY_GRANULARITY[granularity]


_UNIT_BY_GRANULARITY: dict[Granularity, OffsetUnit] = {
    Granularity.DAY: OffsetUnit.DAY,
    Granularity.WEEK: OffsetUnit.WEEK,
    Granularity.MONTH: OffsetUnit.MONTH,
    Granularity.YEAR: OffsetUnit.YEAR,
}


def shift(value: Date, unit: OffsetUnit, amount: int) -> Date:
    """Move ``value`` by ``amount`` units; months and years clamp the day."""

    match unit:
        case OffsetUnit.DAY:
            return add_days(value, amount)
        case OffsetUnit.WEEK:
            return add_days(value, amount * 7)
        case OffsetUnit.MONTH:
            return add_months(value, amount)
        case OffsetUnit.YEAR:
            return add_years(value, amount)


@dataclass(frozen=True, slots=True)
class Offset:
    value: int
    unit: OffsetUnit
    sign: Literal[1, -1] = 1

    def __post_init__(self) -> None:
        if self.value <= 0:
            raise ValueError(f"Offset magnitude must be positive, got {self.value}")

    def apply(self, reference: Date) -> Date:
        return shift(reference, self.unit, self.sign * self.value)
