"""Outcome of parsing a date expression.

Exactly one of three shapes comes back from the parser, distinguished by
``kind``:

- :class:`DateResult`: a concrete calendar day
- :class:`PeriodResult`: a week, month or year
- :class:`ClearResult`: the user asked to unset the date
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, TypeAlias

from whenly.domain.calendar import Date  # noqa: TC001
from whenly.domain.model.enums import ResultKind
from whenly.domain.model.period import Period  # noqa: TC001


@dataclass(frozen=True, slots=True)
class DateResult:
    date: Date
    kind: Literal[ResultKind.DATE] = ResultKind.DATE


@dataclass(frozen=True, slots=True)
class PeriodResult:
    period: Period
    kind: Literal[ResultKind.PERIOD] = ResultKind.PERIOD


@dataclass(frozen=True, slots=True)
class ClearResult:
    kind: Literal[ResultKind.CLEAR] = ResultKind.CLEAR


ParsedDate: TypeAlias = DateResult | PeriodResult | ClearResult

CLEAR = ClearResult()
