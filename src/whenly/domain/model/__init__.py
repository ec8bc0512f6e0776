"""Public domain model surface."""

from __future__ import annotations

from whenly.domain.model.enums import Granularity, ResultKind
from whenly.domain.model.period import Period
from whenly.domain.model.results import CLEAR, ClearResult, DateResult, ParsedDate, PeriodResult

__all__ = [
    "CLEAR",
    "ClearResult",
    "DateResult",
    "Granularity",
    "ParsedDate",
    "Period",
    "PeriodResult",
    "ResultKind",
]
