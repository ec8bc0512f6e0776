"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class Granularity(StrEnum):
    """Unit of calendar time spanned by a period."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


class ResultKind(StrEnum):
    """Discriminator for the parsed-date variants."""

    DATE = "date"
    PERIOD = "period"
    CLEAR = "clear"
