"""Wall-clock access, kept behind an injectable ``Clock``."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Protocol

from whenly.domain.calendar import Date, epoch_days_to_date

_SECONDS_PER_DAY = 86400


class Clock(Protocol):
    def __call__(self) -> datetime: ...


def system_clock() -> datetime:
    return datetime.now(UTC)


def today(*, clock: Clock = system_clock) -> Date:
    """Return the current UTC calendar day according to ``clock``."""

    now = clock()
    if now.tzinfo is None:
        now = now.replace(tzinfo=UTC)
    return epoch_days_to_date(int(now.timestamp() // _SECONDS_PER_DAY))


__all__ = ["Clock", "system_clock", "today"]
