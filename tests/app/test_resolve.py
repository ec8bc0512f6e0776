from __future__ import annotations

import logging

import pytest

from tests.support.clock import clock_at
from whenly.app import render_relative, resolve
from whenly.config import OverlongInputPolicy, ParserConfig
from whenly.domain.calendar import Date
from whenly.domain.errors import InvalidFormatError
from whenly.domain.model import DateResult, Granularity, Period, PeriodResult


def test_resolve_with_explicit_reference(reference: Date) -> None:
    resolution = resolve("next friday", reference=reference)

    assert resolution.text == "next friday"
    assert resolution.reference == reference
    assert resolution.parsed == DateResult(Date(2024, 1, 26))
    assert resolution.description == "in 11 days"


def test_resolve_defaults_reference_to_clock() -> None:
    resolution = resolve("next month", clock=clock_at(2024, 12, 20))

    assert resolution.reference == Date(2024, 12, 20)
    assert resolution.parsed == PeriodResult(Period(Date(2025, 1, 1), Granularity.MONTH))
    assert resolution.description == "January 2025"


def test_resolve_passes_config_through(reference: Date) -> None:
    config = ParserConfig(max_input_length=5, overlong_input=OverlongInputPolicy.REJECT)

    with pytest.raises(InvalidFormatError):
        resolve("tomorrow", reference=reference, config=config)


def test_resolve_logs_outcome(reference: Date, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="whenly.app"):
        resolve("none", reference=reference)

    assert "Resolved 'none' as clear (no date)" in caplog.text


def test_render_relative(reference: Date) -> None:
    assert render_relative(Date(2024, 6, 20), reference=reference) == "Jun 20"
    assert render_relative(Date(2024, 1, 16), clock=clock_at(2024, 1, 15)) == "tomorrow"
