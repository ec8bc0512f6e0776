from __future__ import annotations

import pytest

from whenly.domain.calendar import Date
from whenly.domain.errors import InvalidFormatError, InvalidOffsetError
from whenly.domain.model import DateResult
from whenly.domain.parsing.dispatcher import GRAMMARS, prepare
from whenly.domain.parsing.grammars import (
    match_absolute,
    match_boundary,
    match_clear,
    match_natural_offset,
    match_period_reference,
    match_signed_offset,
    match_weekday,
    match_weekday_modifier,
    parse_iso_date,
)


def test_grammar_order_puts_numeric_forms_last() -> None:
    assert GRAMMARS[0] is match_clear
    assert GRAMMARS[-2] is match_signed_offset
    assert GRAMMARS[-1] is match_absolute


def test_prepare_keeps_original_text_and_folds_matching_copy(reference: Date) -> None:
    expression = prepare("  End Of Month\n", reference)

    assert expression.text == "End Of Month"
    assert expression.lowered == "end of month"
    assert expression.tokens == ("end", "of", "month")
    assert expression.reference == reference


def test_keyword_grammars_decline_other_forms(reference: Date) -> None:
    expression = prepare("next week", reference)

    assert match_weekday_modifier(expression) is None
    assert match_boundary(expression) is None
    assert match_weekday(expression) is None
    assert match_period_reference(expression) is not None


def test_boundary_declines_unknown_units_and_modifiers(reference: Date) -> None:
    assert match_boundary(prepare("end of days", reference)) is None
    assert match_boundary(prepare("end of every month", reference)) is None
    assert match_boundary(prepare("middle of month", reference)) is None


def test_natural_offset_declines_zero_and_non_numeric_counts(reference: Date) -> None:
    assert match_natural_offset(prepare("in 0 days", reference)) is None
    assert match_natural_offset(prepare("in two days", reference)) is None
    assert match_natural_offset(prepare("3 days later", reference)) is None
    assert match_natural_offset(prepare("in 3 days", reference)) == DateResult(Date(2024, 1, 18))


def test_signed_offset_declines_unsigned_input(reference: Date) -> None:
    assert match_signed_offset(prepare("3d", reference)) is None
    assert match_signed_offset(prepare("monday", reference)) is None


def test_signed_offset_commits_once_signed(reference: Date) -> None:
    with pytest.raises(InvalidFormatError):
        match_signed_offset(prepare("+3q", reference))
    with pytest.raises(InvalidOffsetError, match="non-zero"):
        match_signed_offset(prepare("+0m", reference))


def test_absolute_reads_original_case_text(reference: Date) -> None:
    expression = prepare("2024-02-29", reference)

    assert match_absolute(expression) == DateResult(Date(2024, 2, 29))


def test_parse_iso_date_is_strict() -> None:
    assert parse_iso_date("2024-01-15") == Date(2024, 1, 15)
    with pytest.raises(InvalidFormatError):
        parse_iso_date("2024-1-15")
    with pytest.raises(InvalidFormatError):
        parse_iso_date("2024-01-1x")
    with pytest.raises(InvalidFormatError):
        parse_iso_date("+024-01-15")
