"""Entry points that route input text through the ordered grammars."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Final

from whenly.config.parsing import DEFAULT_PARSER_CONFIG, OverlongInputPolicy, ParserConfig
from whenly.domain.clock import Clock, system_clock, today
from whenly.domain.errors import InvalidFormatError, WhenlyError
from whenly.domain.parsing.grammars import (
    Expression,
    Grammar,
    match_absolute,
    match_boundary,
    match_clear,
    match_month_name,
    match_natural_offset,
    match_ordinal_day,
    match_period_reference,
    match_relative_keyword,
    match_signed_offset,
    match_weekday,
    match_weekday_modifier,
)

if TYPE_CHECKING:
    from whenly.domain.calendar import Date
    from whenly.domain.model import ParsedDate

log = logging.getLogger(__name__)

_WHITESPACE: Final[str] = " \t\r\n"

# Multi-word forms come before the single words they contain; the permissive
# numeric forms come last so they never shadow a keyword.
GRAMMARS: Final[tuple[Grammar, ...]] = (
    match_clear,
    match_boundary,
    match_weekday_modifier,
    match_period_reference,
    match_natural_offset,
    match_relative_keyword,
    match_weekday,
    match_month_name,
    match_ordinal_day,
    match_signed_offset,
    match_absolute,
)


def prepare(text: str, reference: Date, config: ParserConfig = DEFAULT_PARSER_CONFIG) -> Expression:
    """Trim and case-fold ``text`` according to ``config``'s input limits."""

    trimmed = text.strip(_WHITESPACE)
    if not trimmed:
        raise InvalidFormatError("Date expression is empty")

    bounded = trimmed
    if len(trimmed) > config.max_input_length:
        if config.overlong_input is OverlongInputPolicy.REJECT:
            raise InvalidFormatError(
                f"Date expression is longer than {config.max_input_length} characters"
            )
        bounded = trimmed[: config.max_input_length]
        log.debug("Truncated %d-character input for matching", len(trimmed))

    lowered = bounded.lower()
    return Expression(
        text=trimmed,
        lowered=lowered,
        tokens=tuple(lowered.split()),
        reference=reference,
    )


def parse_with_reference(
    text: str,
    reference: Date,
    *,
    config: ParserConfig = DEFAULT_PARSER_CONFIG,
) -> ParsedDate:
    """Parse ``text`` relative to ``reference``; the first matching grammar wins."""

    expression = prepare(text, reference, config)
    for grammar in GRAMMARS:
        try:
            result = grammar(expression)
        except WhenlyError as exc:
            log.debug("%s rejected %r: %s", grammar.__name__, expression.text, exc)
            raise
        if result is not None:
            log.debug("%s matched %r -> %s", grammar.__name__, expression.text, result)
            return result

    raise InvalidFormatError(f"Unrecognised date expression {expression.text!r}")


def parse(
    text: str,
    *,
    clock: Clock = system_clock,
    config: ParserConfig = DEFAULT_PARSER_CONFIG,
) -> ParsedDate:
    """Parse ``text`` relative to the current day reported by ``clock``."""

    return parse_with_reference(text, today(clock=clock), config=config)


__all__ = ["GRAMMARS", "parse", "parse_with_reference", "prepare"]
