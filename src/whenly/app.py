"""Application entry points combining parsing and description."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from whenly.config import DEFAULT_PARSER_CONFIG
from whenly.domain.clock import Clock, system_clock, today
from whenly.domain.formatting import describe, format_relative
from whenly.domain.parsing import parse_with_reference

if TYPE_CHECKING:
    from whenly.config import ParserConfig
    from whenly.domain.calendar import Date
    from whenly.domain.model import ParsedDate

log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Resolution:
    """A parsed expression together with the day it was resolved against."""

    text: str
    reference: Date
    parsed: ParsedDate
    description: str


def resolve(
    text: str,
    *,
    reference: Date | None = None,
    clock: Clock = system_clock,
    config: ParserConfig | None = None,
) -> Resolution:
    """Parse ``text`` and describe the outcome relative to ``reference`` (default: today)."""

    effective_reference = today(clock=clock) if reference is None else reference
    effective_config = DEFAULT_PARSER_CONFIG if config is None else config
    log.debug(
        "Resolving %r: reference=%s, max_input_length=%s, overlong_input=%s",
        text,
        effective_reference,
        effective_config.max_input_length,
        effective_config.overlong_input,
    )

    parsed = parse_with_reference(text, effective_reference, config=effective_config)
    description = describe(parsed, effective_reference)
    log.info("Resolved %r as %s (%s)", text, parsed.kind, description)

    return Resolution(
        text=text,
        reference=effective_reference,
        parsed=parsed,
        description=description,
    )


def render_relative(
    value: Date,
    *,
    reference: Date | None = None,
    clock: Clock = system_clock,
) -> str:
    if reference is None:
        reference = today(clock=clock)
    return format_relative(value, reference)


__all__ = ["Resolution", "render_relative", "resolve"]
