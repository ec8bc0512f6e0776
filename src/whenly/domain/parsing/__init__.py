"""Natural-language date parsing."""

from __future__ import annotations

from whenly.domain.parsing.dispatcher import GRAMMARS, parse, parse_with_reference
from whenly.domain.parsing.grammars import parse_iso_date

__all__ = ["GRAMMARS", "parse", "parse_iso_date", "parse_with_reference"]
