"""Application configuration helpers."""

from __future__ import annotations

from .errors import ConfigurationError
from .logging import configure_logging
from .parsing import (
    DEFAULT_MAX_INPUT_LENGTH,
    DEFAULT_PARSER_CONFIG,
    OverlongInputPolicy,
    ParserConfig,
    get_parser_config,
)

__all__ = [
    "DEFAULT_MAX_INPUT_LENGTH",
    "DEFAULT_PARSER_CONFIG",
    "ConfigurationError",
    "OverlongInputPolicy",
    "ParserConfig",
    "configure_logging",
    "get_parser_config",
]
