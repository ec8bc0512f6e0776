"""Parser limits and how overlong input is handled."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Final

from .env import optional_env_var, optional_int_env_var
from .errors import ConfigurationError

DEFAULT_MAX_INPUT_LENGTH: Final[int] = 64

MAX_INPUT_LENGTH_VAR: Final[str] = "WHENLY_MAX_INPUT_LENGTH"
OVERLONG_INPUT_VAR: Final[str] = "WHENLY_OVERLONG_INPUT"


class OverlongInputPolicy(StrEnum):
    """What the parser does with input longer than ``max_input_length``."""

    TRUNCATE = "truncate"
    REJECT = "reject"


@dataclass(frozen=True, slots=True)
class ParserConfig:
    """Holds the parser's input limits.

    With ``TRUNCATE`` only the first ``max_input_length`` characters of the
    trimmed text take part in keyword matching; with ``REJECT`` such input
    fails as an invalid format.
    """

    max_input_length: int = DEFAULT_MAX_INPUT_LENGTH
    overlong_input: OverlongInputPolicy = OverlongInputPolicy.TRUNCATE

    def __post_init__(self) -> None:
        if self.max_input_length < 1:
            raise ConfigurationError("max_input_length must be positive")


DEFAULT_PARSER_CONFIG: Final[ParserConfig] = ParserConfig()


def get_parser_config() -> ParserConfig:
    max_length = optional_int_env_var(MAX_INPUT_LENGTH_VAR)
    policy_value = optional_env_var(OVERLONG_INPUT_VAR)

    policy = OverlongInputPolicy.TRUNCATE
    if policy_value is not None:
        try:
            policy = OverlongInputPolicy(policy_value.lower())
        except ValueError as exc:
            allowed = ", ".join(member.value for member in OverlongInputPolicy)
            raise ConfigurationError(
                f"{OVERLONG_INPUT_VAR} must be one of: {allowed} (got {policy_value!r})"
            ) from exc

    return ParserConfig(
        max_input_length=max_length or DEFAULT_MAX_INPUT_LENGTH,
        overlong_input=policy,
    )
