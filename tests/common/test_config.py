from __future__ import annotations

import pytest

from whenly.config import (
    DEFAULT_MAX_INPUT_LENGTH,
    ConfigurationError,
    OverlongInputPolicy,
    ParserConfig,
    get_parser_config,
)
from whenly.config.parsing import MAX_INPUT_LENGTH_VAR, OVERLONG_INPUT_VAR


def test_get_parser_config_defaults() -> None:
    config = get_parser_config()

    assert config.max_input_length == DEFAULT_MAX_INPUT_LENGTH == 64
    assert config.overlong_input is OverlongInputPolicy.TRUNCATE


def test_get_parser_config_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(MAX_INPUT_LENGTH_VAR, "128")
    monkeypatch.setenv(OVERLONG_INPUT_VAR, "REJECT")

    config = get_parser_config()

    assert config == ParserConfig(max_input_length=128, overlong_input=OverlongInputPolicy.REJECT)


def test_get_parser_config_treats_blank_values_as_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(MAX_INPUT_LENGTH_VAR, "   ")
    monkeypatch.setenv(OVERLONG_INPUT_VAR, "")

    assert get_parser_config() == ParserConfig()


@pytest.mark.parametrize("value", ["lots", "0", "-3"])
def test_get_parser_config_rejects_bad_lengths(
    monkeypatch: pytest.MonkeyPatch, value: str
) -> None:
    monkeypatch.setenv(MAX_INPUT_LENGTH_VAR, value)

    with pytest.raises(ConfigurationError) as exc:
        get_parser_config()

    assert MAX_INPUT_LENGTH_VAR in str(exc.value)


def test_get_parser_config_rejects_unknown_policy(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(OVERLONG_INPUT_VAR, "ignore")

    with pytest.raises(ConfigurationError, match="truncate, reject"):
        get_parser_config()


def test_parser_config_requires_positive_length() -> None:
    with pytest.raises(ConfigurationError):
        ParserConfig(max_input_length=0)
