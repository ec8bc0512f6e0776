from __future__ import annotations

import json

import pytest

from whenly.config.parsing import OVERLONG_INPUT_VAR
from whenly.domain.calendar import Date
from whenly.ui import cli as cli_module


def test_parse_prints_date_with_description(capsys: pytest.CaptureFixture[str]) -> None:
    cli_module.main(["parse", "next friday", "--reference", "2024-01-15"])

    assert capsys.readouterr().out == "2024-01-26 (in 11 days)\n"


def test_parse_prints_period_span(capsys: pytest.CaptureFixture[str]) -> None:
    cli_module.main(["parse", "next month", "--reference", "2024-01-15"])

    assert capsys.readouterr().out == "2024-02-01..2024-02-29 (February 2024)\n"


def test_parse_prints_clear(capsys: pytest.CaptureFixture[str]) -> None:
    cli_module.main(["parse", "none", "--reference", "2024-01-15"])

    assert capsys.readouterr().out == "clear\n"


def test_parse_json_output(capsys: pytest.CaptureFixture[str]) -> None:
    cli_module.main(["parse", "tomorrow", "--reference", "2024-01-15", "--json"])

    payload = json.loads(capsys.readouterr().out)
    assert payload == {
        "text": "tomorrow",
        "reference": "2024-01-15",
        "description": "tomorrow",
        "result": {"kind": "date", "date": "2024-01-16"},
    }


def test_parse_without_reference_uses_today(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    captured: dict[str, object] = {}
    original = cli_module.resolve

    def fake_resolve(text: str, **kwargs: object) -> object:
        captured.update(kwargs)
        return original(text, reference=Date(2024, 1, 15))

    monkeypatch.setattr(cli_module, "resolve", fake_resolve)

    cli_module.main(["parse", "today"])

    assert captured["reference"] is None
    assert capsys.readouterr().out == "2024-01-15 (today)\n"


def test_parse_error_exits_with_usage_status(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["parse", "+0d", "--reference", "2024-01-15"])

    assert excinfo.value.code == 2
    assert "non-zero" in capsys.readouterr().err


def test_invalid_reference_exits_with_usage_status() -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["parse", "today", "--reference", "2024-13-01"])

    assert excinfo.value.code == 2


def test_parse_honours_environment_config(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(OVERLONG_INPUT_VAR, "reject")

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["parse", "tomorrow" + " please" * 10, "--reference", "2024-01-15"])

    assert excinfo.value.code == 2


def test_format_command(capsys: pytest.CaptureFixture[str]) -> None:
    cli_module.main(["format", "2024-06-20", "--reference", "2024-01-15"])

    assert capsys.readouterr().out == "Jun 20\n"


def test_unexpected_errors_exit_with_failure(monkeypatch: pytest.MonkeyPatch) -> None:
    def broken_resolve(*_: object, **__: object) -> object:
        raise RuntimeError("boom")

    monkeypatch.setattr(cli_module, "resolve", broken_resolve)

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["parse", "today"])

    assert excinfo.value.code == 1
