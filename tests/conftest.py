from __future__ import annotations

import pytest

from whenly.config.parsing import MAX_INPUT_LENGTH_VAR, OVERLONG_INPUT_VAR
from whenly.domain.calendar import Date


@pytest.fixture
def reference() -> Date:
    """Monday, 2024-01-15."""
    return Date(2024, 1, 15)


@pytest.fixture(autouse=True)
def _clean_parser_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(MAX_INPUT_LENGTH_VAR, raising=False)
    monkeypatch.delenv(OVERLONG_INPUT_VAR, raising=False)
