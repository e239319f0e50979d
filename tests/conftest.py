from __future__ import annotations

from collections.abc import Iterator
from io import StringIO

import pytest
from rich.console import Console

from lucky_greeter import config as greeter_config


class SequenceRandomSource:
    """Deterministic random source replaying ``values`` in order."""

    def __init__(self, values: list[int]) -> None:
        self._values = list(values)
        self.calls: list[tuple[int, int]] = []

    def draw(self, low: int, high: int) -> int:
        self.calls.append((low, high))
        return self._values.pop(0)


class LineRecorder:
    def __init__(self) -> None:
        self.lines: list[str] = []

    def write_line(self, text: str) -> None:
        self.lines.append(text)


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Start every test with build-default features and no memoised .env."""

    for name in (
        greeter_config.PRINT_42_ENV_VAR,
        greeter_config.LUCKY_NUMBER_ENV_VAR,
        greeter_config.DOTENV_ENV_VAR,
    ):
        monkeypatch.delenv(name, raising=False)
    greeter_config._reset_dotenv_state_for_testing()
    yield
    greeter_config._reset_dotenv_state_for_testing()


@pytest.fixture
def record_console() -> Console:
    return Console(file=StringIO(), record=True, width=120, color_system=None)


@pytest.fixture
def recorder() -> LineRecorder:
    return LineRecorder()


@pytest.fixture
def sequence_source() -> type[SequenceRandomSource]:
    return SequenceRandomSource
