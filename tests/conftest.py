from __future__ import annotations

from datetime import datetime, timezone
from io import StringIO
from typing import Any, Callable

import pytest
from rich.console import Console

from lib_color_log import Logger

FIXED_MOMENT = datetime(2025, 9, 30, 12, 0, 5, 123000, tzinfo=timezone.utc)
FIXED_ISO = "2025-09-30T12:00:05.123Z"


class FixedClock:
    """Clock port that always reports the same instant."""

    def __init__(self, moment: datetime = FIXED_MOMENT) -> None:
        self.moment = moment

    def now(self) -> datetime:
        return self.moment


@pytest.fixture
def fixed_clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def record_console() -> Console:
    return Console(file=StringIO(), record=True, width=200)


@pytest.fixture
def make_logger(fixed_clock: FixedClock) -> Callable[..., tuple[Logger, StringIO]]:
    """Return a factory building loggers that write to a fresh ``StringIO``."""

    def _factory(*args: Any, **kwargs: Any) -> tuple[Logger, StringIO]:
        stream = StringIO()
        kwargs.setdefault("clock", fixed_clock)
        return Logger(*args, stream=stream, **kwargs), stream

    return _factory


@pytest.fixture(autouse=True)
def _clear_logger_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("LOGGER", raising=False)
