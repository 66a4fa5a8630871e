from __future__ import annotations

from datetime import datetime, timezone

import pytest

from lib_logform.domain.record import LogRecord


class FixedClock:
    def __init__(self, moment: datetime) -> None:
        self.moment = moment
        self.calls = 0

    def now(self) -> datetime:
        self.calls += 1
        return self.moment


@pytest.fixture
def info_record() -> LogRecord:
    return LogRecord(level="info", message="hello", metadata={"user": "ada"})


@pytest.fixture
def fixed_clock() -> FixedClock:
    return FixedClock(datetime(2025, 9, 23, 12, 30, 45, tzinfo=timezone.utc))


@pytest.fixture(autouse=True)
def _plain_colour_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep Rich colour rendering independent from the host terminal settings."""

    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)
