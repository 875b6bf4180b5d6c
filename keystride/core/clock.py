"""Clock sources for the typing session engine."""

from __future__ import annotations

import time
from typing import Protocol


class Clock(Protocol):
    def now(self) -> float: ...


class MonotonicClock:
    """Wall-clock independent seconds from ``time.monotonic``."""

    def now(self) -> float:
        return time.monotonic()


class ManualClock:
    """A clock that only moves when told to. Used for tests and replays."""

    def __init__(self, start: float = 0.0) -> None:
        self._now = float(start)

    def now(self) -> float:
        return self._now

    def advance(self, seconds: float) -> None:
        if seconds < 0:
            raise ValueError(f"cannot move clock backwards by {seconds}")
        self._now += seconds

    def set(self, value: float) -> None:
        if value < self._now:
            raise ValueError(f"cannot move clock backwards to {value}")
        self._now = float(value)
