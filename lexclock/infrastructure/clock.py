"""Wall-clock sources for the sampler and the widget timeline."""

import time
from datetime import datetime
from typing import Protocol


class Clock(Protocol):
    def now(self) -> float:
        """Seconds since the epoch."""
        ...


class SystemClock:
    """Reads the host's wall clock on every call."""

    def now(self) -> float:
        return time.time()


class FixedClock:
    """Clock that only moves when told to; drives deterministic frames."""

    def __init__(self, value: float) -> None:
        self.value = value

    @classmethod
    def at(cls, moment: datetime) -> "FixedClock":
        """Build a clock stopped at an aware ``moment``."""

        if moment.tzinfo is None:
            raise ValueError("FixedClock.at needs a timezone-aware datetime")
        return cls(moment.timestamp())

    def now(self) -> float:
        return self.value

    def advance(self, seconds: float) -> None:
        self.value += seconds
