# engine/clock.py
from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta


@dataclass
class SessionClock:
    """
    Maps session-relative seconds to wall time.
    `source` is any monotonic seconds counter; t=0 is the moment the clock was built.
    """

    epoch: datetime  # wall time of t=0; naive values are treated as UTC
    source: Callable[[], float] = time.monotonic
    _t0: float = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.epoch.tzinfo is None:
            self.epoch = self.epoch.replace(tzinfo=UTC)
        self._t0 = self.source()

    @classmethod
    def utc_now(cls, source: Callable[[], float] = time.monotonic) -> SessionClock:
        return cls(datetime.now(UTC), source=source)

    @classmethod
    def utc_epoch(cls, y: int, m: int, d: int, hh=0, mm=0, ss=0, *, source=time.monotonic):
        return cls(datetime(y, m, d, hh, mm, ss, tzinfo=UTC), source=source)

    def now(self) -> float:
        return max(0.0, self.source() - self._t0)

    # session seconds -> wall
    def to_wall(self, t: float) -> datetime:
        return self.epoch + timedelta(seconds=t)

    def iso_at(self, t: float) -> str:
        """ISO-8601 UTC timestamp with millisecond precision, e.g. 2025-01-01T00:00:01.500Z"""
        return self.to_wall(t).isoformat(timespec="milliseconds").replace("+00:00", "Z")
