from __future__ import annotations
from datetime import datetime, timezone


class RealClock:
    """Implements ClockPort with the system clock, in UTC."""

    def now(self) -> datetime:
        return datetime.now(tz=timezone.utc)
