"""
Clock Implementations.

Provides:
    - SystemClock: wall-clock UTC time
    - ManualClock: deterministic clock that only moves when told to
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Optional


class SystemClock:
    """Wall-clock time source returning the current UTC instant."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)

    def __repr__(self) -> str:
        return "SystemClock()"


class ManualClock:
    """
    Deterministic clock for tests.

    The current instant changes only through set() or forward().

    Example:
        >>> clock = ManualClock()
        >>> start = clock.now()
        >>> clock.forward(timedelta(milliseconds=200)) - start
        datetime.timedelta(microseconds=200000)
    """

    def __init__(self, start: Optional[datetime] = None) -> None:
        """
        Initialize manual clock.

        Args:
            start: Initial instant (default: current UTC time)
        """
        self._now = start if start is not None else datetime.now(timezone.utc)

    def now(self) -> datetime:
        return self._now

    def set(self, instant: datetime) -> datetime:
        """Jump to a specific instant and return it."""
        self._now = instant
        return self._now

    def forward(self, delta: timedelta) -> datetime:
        """
        Advance the clock.

        Args:
            delta: Amount of time to move forward

        Returns:
            The new current instant

        Raises:
            ValueError: If delta is negative
        """
        if delta < timedelta(0):
            raise ValueError(f"Cannot move clock backwards: {delta}")
        self._now = self._now + delta
        return self._now

    def __repr__(self) -> str:
        return f"ManualClock(now={self._now.isoformat()})"
