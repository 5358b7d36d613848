"""
Clock Protocol.

Defines the abstract time source used by recorders for every instant
they capture. Injecting the clock keeps timing deterministic in tests.

Design Notes:
    - One operation: now()
    - Instants are timezone-aware datetimes
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol, runtime_checkable


@runtime_checkable
class Clock(Protocol):
    """Abstract interface for a time source."""

    def now(self) -> datetime:
        """
        Return the current instant.

        Returns:
            Timezone-aware datetime
        """
        ...
