"""
Metric Sink Protocol.

Defines the storage strategy a MetricRecorder dispatches to. The recorder
validates its own state and then hands each mutation to the sink; the
sink decides what (if anything) to keep.

The metric sink is responsible for:
    - Storing properties and timestamps (one value per name)
    - Aggregating counts and durations recorded under the same name
    - Publishing or freezing its contents when finalized

Design Notes:
    - Held by the recorder through composition, not inheritance
    - Called only while the recorder is open
    - finalize() is called exactly once, as the last step of close()
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Protocol, runtime_checkable


@runtime_checkable
class MetricSink(Protocol):
    """Abstract interface for metric storage strategies."""

    def record_property(self, name: str, value: str) -> None:
        """
        Store a string property.

        If called twice with the same name, exactly one value must be
        honored. Values must never be merged.

        Args:
            name: Metric name
            value: Property value
        """
        ...

    def record_timestamp(self, name: str, time: datetime) -> None:
        """
        Store a timestamp.

        Same one-value-per-name contract as record_property().

        Args:
            name: Metric name
            time: Instant to store
        """
        ...

    def record_count(self, name: str, value: float) -> None:
        """
        Store a count.

        Repeated calls with the same name should be summed.

        Args:
            name: Metric name
            value: Count to add
        """
        ...

    def record_duration(self, name: str, duration: timedelta) -> None:
        """
        Store a duration.

        Repeated calls with the same name should be summed.

        Args:
            name: Metric name
            duration: Duration to add
        """
        ...

    def finalize(self) -> None:
        """Called once when the owning recorder closes."""
        ...
