"""
In-Memory Metric Sink.

Captures every recorded metric in memory so tests can validate the
metrics emitted by the code under test. Read-back is only allowed after
the owning recorder has closed, and a finalized sink accepts no further
writes.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from metric_recorder.domain.exceptions import InvalidStateError
from metric_recorder.domain.value_objects import MetricSnapshot


class InMemoryMetricSink:
    """Stores metrics in dictionaries; counts and durations are summed."""

    def __init__(self) -> None:
        """Initialize empty storage."""
        self._properties: Dict[str, str] = {}
        self._timestamps: Dict[str, datetime] = {}
        self._counts: Dict[str, float] = {}
        self._durations: Dict[str, timedelta] = {}
        self._finalized = False

    # =========================================================================
    # MetricSink Protocol
    # =========================================================================

    def record_property(self, name: str, value: str) -> None:
        self._verify_not_finalized()
        self._properties[name] = value

    def record_timestamp(self, name: str, time: datetime) -> None:
        self._verify_not_finalized()
        self._timestamps[name] = time

    def record_count(self, name: str, value: float) -> None:
        self._verify_not_finalized()
        if name not in self._counts:
            self._counts[name] = value
        else:
            self._counts[name] = self._counts[name] + value

    def record_duration(self, name: str, duration: timedelta) -> None:
        self._verify_not_finalized()
        if name not in self._durations:
            self._durations[name] = duration
        else:
            self._durations[name] = self._durations[name] + duration

    def finalize(self) -> None:
        """Freeze the captured metrics and open them for read-back."""
        self._verify_not_finalized()
        self._finalized = True

    # =========================================================================
    # Read-back (closed recorders only)
    # =========================================================================

    @property
    def is_finalized(self) -> bool:
        return self._finalized

    def get_properties(self) -> Mapping[str, str]:
        self._verify_finalized()
        return MappingProxyType(self._properties)

    def get_property(self, name: str) -> Optional[str]:
        self._verify_finalized()
        return self._properties.get(name)

    def get_timestamps(self) -> Mapping[str, datetime]:
        self._verify_finalized()
        return MappingProxyType(self._timestamps)

    def get_timestamp(self, name: str) -> Optional[datetime]:
        self._verify_finalized()
        return self._timestamps.get(name)

    def get_counts(self) -> Mapping[str, float]:
        self._verify_finalized()
        return MappingProxyType(self._counts)

    def get_count(self, name: str) -> Optional[float]:
        self._verify_finalized()
        return self._counts.get(name)

    def get_durations(self) -> Mapping[str, timedelta]:
        self._verify_finalized()
        return MappingProxyType(self._durations)

    def get_duration(self, name: str) -> Optional[timedelta]:
        self._verify_finalized()
        return self._durations.get(name)

    def snapshot(self) -> MetricSnapshot:
        """Copy all captured metrics into an immutable MetricSnapshot."""
        self._verify_finalized()
        return MetricSnapshot(
            properties=dict(self._properties),
            timestamps=dict(self._timestamps),
            counts=dict(self._counts),
            durations=dict(self._durations),
        )

    def _verify_finalized(self) -> None:
        if not self._finalized:
            raise InvalidStateError(
                "Metrics should only be retrieved after the recorder is closed."
            )

    def _verify_not_finalized(self) -> None:
        if self._finalized:
            raise InvalidStateError("Metric sink is already finalized.")
