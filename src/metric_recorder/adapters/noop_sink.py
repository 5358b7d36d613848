"""
No-op Metric Sink.

Discards everything. Used when metrics collection is disabled or not
configured: each recording costs a single state check in the recorder.

There is no shared singleton recorder; the disallow-writes-after-close
rule still has to be enforced per operation.
"""

from __future__ import annotations

from datetime import datetime, timedelta


class NoopMetricSink:
    """Metric sink that stores nothing."""

    __slots__ = ()

    def record_property(self, name: str, value: str) -> None:
        pass

    def record_timestamp(self, name: str, time: datetime) -> None:
        pass

    def record_count(self, name: str, value: float) -> None:
        pass

    def record_duration(self, name: str, duration: timedelta) -> None:
        pass

    def finalize(self) -> None:
        pass
