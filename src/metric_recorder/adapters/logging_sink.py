"""
Logging Metric Sink.

Aggregates metrics like InMemoryMetricSink and, when the recorder closes,
publishes them as a single structured log event via structlog.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Any, Optional

from metric_recorder.adapters.in_memory_sink import InMemoryMetricSink
from metric_recorder.domain.value_objects import MetricSnapshot
from metric_recorder.observability.structured_logging import get_structured_logger

DEFAULT_EVENT_NAME = "metrics_published"

_LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


def normalize_log_level(level: str) -> str:
    """Lower-case a log method name, rejecting names structlog loggers lack."""
    normalized = level.lower()
    if normalized not in _LOG_LEVELS:
        raise ValueError(f"Unsupported log level: {level}")
    return normalized


class LoggingMetricSink:
    """Publishes one structured event per closed recorder."""

    def __init__(
        self,
        logger: Optional[Any] = None,
        event_name: str = DEFAULT_EVENT_NAME,
        level: str = "info",
    ) -> None:
        """
        Initialize logging sink.

        Args:
            logger: structlog logger (default: get_structured_logger())
            event_name: Event name of the published log entry
            level: Log method used for publishing (debug, info, ...)
        """
        self._logger = logger if logger is not None else get_structured_logger(__name__)
        self._event_name = event_name
        self._level = normalize_log_level(level)
        self._store = InMemoryMetricSink()

    def record_property(self, name: str, value: str) -> None:
        self._store.record_property(name, value)

    def record_timestamp(self, name: str, time: datetime) -> None:
        self._store.record_timestamp(name, time)

    def record_count(self, name: str, value: float) -> None:
        self._store.record_count(name, value)

    def record_duration(self, name: str, duration: timedelta) -> None:
        self._store.record_duration(name, duration)

    def finalize(self) -> None:
        self._store.finalize()
        snapshot = self._store.snapshot()
        log_method = getattr(self._logger, self._level)
        log_method(self._event_name, **snapshot.to_log_dict())

    def snapshot(self) -> MetricSnapshot:
        """Published metrics; only available after finalize()."""
        return self._store.snapshot()
