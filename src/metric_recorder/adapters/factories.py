"""
Metric Recorder Factories.

Each factory pairs a fresh sink with a fresh MetricRecorder on every call.
Factories keep no reference to the recorders they create. A factory may
carry a default clock, used whenever a caller passes none.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from metric_recorder.adapters.in_memory_sink import InMemoryMetricSink
from metric_recorder.adapters.logging_sink import (
    DEFAULT_EVENT_NAME,
    LoggingMetricSink,
    normalize_log_level,
)
from metric_recorder.adapters.noop_sink import NoopMetricSink
from metric_recorder.core.recorder import MetricRecorder

if TYPE_CHECKING:
    from metric_recorder.interfaces.clock import Clock


class NoopMetricRecorderFactory:
    """Creates recorders that discard every metric."""

    def __init__(self, clock: Optional[Clock] = None) -> None:
        self._clock = clock

    def new_metric_recorder(
        self,
        operation: str,
        clock: Optional[Clock] = None,
    ) -> MetricRecorder:
        if clock is None:
            clock = self._clock
        return MetricRecorder(operation, NoopMetricSink(), clock)


class InMemoryMetricRecorderFactory:
    """
    Creates recorders backed by an InMemoryMetricSink.

    The captured metrics are available through ``recorder.sink`` once the
    recorder is closed.
    """

    def __init__(self, clock: Optional[Clock] = None) -> None:
        """
        Initialize factory.

        Args:
            clock: Default clock for recorders created without one
        """
        self._clock = clock

    def new_metric_recorder(
        self,
        operation: str,
        clock: Optional[Clock] = None,
    ) -> MetricRecorder:
        if clock is None:
            clock = self._clock
        return MetricRecorder(operation, InMemoryMetricSink(), clock)


class LoggingMetricRecorderFactory:
    """Creates recorders that publish their metrics as structured log events."""

    def __init__(
        self,
        logger: Optional[Any] = None,
        event_name: str = DEFAULT_EVENT_NAME,
        level: str = "info",
        clock: Optional[Clock] = None,
    ) -> None:
        """
        Initialize factory.

        Args:
            logger: structlog logger shared by the created sinks
            event_name: Event name of each published log entry
            level: Log method used for publishing
            clock: Default clock for recorders created without one

        Raises:
            ValueError: If level is not a supported log method
        """
        self._logger = logger
        self._event_name = event_name
        self._level = normalize_log_level(level)
        self._clock = clock

    def new_metric_recorder(
        self,
        operation: str,
        clock: Optional[Clock] = None,
    ) -> MetricRecorder:
        sink = LoggingMetricSink(
            logger=self._logger,
            event_name=self._event_name,
            level=self._level,
        )
        if clock is None:
            clock = self._clock
        return MetricRecorder(operation, sink, clock)
