"""
Metric Recorder - Operation-Scoped Metrics Lifecycle.

A MetricRecorder accumulates properties, timestamps, counts and durations
for exactly one logical operation, then closes exactly once.

State machine:
    OPEN (initial) --close()--> CLOSED (terminal)

Every recording method validates that the recorder is still open and
then dispatches to the configured MetricSink. Closing ends any open
durations, emits the standard metrics (see StandardMetricNames), calls
the sink's finalize() and only then flips the closed flag.

Design Notes:
    - Single writer: no internal locking, all calls are synchronous
    - Validation happens before any mutation
    - Use as a context manager to guarantee close() on every exit path

Usage:
    with factory.new_metric_recorder("GetItem") as metrics:
        metrics.add_count("CacheMiss", 1)
        with metrics.timed("DatabaseRead"):
            ...
"""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from datetime import datetime, timedelta
from typing import TYPE_CHECKING, Dict, Iterator, List, Optional

from metric_recorder.core.clocks import SystemClock
from metric_recorder.domain.exceptions import InvalidStateError
from metric_recorder.domain.standard_metrics import StandardMetricNames

if TYPE_CHECKING:
    from types import TracebackType
    from typing import Type

    from metric_recorder.interfaces.clock import Clock
    from metric_recorder.interfaces.metric_sink import MetricSink

logger = logging.getLogger(__name__)


class MetricRecorder:
    """
    Records metrics for a single operation and dispatches them to a sink.

    The recorder rejects every mutation once closed. Read-back is the
    sink's concern.
    """

    def __init__(
        self,
        operation: str,
        sink: MetricSink,
        clock: Optional[Clock] = None,
    ) -> None:
        """
        Initialize the recorder.

        Args:
            operation: Label of the operation being measured
            sink: Storage strategy receiving every recorded metric
            clock: Time source (default: SystemClock)
        """
        self._operation = operation
        self._sink = sink
        self._clock = clock if clock is not None else SystemClock()
        self._start_time = self._clock.now()
        self._closed = False
        self._open_durations: Dict[str, datetime] = {}

    # =========================================================================
    # Read-only accessors
    # =========================================================================

    @property
    def operation(self) -> str:
        return self._operation

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def start_time(self) -> datetime:
        return self._start_time

    @property
    def sink(self) -> MetricSink:
        return self._sink

    def is_closed(self) -> bool:
        """Whether close() has completed. Never raises."""
        return self._closed

    def open_durations(self) -> List[str]:
        """Names of durations started but not yet ended."""
        return list(self._open_durations)

    # =========================================================================
    # Recording API
    # =========================================================================

    def add_property(self, name: str, value: str) -> None:
        """
        Record a string value, e.g. a label for this group of metrics.

        Recording the same name twice keeps only one value (the sink decides
        which; the bundled sinks keep the last).

        Raises:
            InvalidStateError: If the recorder is closed
        """
        self._verify_not_closed()
        self._sink.record_property(name, value)

    def add_timestamp(self, name: str, time: datetime) -> None:
        """
        Record a timestamp. Same one-value-per-name rule as add_property().

        Raises:
            InvalidStateError: If the recorder is closed
        """
        self._verify_not_closed()
        self._sink.record_timestamp(name, time)

    def add_count(self, name: str, value: float) -> None:
        """
        Record a count. Counts recorded under the same name are aggregated.

        Raises:
            InvalidStateError: If the recorder is closed
        """
        self._verify_not_closed()
        self._sink.record_count(name, value)

    def add_duration(self, name: str, duration: timedelta) -> None:
        """
        Record a duration. Durations recorded under the same name are aggregated.

        Raises:
            InvalidStateError: If the recorder is closed
        """
        self._verify_not_closed()
        self._sink.record_duration(name, duration)

    def start_duration(self, name: str, start_time: Optional[datetime] = None) -> datetime:
        """
        Open a named duration.

        End it with end_duration(), or let close() end it.

        Args:
            name: Duration name
            start_time: Explicit start instant (default: clock.now())

        Returns:
            The stored start instant

        Raises:
            InvalidStateError: If the recorder is closed or a duration with
                this name is already open
        """
        self._verify_not_closed()
        if name in self._open_durations:
            raise InvalidStateError(f"A duration named {name} is already open.")
        if start_time is None:
            start_time = self._clock.now()
        self._open_durations[name] = start_time
        return start_time

    def end_duration(self, name: str, end_time: Optional[datetime] = None) -> timedelta:
        """
        Close a named duration and record it via add_duration().

        Starting and ending the same name repeatedly accumulates the
        measured durations.

        Args:
            name: Duration name passed to start_duration()
            end_time: Explicit end instant (default: clock.now())

        Returns:
            The measured duration

        Raises:
            InvalidStateError: If the recorder is closed or no duration with
                this name is open
        """
        self._verify_not_closed()
        if name not in self._open_durations:
            raise InvalidStateError(f"No open duration named {name}.")
        if end_time is None:
            end_time = self._clock.now()
        start_time = self._open_durations.pop(name)
        duration = end_time - start_time
        self.add_duration(name, duration)
        return duration

    @contextmanager
    def timed(self, name: str) -> Iterator[MetricRecorder]:
        """
        Measure the enclosed block as a named duration.

        The duration is ended even if the block raises, unless the block
        closed the recorder itself.
        """
        self.start_duration(name)
        try:
            yield self
        finally:
            if not self._closed and name in self._open_durations:
                self.end_duration(name)

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def close(self) -> None:
        """
        Close this set of metrics.

        Ends every open duration at the current instant, emits the standard
        metrics, finalizes the sink, then marks the recorder closed. No
        metrics may be recorded afterwards.

        Raises:
            InvalidStateError: If the recorder is already closed
        """
        self._verify_not_closed()

        end_time = self._clock.now()

        still_open = list(self._open_durations)
        for name in still_open:
            self.end_duration(name, end_time)
        if still_open:
            logger.debug(
                f"{self._operation}: ended {len(still_open)} open duration(s) on close: "
                f"{', '.join(still_open)}"
            )

        self.add_property(StandardMetricNames.OPERATION.value, self._operation)
        self.add_property(
            StandardMetricNames.THREAD_NAME.value, threading.current_thread().name
        )
        self.add_timestamp(StandardMetricNames.START_TIME.value, self._start_time)
        self.add_timestamp(StandardMetricNames.END_TIME.value, end_time)
        self.add_duration(StandardMetricNames.TIME.value, end_time - self._start_time)

        self._sink.finalize()

        self._closed = True
        logger.debug(
            f"Closed metric recorder for {self._operation} "
            f"({(end_time - self._start_time).total_seconds():.3f}s)"
        )

    def __enter__(self) -> MetricRecorder:
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        if not self._closed:
            self.close()

    def __repr__(self) -> str:
        state = "closed" if self._closed else "open"
        return f"MetricRecorder(operation={self._operation!r}, {state})"

    def _verify_not_closed(self) -> None:
        if self._closed:
            raise InvalidStateError("MetricRecorder is already closed.")
