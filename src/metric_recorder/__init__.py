"""
Metric Recorder - Operation-Scoped Metrics Collection.

A small, extensible abstraction for recording metrics about a single
operation: named properties, timestamps, counts and durations are
accumulated and then finalized exactly once, together with standard
bookkeeping metrics (operation, thread, start/end time, total time).

Architecture:
    - Hexagonal Architecture (Ports & Adapters)
    - Storage strategies (sinks) held by composition
    - Injectable clocks for deterministic tests
    - Configuration-driven backend selection via YAML

Main Components:
    - core: MetricRecorder state machine, SystemClock, ManualClock
    - domain: StandardMetricNames, MetricSnapshot, InvalidStateError
    - interfaces: Clock, MetricSink, MetricRecorderFactory protocols
    - adapters: in-memory, no-op and logging sinks and factories
    - registry: backend registry and create_factory()
    - config: configuration models and loaders

Example:
    >>> from metric_recorder import InMemoryMetricRecorderFactory
    >>> factory = InMemoryMetricRecorderFactory()
    >>> with factory.new_metric_recorder("GetItem") as metrics:
    ...     metrics.add_count("Rings", 1.0)
    >>> metrics.sink.get_count("Rings")
    1.0
"""

import logging

from metric_recorder.core import ManualClock, MetricRecorder, SystemClock
from metric_recorder.domain import (
    InvalidStateError,
    MetricRecorderError,
    MetricSnapshot,
    StandardMetricNames,
)
from metric_recorder.interfaces import Clock, MetricRecorderFactory, MetricSink
from metric_recorder.adapters import (
    InMemoryMetricRecorderFactory,
    InMemoryMetricSink,
    LoggingMetricRecorderFactory,
    LoggingMetricSink,
    NoopMetricRecorderFactory,
    NoopMetricSink,
)
from metric_recorder.config import RecorderConfig, build_clock, load_config
from metric_recorder.registry import FactoryRegistry, create_default_registry, create_factory

__version__ = "0.1.0"


def configure_logging(
    level: int = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Configure logging for Metric Recorder.

    Call this at application startup to see log messages.
    By default, only WARNING and above are visible.

    Args:
        level: Logging level (default: INFO)
        format: Log message format

    Example:
        >>> import metric_recorder
        >>> metric_recorder.configure_logging(logging.DEBUG)
    """
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("metric_recorder").setLevel(level)


__all__ = [
    "Clock",
    "FactoryRegistry",
    "InMemoryMetricRecorderFactory",
    "InMemoryMetricSink",
    "InvalidStateError",
    "LoggingMetricRecorderFactory",
    "LoggingMetricSink",
    "ManualClock",
    "MetricRecorder",
    "MetricRecorderError",
    "MetricRecorderFactory",
    "MetricSink",
    "MetricSnapshot",
    "NoopMetricRecorderFactory",
    "NoopMetricSink",
    "RecorderConfig",
    "StandardMetricNames",
    "SystemClock",
    "build_clock",
    "configure_logging",
    "create_default_registry",
    "create_factory",
    "load_config",
]
