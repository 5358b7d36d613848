"""
Adapters Package - Sink and Factory Implementations.

This package contains concrete implementations of the abstract
interfaces defined in the interfaces package. Following the
Hexagonal Architecture (Ports & Adapters) pattern.

Sinks:
    - InMemoryMetricSink: Captures metrics for assertions in tests
    - NoopMetricSink: Discards metrics (disabled collection)
    - LoggingMetricSink: Publishes metrics as one structlog event

Factories:
    - InMemoryMetricRecorderFactory
    - NoopMetricRecorderFactory
    - LoggingMetricRecorderFactory

Design Principles:
    - All adapters implement their respective protocols
    - Easily swappable via Dependency Injection
    - No recorder lifecycle logic in adapters
"""

from metric_recorder.adapters.in_memory_sink import InMemoryMetricSink
from metric_recorder.adapters.noop_sink import NoopMetricSink
from metric_recorder.adapters.logging_sink import LoggingMetricSink
from metric_recorder.adapters.factories import (
    InMemoryMetricRecorderFactory,
    LoggingMetricRecorderFactory,
    NoopMetricRecorderFactory,
)

__all__ = [
    "InMemoryMetricSink",
    "NoopMetricSink",
    "LoggingMetricSink",
    "InMemoryMetricRecorderFactory",
    "LoggingMetricRecorderFactory",
    "NoopMetricRecorderFactory",
]
