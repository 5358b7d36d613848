"""
Interfaces Layer - Abstract Protocols for Dependencies.

This package defines the abstract interfaces (using typing.Protocol) the
recorder core depends on. Concrete implementations live in adapters.

Protocols:
    - Clock: Time source abstraction
    - MetricSink: Storage strategy the recorder dispatches to
    - MetricRecorderFactory: Creates one recorder per operation

Design Principles:
    - Use typing.Protocol (not ABC) for Pythonic interfaces
    - Interface Segregation: Small, focused interfaces
    - All methods have clear contracts in docstrings
"""

from metric_recorder.interfaces.clock import Clock
from metric_recorder.interfaces.metric_sink import MetricSink
from metric_recorder.interfaces.recorder_factory import MetricRecorderFactory

__all__ = [
    "Clock",
    "MetricSink",
    "MetricRecorderFactory",
]
