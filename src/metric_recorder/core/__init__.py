"""
Core Package - Recorder State Machine and Clocks.

Components:
    - MetricRecorder: Operation-scoped recorder (OPEN -> CLOSED)
    - SystemClock: UTC wall clock
    - ManualClock: Deterministic clock for tests
"""

from metric_recorder.core.clocks import ManualClock, SystemClock
from metric_recorder.core.recorder import MetricRecorder

__all__ = [
    "ManualClock",
    "MetricRecorder",
    "SystemClock",
]
