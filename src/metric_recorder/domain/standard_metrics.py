"""
Standard Metric Names.

Every recorder emits these metrics when it is closed. Downstream
consumers assert on the exact identifiers, so the values must stay stable.
"""

from __future__ import annotations

from enum import Enum


class StandardMetricNames(str, Enum):
    """Names of the bookkeeping metrics recorded by MetricRecorder.close()."""

    OPERATION = "Operation"      # property: operation label
    THREAD_NAME = "ThreadName"   # property: name of the closing thread
    START_TIME = "StartTime"     # timestamp: recorder creation
    END_TIME = "EndTime"         # timestamp: close() invocation
    TIME = "Time"                # duration: EndTime - StartTime

    def __str__(self) -> str:
        return self.value
