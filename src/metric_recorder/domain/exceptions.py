"""
Exceptions for the Metric Recorder.

All recorder misuse surfaces as a single error kind, InvalidStateError.
These faults are raised synchronously before any state is mutated and
are never retried or swallowed by the library.
"""

from __future__ import annotations


class MetricRecorderError(Exception):
    """Base class for all metric recorder errors."""
    pass


class InvalidStateError(MetricRecorderError, RuntimeError):
    """
    Raised when an operation is not valid in the recorder's current state.

    Examples:
        - Recording a metric after close()
        - Calling close() twice
        - Starting a duration that is already open
        - Ending a duration that was never started
        - Reading captured metrics before close()
    """
    pass
