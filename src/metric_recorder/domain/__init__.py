"""
Domain Layer - Metric Names, Value Objects and Errors.

Components:
    - StandardMetricNames: Identifiers of the metrics emitted on close
    - MetricSnapshot: Immutable copy of captured metrics
    - InvalidStateError: The single recorder misuse error
"""

from metric_recorder.domain.exceptions import InvalidStateError, MetricRecorderError
from metric_recorder.domain.standard_metrics import StandardMetricNames
from metric_recorder.domain.value_objects import MetricSnapshot

__all__ = [
    "InvalidStateError",
    "MetricRecorderError",
    "MetricSnapshot",
    "StandardMetricNames",
]
