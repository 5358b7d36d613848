"""
Metric Recorder Factory Protocol.

Defines the abstract interface for objects that create recorders.
A factory produces a brand-new, open recorder per logical operation;
recorders are never shared or pooled.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
    from metric_recorder.core.recorder import MetricRecorder
    from metric_recorder.interfaces.clock import Clock


@runtime_checkable
class MetricRecorderFactory(Protocol):
    """Abstract interface for recorder creation."""

    def new_metric_recorder(
        self,
        operation: str,
        clock: Optional[Clock] = None,
    ) -> MetricRecorder:
        """
        Create a fresh MetricRecorder.

        Args:
            operation: The operation about which metrics will be recorded,
                e.g. the name of the API being called or of a discrete
                sub-operation.
            clock: Time source for the recorder. Defaults to the system
                UTC clock.

        Returns:
            A new, open MetricRecorder
        """
        ...
