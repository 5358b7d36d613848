"""
Value Objects for Domain Layer.

Value objects are immutable objects describing the metrics captured
by a finalized recorder.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Any, Dict

from pydantic import BaseModel, Field


# =============================================================================
# Type Aliases for improved readability
# =============================================================================

# Metric name -> string label
PropertiesDict = Dict[str, str]

# Metric name -> instant
TimestampsDict = Dict[str, datetime]

# Metric name -> running sum
CountsDict = Dict[str, float]

# Metric name -> running sum of durations
DurationsDict = Dict[str, timedelta]


class MetricSnapshot(BaseModel):
    """Point-in-time copy of every metric captured for one operation."""

    properties: PropertiesDict = Field(
        default_factory=dict, description="Name -> string label"
    )
    timestamps: TimestampsDict = Field(
        default_factory=dict, description="Name -> instant"
    )
    counts: CountsDict = Field(
        default_factory=dict, description="Name -> aggregated count"
    )
    durations: DurationsDict = Field(
        default_factory=dict, description="Name -> aggregated duration"
    )

    model_config = {"frozen": True}

    @property
    def is_empty(self) -> bool:
        return not (self.properties or self.timestamps or self.counts or self.durations)

    def to_log_dict(self) -> Dict[str, Any]:
        """
        Convert to JSON-friendly values for structured logging.

        Timestamps become ISO-8601 strings and durations become seconds.
        """
        return {
            "properties": dict(self.properties),
            "timestamps": {
                name: value.isoformat() for name, value in self.timestamps.items()
            },
            "counts": dict(self.counts),
            "durations": {
                name: value.total_seconds() for name, value in self.durations.items()
            },
        }
