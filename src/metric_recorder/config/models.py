"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

Backend = Literal["noop", "in_memory", "logging"]
ClockKind = Literal["system", "manual"]


class LoggingConfig(BaseModel):
    """Settings for the logging backend."""

    level: str = Field(default="INFO")
    use_json: bool = True
    event_name: str = Field(default="metrics_published", min_length=1)

    @field_validator("level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        normalized = value.upper()
        if normalized not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unsupported log level: {value}")
        return normalized


class ClockConfig(BaseModel):
    """Time source handed to recorders by configured factories."""

    kind: ClockKind = "system"
    start: Optional[datetime] = Field(
        default=None,
        description="Initial instant of a manual clock (default: current UTC time)",
    )

    @field_validator("start")
    @classmethod
    def _assume_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


class RecorderConfig(BaseModel):
    """Root configuration object."""

    version: str = "1.0"
    enabled: bool = True
    backend: Backend = "noop"
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    clock: ClockConfig = Field(default_factory=ClockConfig)

    model_config = {"populate_by_name": True}

    @property
    def effective_backend(self) -> str:
        """Backend actually used; disabled collection always discards."""
        return self.backend if self.enabled else "noop"
