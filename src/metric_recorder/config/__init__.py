"""
Configuration Package - Models and Loaders.

Configuration Structure:
    - RecorderConfig: Root configuration object (enabled, backend, logging, clock)
    - LoggingConfig: Settings for the logging backend
    - ClockConfig: Time source for configured factories (system or manual)

Design Principles:
    - Type-safe via Pydantic
    - Validation on load (fail fast)
    - Support for profiles and environment overrides
"""

from metric_recorder.config.loader import (
    ConfigLoader,
    build_clock,
    load_config,
    merge_configs,
)
from metric_recorder.config.models import ClockConfig, LoggingConfig, RecorderConfig

__all__ = [
    "ClockConfig",
    "ConfigLoader",
    "LoggingConfig",
    "RecorderConfig",
    "build_clock",
    "load_config",
    "merge_configs",
]
