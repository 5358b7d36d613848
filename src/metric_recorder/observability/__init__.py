"""
Observability Package - Structured Logging.

This package wires structlog for sinks that publish metrics as log events.

Design Principles:
    - Library code logs through stdlib logging; structlog is opt-in
    - Structured JSON logging via structlog
"""

from metric_recorder.observability.structured_logging import (
    build_structured_logger,
    configure_structlog,
    get_structured_logger,
)

__all__ = [
    "build_structured_logger",
    "configure_structlog",
    "get_structured_logger",
]
