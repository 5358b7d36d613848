"""
Structured Logging - structlog Configuration.

Provides:
    - configure_structlog(): JSON or console rendering via structlog
    - get_structured_logger(): logger used by publishing sinks
    - build_structured_logger(): standalone logger with its own renderer

Design Notes:
    - Nothing is configured on import; applications opt in
    - Context variables are merged so callers can bind request IDs
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional

import structlog


def _build_processors(use_json: bool) -> List[Any]:
    processors: List[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if use_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))
    return processors


def configure_structlog(
    use_json: bool = True,
    log_level: int = logging.INFO,
    cache_logger_on_first_use: bool = True,
) -> None:
    """
    Configure structlog for structured metric events.

    Args:
        use_json: Render events as JSON (else human-readable console output)
        log_level: Minimum level that is emitted
        cache_logger_on_first_use: Passed through to structlog.configure
    """
    structlog.configure(
        processors=_build_processors(use_json),
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=cache_logger_on_first_use,
    )


def get_structured_logger(name: Optional[str] = None, **initial_values: Any) -> Any:
    """Return a structlog logger, optionally bound to initial key/values."""
    return structlog.get_logger(name or "metric_recorder", **initial_values)


def build_structured_logger(
    use_json: bool = True,
    log_level: int = logging.INFO,
    **initial_values: Any,
) -> Any:
    """
    Build a logger that renders with its own processor chain.

    Unlike configure_structlog(), the global structlog configuration is left
    untouched, so a configured backend can choose JSON or console output
    without affecting the host application.

    Args:
        use_json: Render events as JSON (else human-readable console output)
        log_level: Minimum level that is emitted
        **initial_values: Key/values bound to every event

    Returns:
        A bound structlog logger printing to stdout
    """
    return structlog.wrap_logger(
        structlog.PrintLogger(),
        processors=_build_processors(use_json),
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        **initial_values,
    )
