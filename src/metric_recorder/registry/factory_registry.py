"""
Factory Registry - Config-Driven Recorder Factory Selection.

This module provides a thread-safe registry mapping backend names to
builders of MetricRecorderFactory instances. The registry holds builders
only; it never holds or shares recorders.

Usage:
    registry = create_default_registry()
    registry.register("statsd_like", build_my_factory, "Custom backend")

    factory = registry.create("in_memory")
    with factory.new_metric_recorder("GetItem") as metrics:
        ...
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from threading import RLock
from typing import TYPE_CHECKING, Any, Callable, Dict, Optional

from metric_recorder.adapters.factories import (
    InMemoryMetricRecorderFactory,
    LoggingMetricRecorderFactory,
    NoopMetricRecorderFactory,
)
from metric_recorder.config.loader import build_clock
from metric_recorder.config.models import RecorderConfig
from metric_recorder.observability.structured_logging import build_structured_logger

if TYPE_CHECKING:
    from metric_recorder.interfaces.recorder_factory import MetricRecorderFactory

logger = logging.getLogger(__name__)

FactoryBuilder = Callable[[RecorderConfig], "MetricRecorderFactory"]


@dataclass
class FactoryInfo:
    """Metadata about a registered backend."""

    name: str
    builder: FactoryBuilder
    description: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "name": self.name,
            "description": self.description,
            "builder": getattr(self.builder, "__name__", repr(self.builder)),
        }


class FactoryRegistry:
    """
    Thread-safe registry of recorder factory builders.

    Supports:
        - Registration of custom backends
        - Creating a factory by backend name from a RecorderConfig
    """

    def __init__(self) -> None:
        """Initialize empty registry."""
        self._builders: Dict[str, FactoryInfo] = {}
        self._lock = RLock()
        logger.debug("FactoryRegistry initialized")

    def register(
        self,
        name: str,
        builder: FactoryBuilder,
        description: str = "",
    ) -> None:
        """
        Register a backend.

        Args:
            name: Unique backend name
            builder: Callable taking a RecorderConfig, returning a factory
            description: Optional description

        Raises:
            ValueError: If a backend with this name is already registered
        """
        with self._lock:
            if name in self._builders:
                raise ValueError(
                    f"Backend '{name}' is already registered. Use unregister() first."
                )
            self._builders[name] = FactoryInfo(
                name=name, builder=builder, description=description
            )
            logger.info(f"Registered metric recorder backend: {name}")

    def unregister(self, name: str) -> bool:
        """
        Unregister a backend by name.

        Returns:
            True if removed, False if not found
        """
        with self._lock:
            if name not in self._builders:
                logger.warning(f"Cannot unregister: backend '{name}' not found")
                return False
            del self._builders[name]
            logger.info(f"Unregistered metric recorder backend: {name}")
            return True

    def is_registered(self, name: str) -> bool:
        with self._lock:
            return name in self._builders

    def create(
        self,
        name: str,
        config: Optional[RecorderConfig] = None,
    ) -> MetricRecorderFactory:
        """
        Build a new factory for the named backend.

        Args:
            name: Backend name
            config: Configuration passed to the builder (default: RecorderConfig())

        Returns:
            A new MetricRecorderFactory

        Raises:
            KeyError: If the backend is not registered
        """
        with self._lock:
            info = self._builders.get(name)
        if info is None:
            raise KeyError(f"Unknown metric recorder backend: {name!r}")
        return info.builder(config if config is not None else RecorderConfig())

    def list_all(self) -> Dict[str, FactoryInfo]:
        """Dictionary of backend name to FactoryInfo."""
        with self._lock:
            return dict(self._builders)


def _build_noop(config: RecorderConfig) -> NoopMetricRecorderFactory:
    return NoopMetricRecorderFactory(clock=build_clock(config))


def _build_in_memory(config: RecorderConfig) -> InMemoryMetricRecorderFactory:
    return InMemoryMetricRecorderFactory(clock=build_clock(config))


def _build_logging(config: RecorderConfig) -> LoggingMetricRecorderFactory:
    log_settings = config.logging
    return LoggingMetricRecorderFactory(
        logger=build_structured_logger(
            use_json=log_settings.use_json,
            log_level=logging.getLevelName(log_settings.level),
        ),
        event_name=log_settings.event_name,
        level=log_settings.level.lower(),
        clock=build_clock(config),
    )


def create_default_registry() -> FactoryRegistry:
    """Create a registry with the bundled noop, in_memory and logging backends."""
    registry = FactoryRegistry()
    registry.register("noop", _build_noop, "Discards all metrics")
    registry.register("in_memory", _build_in_memory, "Captures metrics for tests")
    registry.register("logging", _build_logging, "Publishes metrics via structlog")
    return registry


def create_factory(
    config: Optional[RecorderConfig] = None,
    registry: Optional[FactoryRegistry] = None,
) -> MetricRecorderFactory:
    """
    Resolve the configured backend to a recorder factory.

    Disabled configs always resolve to the noop backend.
    """
    config = config if config is not None else RecorderConfig()
    registry = registry if registry is not None else create_default_registry()
    return registry.create(config.effective_backend, config)
