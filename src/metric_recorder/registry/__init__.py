"""
Registry Module - Backend Management.

Components:
    - FactoryRegistry: Maps backend names to factory builders
    - FactoryInfo: Metadata about registered backends
    - create_factory: Config-driven factory resolution
"""

from metric_recorder.registry.factory_registry import (
    FactoryInfo,
    FactoryRegistry,
    create_default_registry,
    create_factory,
)

__all__ = [
    "FactoryInfo",
    "FactoryRegistry",
    "create_default_registry",
    "create_factory",
]
