"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

import pytest

from metric_recorder.adapters.factories import (
    InMemoryMetricRecorderFactory,
    NoopMetricRecorderFactory,
)
from metric_recorder.adapters.in_memory_sink import InMemoryMetricSink
from metric_recorder.config.models import RecorderConfig
from metric_recorder.core.clocks import ManualClock
from metric_recorder.core.recorder import MetricRecorder


@pytest.fixture
def reference_time() -> datetime:
    """Standard starting instant for deterministic clocks."""
    return datetime(2024, 12, 15, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def manual_clock(reference_time: datetime) -> ManualClock:
    """Create a clock that only moves when the test moves it."""
    return ManualClock(reference_time)


@pytest.fixture
def in_memory_sink() -> InMemoryMetricSink:
    """Create an empty capture sink."""
    return InMemoryMetricSink()


@pytest.fixture
def recorder(in_memory_sink: InMemoryMetricSink, manual_clock: ManualClock) -> MetricRecorder:
    """Create an open recorder for operation 'test' on the manual clock."""
    return MetricRecorder("test", in_memory_sink, manual_clock)


@pytest.fixture
def in_memory_factory() -> InMemoryMetricRecorderFactory:
    """Create in-memory recorder factory."""
    return InMemoryMetricRecorderFactory()


@pytest.fixture
def noop_factory() -> NoopMetricRecorderFactory:
    """Create no-op recorder factory."""
    return NoopMetricRecorderFactory()


@pytest.fixture
def sample_config_path() -> Path:
    """Path to sample configuration file."""
    return Path(__file__).parent / "fixtures" / "sample_config.yaml"


@pytest.fixture
def default_config() -> RecorderConfig:
    """Create default recorder configuration."""
    return RecorderConfig()
