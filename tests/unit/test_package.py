"""
Unit Tests for the package entry point.

Test Aspects Covered:
    ✅ Integration: Public exports and logging helper
"""

from __future__ import annotations

import logging
from datetime import timedelta

import metric_recorder
from metric_recorder import (
    InMemoryMetricRecorderFactory,
    ManualClock,
    StandardMetricNames,
    configure_logging,
)


class TestPackage:
    """Test cases for the top-level package."""

    def test_version(self) -> None:
        assert metric_recorder.__version__ == "0.1.0"

    def test_exports_resolve(self) -> None:
        for name in metric_recorder.__all__:
            assert hasattr(metric_recorder, name), name

    def test_configure_logging_sets_package_level(self) -> None:
        configure_logging(logging.DEBUG)

        assert logging.getLogger("metric_recorder").level == logging.DEBUG
        logging.getLogger("metric_recorder").setLevel(logging.NOTSET)

    def test_close_logs_at_debug(self, caplog) -> None:
        """
        SCENARIO: Recorder closed with an open duration, DEBUG logging enabled
        EXPECTED: Auto-ended duration and close are logged
        """
        clock = ManualClock()
        recorder = InMemoryMetricRecorderFactory().new_metric_recorder("Sync", clock)
        recorder.start_duration("Upload")
        clock.forward(timedelta(seconds=2))

        with caplog.at_level(logging.DEBUG, logger="metric_recorder"):
            recorder.close()

        assert "Upload" in caplog.text
        assert "Closed metric recorder for Sync" in caplog.text
        assert recorder.sink.get_duration(StandardMetricNames.TIME.value) == timedelta(seconds=2)
