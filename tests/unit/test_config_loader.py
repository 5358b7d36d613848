"""
Unit Tests for ConfigLoader.

Test Aspects Covered:
    ✅ Business Logic: Config loading, profiles and merging
    ✅ Error Handling: Invalid values, missing files
    ✅ Integration: Environment overrides
    ✅ Time Logic: Clock selection from config
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

import pytest
from pydantic import ValidationError

from metric_recorder.config.loader import (
    ConfigLoader,
    build_clock,
    load_config,
    merge_configs,
)
from metric_recorder.config.models import ClockConfig, RecorderConfig
from metric_recorder.core.clocks import ManualClock, SystemClock


class TestConfigLoader:
    """Test cases for ConfigLoader."""

    def test_loads_sample_config(self, sample_config_path: Path) -> None:
        """
        SCENARIO: Sample YAML fixture
        EXPECTED: Logging backend with normalized level
        """
        loader = ConfigLoader(base_path=sample_config_path.parent, environ={})

        config = loader.load(sample_config_path.name)

        assert isinstance(config, RecorderConfig)
        assert config.backend == "logging"
        assert config.logging.level == "DEBUG"
        assert config.logging.event_name == "operation_metrics"

    def test_applies_defaults(self) -> None:
        """
        SCENARIO: Minimal config
        EXPECTED: Enabled noop backend with INFO logging
        """
        config = ConfigLoader(environ={}).load_from_dict({"version": "1.0"})

        assert config.enabled is True
        assert config.backend == "noop"
        assert config.logging.level == "INFO"
        assert config.logging.use_json is True
        assert config.clock.kind == "system"

    def test_empty_file_uses_defaults(self, tmp_path: Path) -> None:
        (tmp_path / "empty.yaml").write_text("")

        config = ConfigLoader(base_path=tmp_path, environ={}).load("empty.yaml")

        assert config == RecorderConfig()

    def test_validates_unknown_backend(self, tmp_path: Path) -> None:
        """
        SCENARIO: Backend not among noop/in_memory/logging
        EXPECTED: ValidationError raised
        """
        (tmp_path / "invalid.yaml").write_text('version: "1.0"\nbackend: carrier_pigeon\n')
        loader = ConfigLoader(base_path=tmp_path, environ={})

        with pytest.raises(ValidationError):
            loader.load("invalid.yaml")

    def test_validates_log_level(self) -> None:
        with pytest.raises(ValidationError):
            RecorderConfig.model_validate({"logging": {"level": "chatty"}})

    def test_rejects_non_mapping_root(self, tmp_path: Path) -> None:
        (tmp_path / "list.yaml").write_text("- noop\n- logging\n")

        with pytest.raises(ValueError):
            ConfigLoader(base_path=tmp_path, environ={}).load("list.yaml")

    def test_file_not_found(self, tmp_path: Path) -> None:
        loader = ConfigLoader(base_path=tmp_path)

        with pytest.raises(FileNotFoundError):
            loader.load("nonexistent.yaml")

    def test_profile_overlay(self, tmp_path: Path) -> None:
        """
        SCENARIO: Base config plus 'test' profile
        EXPECTED: Profile values override base, other values kept
        """
        # Arrange
        (tmp_path / "base.yaml").write_text(
            "backend: logging\nlogging:\n  level: INFO\n  event_name: ops\n"
        )
        profiles = tmp_path / "config" / "profiles"
        profiles.mkdir(parents=True)
        (profiles / "test.yaml").write_text("backend: in_memory\nlogging:\n  level: ERROR\n")

        # Act
        config = ConfigLoader(base_path=tmp_path, environ={}).load("base.yaml", profile="test")

        # Assert
        assert config.backend == "in_memory"
        assert config.logging.level == "ERROR"
        assert config.logging.event_name == "ops"

    def test_missing_profile(self, tmp_path: Path) -> None:
        (tmp_path / "base.yaml").write_text("backend: noop\n")

        with pytest.raises(FileNotFoundError, match="Profile not found"):
            ConfigLoader(base_path=tmp_path, environ={}).load("base.yaml", profile="prod")

    def test_environment_overrides(self) -> None:
        """
        SCENARIO: Env vars set backend, enabled flag and log level
        EXPECTED: Env wins over dict values
        """
        environ = {
            "METRIC_RECORDER_BACKEND": "Logging",
            "METRIC_RECORDER_ENABLED": "false",
            "METRIC_RECORDER_LOG_LEVEL": "warning",
        }
        loader = ConfigLoader(environ=environ)

        config = loader.load_from_dict({"backend": "in_memory", "enabled": True})

        assert config.backend == "logging"
        assert config.enabled is False
        assert config.effective_backend == "noop"
        assert config.logging.level == "WARNING"

    def test_load_config_convenience(self, sample_config_path: Path,
                                     monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("METRIC_RECORDER_BACKEND", raising=False)
        monkeypatch.delenv("METRIC_RECORDER_ENABLED", raising=False)
        monkeypatch.delenv("METRIC_RECORDER_LOG_LEVEL", raising=False)

        config = load_config(sample_config_path)

        assert config.backend == "logging"


class TestMergeConfigs:
    """Test cases for deep merging."""

    def test_overlay_wins_and_nested_keys_kept(self) -> None:
        base = {"backend": "noop", "logging": {"level": "INFO", "event_name": "a"}}
        overlay = {"logging": {"level": "DEBUG"}}

        merged = merge_configs(base, overlay)

        assert merged == {"backend": "noop", "logging": {"level": "DEBUG", "event_name": "a"}}
        assert base["logging"]["level"] == "INFO"


class TestBuildClock:
    """Test cases for building the configured clock."""

    def test_system_clock_by_default(self) -> None:
        clock = build_clock(RecorderConfig())

        assert isinstance(clock, SystemClock)

    def test_manual_clock_with_start(self, tmp_path: Path) -> None:
        """
        SCENARIO: YAML selects a manual clock with a naive start instant
        EXPECTED: ManualClock frozen at that instant, interpreted as UTC
        """
        # Arrange
        (tmp_path / "clock.yaml").write_text(
            "clock:\n  kind: manual\n  start: 2024-12-15 09:30:00\n"
        )
        config = ConfigLoader(base_path=tmp_path, environ={}).load("clock.yaml")

        # Act
        clock = build_clock(config)

        # Assert
        assert isinstance(clock, ManualClock)
        assert clock.now() == datetime(2024, 12, 15, 9, 30, tzinfo=timezone.utc)
        assert clock.now() == clock.now()

    def test_accepts_clock_section(self) -> None:
        clock = build_clock(ClockConfig(kind="manual"))

        assert isinstance(clock, ManualClock)
        assert clock.now().tzinfo is not None

    def test_each_call_builds_new_clock(self) -> None:
        config = RecorderConfig(clock=ClockConfig(kind="manual"))

        assert build_clock(config) is not build_clock(config)

    def test_rejects_unknown_kind(self) -> None:
        """
        SCENARIO: Clock kind not among system/manual
        EXPECTED: ValidationError raised at load time
        """
        with pytest.raises(ValidationError):
            ConfigLoader(environ={}).load_from_dict({"clock": {"kind": "atomic"}})
