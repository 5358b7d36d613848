"""
Configuration Loader - YAML Loading with Validation.

Loads recorder configuration from YAML files, applies an optional profile
overlay and environment overrides, and validates with Pydantic.

Environment overrides:
    - METRIC_RECORDER_ENABLED: "true"/"false"
    - METRIC_RECORDER_BACKEND: noop, in_memory or logging
    - METRIC_RECORDER_LOG_LEVEL: level for the logging backend
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional, Union

import yaml

from metric_recorder.config.models import ClockConfig, RecorderConfig
from metric_recorder.core.clocks import ManualClock, SystemClock

if TYPE_CHECKING:
    from metric_recorder.interfaces.clock import Clock

logger = logging.getLogger(__name__)

ENV_PREFIX = "METRIC_RECORDER_"


class ConfigLoader:
    """Loads and validates recorder configuration from YAML files."""

    def __init__(
        self,
        base_path: Optional[Path] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        """
        Initialize config loader.

        Args:
            base_path: Base path for relative config and profile paths
            environ: Environment mapping for overrides (default: os.environ)
        """
        self._base_path = base_path or Path(".")
        self._environ = environ if environ is not None else os.environ

    def load(
        self,
        config_path: Union[str, Path],
        profile: Optional[str] = None,
    ) -> RecorderConfig:
        """
        Load configuration from a YAML file.

        Args:
            config_path: Path to YAML config file
            profile: Optional profile name, read from config/profiles/<name>.yaml

        Returns:
            Validated RecorderConfig

        Raises:
            FileNotFoundError: If the config file or profile doesn't exist
            ValidationError: If the config is invalid
        """
        path = self._resolve_path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        config_dict = self._read_yaml(path)

        if profile:
            config_dict = merge_configs(config_dict, self._read_profile(profile))

        logger.debug(f"Loaded metric recorder config from {path}")
        return self.load_from_dict(config_dict)

    def load_from_dict(self, config_dict: Dict[str, Any]) -> RecorderConfig:
        """Validate a config dictionary after applying environment overrides."""
        return RecorderConfig.model_validate(self._apply_env(config_dict))

    def _resolve_path(self, path: Union[str, Path]) -> Path:
        p = Path(path)
        return p if p.is_absolute() else self._base_path / p

    def _read_yaml(self, path: Path) -> Dict[str, Any]:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(f"Config root must be a mapping: {path}")
        return data

    def _read_profile(self, profile: str) -> Dict[str, Any]:
        profile_path = self._base_path / "config" / "profiles" / f"{profile}.yaml"
        if not profile_path.exists():
            raise FileNotFoundError(f"Profile not found: {profile}")
        return self._read_yaml(profile_path)

    def _apply_env(self, config_dict: Dict[str, Any]) -> Dict[str, Any]:
        overrides: Dict[str, Any] = {}
        enabled = self._environ.get(f"{ENV_PREFIX}ENABLED")
        if enabled is not None:
            overrides["enabled"] = enabled.strip().lower() in {"1", "true", "yes", "on"}
        backend = self._environ.get(f"{ENV_PREFIX}BACKEND")
        if backend:
            overrides["backend"] = backend.strip().lower()
        level = self._environ.get(f"{ENV_PREFIX}LOG_LEVEL")
        if level:
            overrides["logging"] = {"level": level.strip()}
        if overrides:
            logger.debug(f"Applying environment overrides: {sorted(overrides)}")
        return merge_configs(config_dict, overrides)


def merge_configs(base: Dict[str, Any], overlay: Dict[str, Any]) -> Dict[str, Any]:
    """Deep merge overlay into a copy of base; overlay wins."""
    result = dict(base)
    for key, value in overlay.items():
        if isinstance(result.get(key), dict) and isinstance(value, dict):
            result[key] = merge_configs(result[key], value)
        else:
            result[key] = value
    return result


def load_config(
    config_path: Union[str, Path],
    profile: Optional[str] = None,
    base_path: Optional[Path] = None,
) -> RecorderConfig:
    """
    Convenience function to load configuration.

    Args:
        config_path: Path to YAML config file
        profile: Optional profile name
        base_path: Base path for resolving relative paths

    Returns:
        Validated RecorderConfig
    """
    return ConfigLoader(base_path=base_path).load(config_path, profile)


def build_clock(config: Union[RecorderConfig, ClockConfig]) -> Clock:
    """
    Build the clock described by a configuration.

    Args:
        config: RecorderConfig or its ClockConfig section

    Returns:
        SystemClock for kind "system", ManualClock for kind "manual"
    """
    clock_config = config.clock if isinstance(config, RecorderConfig) else config
    if clock_config.kind == "manual":
        return ManualClock(clock_config.start)
    return SystemClock()
