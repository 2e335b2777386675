"""
================================================================================
Configuration Loader
================================================================================

YAML-based configuration management with environment variable override support.

Features:
    - Built-in defaults merged under the YAML file
    - Environment variable override (UI_BASE_URL overrides ui.base_url)
    - Dot notation path access
    - Default value support

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import copy
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from loguru import logger

from .exceptions import ConfigurationError


# Default configuration file path
DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "config.yaml"

# Values used when neither the YAML file nor the environment provides a key
DEFAULTS: Dict[str, Any] = {
    "ui": {
        "base_url": "http://leaftaps.com",
        "login_path": "/opentaps/control/main",
        "username": "demosalesmanager",
        "password": "crmsfa",
        "enabled": False,
        "browser": "chromium",
        "headless": True,
        "timeout_ms": 10000,
        "viewport": {"width": 1920, "height": 1080},
    },
    "data": {
        "directory": "ui_testing/data",
    },
    "logging": {
        "level": "INFO",
        "file": None,
        "rotation": "10 MB",
        "retention": "7 days",
    },
}


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Deep merge two dictionaries, with override taking precedence."""
    result = copy.deepcopy(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


class ConfigLoader:
    """
    Configuration loader with YAML and environment variable support.

    Configuration hierarchy (highest to lowest priority):
        1. Environment variables (UI_BASE_URL)
        2. YAML configuration file
        3. Built-in DEFAULTS
        4. Default passed to get()

    Usage:
        >>> config = ConfigLoader()
        >>> config.get("ui.base_url")
        'http://leaftaps.com'

        >>> config.get("ui.timeout_ms", 5000)
        10000

    Environment Variable Mapping:
        - ui.base_url -> UI_BASE_URL
        - ui.enabled -> UI_ENABLED
        - logging.level -> LOGGING_LEVEL
    """

    _instance: Optional["ConfigLoader"] = None
    _config: Dict[str, Any] = {}

    def __new__(cls, config_path: Optional[Path] = None) -> "ConfigLoader":
        """Singleton pattern - return existing instance if available."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, config_path: Optional[Path] = None) -> None:
        """
        Initialize configuration loader.

        Args:
            config_path: Path to YAML configuration file.
                        Uses DEFAULT_CONFIG_PATH if not specified.
        """
        if getattr(self, "_initialized", False):
            return

        self._config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
        self._load_config()
        self._initialized = True

    def _load_config(self) -> None:
        """Load configuration from YAML file on top of DEFAULTS."""
        if not self._config_path.exists():
            logger.warning(
                f"Configuration file not found: {self._config_path}. "
                f"Using defaults and environment variables only."
            )
            self._config = copy.deepcopy(DEFAULTS)
            return

        try:
            with open(self._config_path, "r", encoding="utf-8") as f:
                file_config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML in configuration file: {e}"
            ) from e

        if not isinstance(file_config, dict):
            raise ConfigurationError(
                f"Configuration root must be a mapping: {self._config_path}"
            )

        self._config = _deep_merge(DEFAULTS, file_config)
        logger.debug(f"Loaded configuration from: {self._config_path}")

    @property
    def config_path(self) -> Path:
        return self._config_path

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by dot-notation path.

        First checks environment variables, then YAML config, then default.

        Args:
            key: Dot-notation path (e.g., "ui.base_url")
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        # Check environment variable first
        env_key = key.upper().replace(".", "_")
        env_value = os.environ.get(env_key)
        if env_value is not None:
            reference = default if default is not None else self._lookup(key)
            return self._convert_type(env_value, reference)

        value = self._lookup(key)
        return default if value is None else value

    def _lookup(self, key: str) -> Any:
        """Navigate the loaded config by dot notation."""
        value: Any = self._config
        for part in key.split("."):
            if isinstance(value, dict):
                value = value.get(part)
            else:
                return None
            if value is None:
                return None
        return value

    def get_section(self, section: str) -> Dict[str, Any]:
        """
        Get entire configuration section.

        Leaf values go through get(), so UI_BASE_URL shows up in
        get_section("ui")["base_url"].

        Args:
            section: Section name (e.g., "ui", "logging")

        Returns:
            Section dictionary or empty dict if not found
        """
        return self._with_overrides(section, self._config.get(section, {}))

    def _with_overrides(self, prefix: str, values: Dict[str, Any]) -> Dict[str, Any]:
        result: Dict[str, Any] = {}
        for key, value in values.items():
            path = f"{prefix}.{key}"
            if isinstance(value, dict):
                result[key] = self._with_overrides(path, value)
            else:
                result[key] = self.get(path)
        return result

    def reload(self) -> None:
        """Reload configuration from file."""
        self._load_config()
        logger.info(f"Configuration reloaded from: {self._config_path}")

    def _convert_type(self, value: str, reference: Any) -> Any:
        """
        Convert string value to match reference type.

        Used for environment variables which are always strings.
        """
        if reference is None:
            return value

        if isinstance(reference, bool):
            return value.lower() in ("true", "1", "yes", "on")
        if isinstance(reference, int):
            try:
                return int(value)
            except ValueError:
                return value
        if isinstance(reference, float):
            try:
                return float(value)
            except ValueError:
                return value

        return value

    @classmethod
    def reset(cls) -> None:
        """
        Reset singleton instance.

        Useful for testing when configuration needs to be reloaded
        with different settings.
        """
        cls._instance = None
        cls._config = {}


__all__ = [
    "ConfigLoader",
    "ConfigurationError",
    "DEFAULTS",
]
