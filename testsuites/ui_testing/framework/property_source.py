"""
================================================================================
Property Source
================================================================================

Key/value settings for browser automation, queried by dotted keys such as
``driver.url.chrome`` or ``wait.implicit.msec.pageload``.

Features:
    - YAML file loading (nested sections or flat dotted keys)
    - Explicit mapping injection (wins over the file)
    - Environment variable override (DISPLAY_SIZE_WIDTH overrides display.size.width)
    - String / boolean / integer accessors with Java-properties semantics

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml
from loguru import logger


# Default settings file, overridable through SELENIUM_CONFIG
DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent.parent / "config" / "selenium.yaml"


class ConfigurationError(Exception):
    """Raised when a setting is missing, malformed or cannot be resolved."""
    pass


class PropertySource:
    """
    Read-only settings store for driver creation and capture.

    Lookup order (highest to lowest priority):
        1. Environment variables (EXECUTE_BROWSER_CHROME)
        2. Explicit ``values`` mapping
        3. YAML configuration file
        4. Empty string

    Usage:
        >>> props = PropertySource({"display.size.maximize": "true"})
        >>> props.get_bool("display.size.maximize")
        True
        >>> props.get_string("display.size.width")
        ''
    """

    def __init__(
        self,
        values: Optional[Mapping[str, Any]] = None,
        config_path: Optional[Path] = None,
    ) -> None:
        """
        Initialize property source.

        Args:
            values: Explicit settings keyed by dotted names
            config_path: YAML file to load first (skipped when None)
        """
        self._config_path = config_path
        self._values: Dict[str, str] = {}

        if config_path is not None:
            self._values.update(self._load_file(config_path))
        if values:
            self._values.update(_flatten(values))

    @classmethod
    def from_yaml(cls, config_path: Optional[Path] = None) -> "PropertySource":
        """
        Load settings from a YAML file.

        Args:
            config_path: File to read. Falls back to $SELENIUM_CONFIG, then
                         DEFAULT_CONFIG_PATH.
        """
        if config_path is None:
            config_path = Path(os.environ.get("SELENIUM_CONFIG", DEFAULT_CONFIG_PATH))
        return cls(config_path=Path(config_path))

    @staticmethod
    def _load_file(config_path: Path) -> Dict[str, str]:
        if not config_path.exists():
            logger.warning(
                f"Configuration file not found: {config_path}. "
                f"Using explicit values and environment variables only."
            )
            return {}

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                raw = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML in configuration file: {e}"
            ) from e

        if not isinstance(raw, dict):
            raise ConfigurationError(
                f"Configuration file must contain a mapping: {config_path}"
            )

        logger.debug(f"Loaded configuration from: {config_path}")
        return _flatten(raw)

    def get_string(self, key: str) -> str:
        """
        Get a setting as a string.

        Args:
            key: Dotted key (e.g., "capture.dir")

        Returns:
            The value, or "" when the key is not configured
        """
        env_key = key.upper().replace(".", "_")
        env_value = os.environ.get(env_key)
        if env_value is not None:
            return env_value

        return self._values.get(key, "")

    def get_bool(self, key: str) -> bool:
        """True only when the value is "true", ignoring case."""
        return self.get_string(key).strip().lower() == "true"

    def get_int(self, key: str, required: bool = False) -> Optional[int]:
        """
        Get a setting as an integer.

        Args:
            key: Dotted key
            required: Raise when the key is not configured

        Returns:
            Parsed integer, or None for an absent optional key

        Raises:
            ConfigurationError: Missing required key or non-numeric value
        """
        value = self.get_string(key).strip()
        if not value:
            if required:
                raise ConfigurationError(f"Required setting is missing: {key}")
            return None

        try:
            return int(value)
        except ValueError as e:
            raise ConfigurationError(
                f"Setting {key} must be an integer, got {value!r}"
            ) from e

    def __contains__(self, key: str) -> bool:
        return self.get_string(key) != ""

    @property
    def config_path(self) -> Optional[Path]:
        """Path of the YAML file this source was loaded from."""
        return self._config_path


def _flatten(data: Mapping[str, Any], prefix: str = "") -> Dict[str, str]:
    """Flatten nested mappings into dotted keys with string values."""
    flat: Dict[str, str] = {}
    for key, value in data.items():
        full_key = f"{prefix}{key}"
        if isinstance(value, Mapping):
            flat.update(_flatten(value, prefix=f"{full_key}."))
        elif value is None:
            flat[full_key] = ""
        elif isinstance(value, bool):
            flat[full_key] = "true" if value else "false"
        else:
            flat[full_key] = str(value)
    return flat


__all__ = [
    "DEFAULT_CONFIG_PATH",
    "ConfigurationError",
    "PropertySource",
]
