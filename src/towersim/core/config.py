"""Configuration loader for simulation settings.

Simulation settings live in YAML files and are read with dotted keys, so a
run can be tuned without touching code.

Typical usage example:
    from towersim.core.config import ConfigLoader

    config = ConfigLoader.load("config/simulation.yaml")
    ticks = config.get("simulation.ticks", default=10)
"""

import logging
from pathlib import Path
from typing import Any

import yaml

from towersim.core.exceptions import TowerSimError

logger = logging.getLogger(__name__)


class ConfigError(TowerSimError):
    """Raised when configuration operations fail."""


class ConfigLoader:
    """Configuration loader for YAML files.

    Provides loading, nested access with dot notation, and default values.

    Examples:
        >>> config = ConfigLoader({"simulation": {"ticks": 25}})
        >>> config.get("simulation.ticks")
        25
        >>> config.get("simulation.paused", default=False)
        False
    """

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        """Initialize with configuration data.

        Args:
            data: Configuration dictionary.
        """
        self._data = data if data is not None else {}

    @classmethod
    def load(cls, path: str | Path) -> "ConfigLoader":
        """Load configuration from a YAML file.

        Args:
            path: Path to YAML configuration file.

        Returns:
            ConfigLoader instance with loaded data.

        Raises:
            ConfigError: If the file is missing, unreadable, or not a mapping.
        """
        path = Path(path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        try:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Failed to load configuration: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"Configuration root must be a mapping: {path}")

        logger.info("Loaded configuration from: %s", path)
        return cls(data)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value using dot notation.

        Args:
            key: Configuration key, e.g. "simulation.ticks".
            default: Value returned when the key is absent.

        Returns:
            Configuration value or default.
        """
        value: Any = self._data

        for k in key.split("."):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def set(self, key: str, value: Any) -> None:
        """Set a configuration value using dot notation.

        Intermediate sections are created as needed.

        Args:
            key: Configuration key.
            value: Value to set.
        """
        keys = key.split(".")
        data = self._data

        for k in keys[:-1]:
            data = data.setdefault(k, {})

        data[keys[-1]] = value

    def get_section(self, key: str) -> dict[str, Any]:
        """Get an entire configuration section.

        Args:
            key: Section key (supports dot notation).

        Returns:
            Configuration section as dictionary.

        Raises:
            ConfigError: If section not found or not a dict.
        """
        value = self.get(key)

        if value is None:
            raise ConfigError(f"Configuration section not found: {key}")

        if not isinstance(value, dict):
            raise ConfigError(f"Configuration key is not a section: {key}")

        return value

    def merge(self, other: "ConfigLoader") -> None:
        """Merge another configuration into this one.

        Values from other override existing ones; nested sections merge.

        Args:
            other: ConfigLoader to merge from.
        """
        self._data = self._merge_dicts(self._data, other._data)

    def _merge_dicts(self, base: dict, override: dict) -> dict:
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge_dicts(result[key], value)
            else:
                result[key] = value

        return result

    def to_dict(self) -> dict[str, Any]:
        """Get the configuration as a dictionary.

        Returns:
            Shallow copy of the configuration dictionary.
        """
        return self._data.copy()
