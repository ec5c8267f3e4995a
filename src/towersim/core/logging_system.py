"""Logging setup for simulation runs.

This module configures the standard logging package from a YAML file (or
built-in defaults), gives each component a cached logger, and rotates the
run log so the last few simulation runs stay on disk.

Typical usage example:
    from towersim.core.logging_system import get_logger, initialize_logging

    initialize_logging("config/logging.yaml")
    log = get_logger(__name__)
    log.info("Tower opened with %d terminals", len(terminals))
"""

import logging
import time
from pathlib import Path
from typing import Any

import yaml

from towersim.core.exceptions import TowerSimError

_logging_config: dict[str, Any] = {}
_loggers_cache: dict[str, logging.Logger] = {}
_configured_components: set[str] = set()
_initialized = False


class LoggingError(TowerSimError):
    """Raised when logging system operations fail."""


def rotate_logs(log_dir: Path, log_filename: str = "towersim.log", keep_count: int = 5) -> None:
    """Rotate run logs, keeping the last N runs.

    Renames towersim.log to towersim.log.1, shifts older logs up by one and
    deletes whatever falls beyond keep_count.

    Args:
        log_dir: Directory containing log files.
        log_filename: Base name of the log file.
        keep_count: Number of previous run logs to keep.

    Examples:
        >>> rotate_logs(Path("logs"), "towersim.log", 3)
        # towersim.log -> towersim.log.1
        # towersim.log.1 -> towersim.log.2
        # towersim.log.3 -> deleted
    """
    log_file = log_dir / log_filename
    if not log_file.exists():
        return

    oldest_log = log_dir / f"{log_filename}.{keep_count}"
    if oldest_log.exists():
        oldest_log.unlink()

    for i in range(keep_count - 1, 0, -1):
        old_log = log_dir / f"{log_filename}.{i}"
        if old_log.exists():
            old_log.rename(log_dir / f"{log_filename}.{i + 1}")

    log_file.rename(log_dir / f"{log_filename}.1")


def initialize_logging(
    config_path: str | Path | None = None, log_dir: str | Path | None = None
) -> None:
    """Initialize logging from a YAML configuration file.

    Call once before a simulation run. Without a config path the built-in
    defaults are used: console output at INFO and no log file.

    Args:
        config_path: Path to a logging configuration YAML file.
        log_dir: Overrides the log directory from the configuration.

    Raises:
        LoggingError: If the configuration cannot be loaded.

    Examples:
        >>> initialize_logging("config/logging.yaml", log_dir="runs/logs")
    """
    global _logging_config, _initialized

    if config_path:
        config_path = Path(config_path)
        if not config_path.exists():
            raise LoggingError(f"Logging config file not found: {config_path}")
        try:
            with config_path.open("r", encoding="utf-8") as f:
                loaded = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise LoggingError(f"Failed to load logging config: {e}") from e
        _logging_config = _merge_defaults(loaded)
    else:
        _logging_config = _get_default_config()

    if log_dir is not None:
        _logging_config["log_dir"] = str(log_dir)

    file_config = _logging_config["file"]
    if file_config.get("enabled", False):
        directory = Path(_logging_config["log_dir"])
        directory.mkdir(parents=True, exist_ok=True)
        rotate_logs(
            directory,
            file_config.get("filename", "towersim.log"),
            file_config.get("backup_count", 5),
        )

    _configure_root_logger()
    _configure_components()
    _loggers_cache.clear()
    _initialized = True


def _get_default_config() -> dict[str, Any]:
    """Get default logging configuration.

    Returns:
        Default logging configuration dictionary.
    """
    return {
        "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        "date_format": "%Y-%m-%d %H:%M:%S",
        "log_dir": "logs",
        "console": {"enabled": True, "level": "INFO"},
        "file": {
            "enabled": False,
            "level": "DEBUG",
            "filename": "towersim.log",
            "backup_count": 5,
        },
        "components": {},
    }


def _merge_defaults(loaded: dict[str, Any]) -> dict[str, Any]:
    """Fill in any sections missing from a loaded configuration."""
    config = _get_default_config()
    for key, value in loaded.items():
        if isinstance(value, dict) and isinstance(config.get(key), dict):
            config[key] = {**config[key], **value}
        else:
            config[key] = value
    return config


def _configure_root_logger() -> None:
    """Configure the root logger with console and file handlers."""
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.handlers.clear()

    console_config = _logging_config["console"]
    if console_config.get("enabled", True):
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_config.get("level", "INFO")))
        console_handler.setFormatter(_get_formatter())
        root_logger.addHandler(console_handler)

    file_config = _logging_config["file"]
    if file_config.get("enabled", False):
        log_file = Path(_logging_config["log_dir"]) / file_config.get("filename", "towersim.log")
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_config.get("level", "DEBUG")))
        file_handler.setFormatter(_get_formatter())
        root_logger.addHandler(file_handler)


def _configure_components() -> None:
    """Apply per-component levels, undoing those of a previous configuration.

    Settings go straight onto the named loggers, so modules that created
    their logger at import time pick them up too.
    """
    for name in _configured_components:
        logger = logging.getLogger(name)
        logger.setLevel(logging.NOTSET)
        logger.disabled = False
    _configured_components.clear()

    for name, component_config in (_logging_config.get("components") or {}).items():
        component_config = component_config or {}
        logger = logging.getLogger(name)
        if not component_config.get("enabled", True):
            logger.disabled = True
        elif "level" in component_config:
            logger.setLevel(getattr(logging, component_config["level"]))
        _configured_components.add(name)


class MillisecondFormatter(logging.Formatter):
    """Formatter that appends milliseconds with a dot separator."""

    def formatTime(self, record, datefmt=None):
        """Format time with milliseconds using dot separator."""
        ct = self.converter(record.created)
        s = time.strftime(datefmt or "%Y-%m-%d %H:%M:%S", ct)
        return f"{s}.{int(record.msecs):03d}"


def _get_formatter() -> logging.Formatter:
    """Get the configured log formatter."""
    return MillisecondFormatter(
        _logging_config.get("format", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"),
        _logging_config.get("date_format", "%Y-%m-%d %H:%M:%S"),
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger for an application entry point, initializing logging if needed.

    Loggers are cached. Library modules use logging.getLogger(__name__)
    instead so that importing them leaves logging untouched. Either way a
    component can get its own level, or be disabled, under the 'components'
    section of the logging configuration:

        components:
          towersim.aircraft.aircraft:
            level: WARNING

    Args:
        name: Logger name, typically the module's __name__.

    Returns:
        Configured logger instance.

    Examples:
        >>> log = get_logger("towersim.control.tower")
        >>> log.info("Aircraft %s admitted", callsign)
    """
    if not _initialized:
        initialize_logging()

    if name in _loggers_cache:
        return _loggers_cache[name]

    logger = logging.getLogger(name)
    _loggers_cache[name] = logger
    return logger


def shutdown_logging() -> None:
    """Flush and close all handlers at the end of a run."""
    global _initialized

    logging.shutdown()
    _loggers_cache.clear()
    _initialized = False
