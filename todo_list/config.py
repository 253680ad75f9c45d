"""Configuration management for the to-do list.

Configuration Precedence (highest to lowest):
    1. Constructor arguments
    2. Environment variables
    3. Default values

Environment Variables:
    TODO_LIST_SEED: Start with the two sample tasks (default: true)
    TODO_LIST_LOG_LEVEL: Logging level name (default: WARNING)
    TODO_LIST_TABLE_FORMAT: tabulate table format (default: simple)

Example:
    >>> config = AppConfig()
    >>> config = AppConfig(seed_demo_tasks=False, log_level="DEBUG")

"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import ClassVar

from dotenv import load_dotenv
from tabulate import tabulate_formats

from todo_list.exceptions import ConfigurationError

_env_file = Path.cwd() / ".env"
if _env_file.exists():
    load_dotenv(_env_file)
else:
    load_dotenv()

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Immutable settings for a to-do list session.

    Attributes:
        seed_demo_tasks: Whether the store starts with the sample tasks.
        log_level: Name of the level passed to the package logger.
        table_format: Format name understood by tabulate.

    """

    DEFAULT_LOG_LEVEL: ClassVar[str] = "WARNING"
    DEFAULT_TABLE_FORMAT: ClassVar[str] = "simple"
    LOG_LEVELS: ClassVar[tuple[str, ...]] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

    seed_demo_tasks: bool = field(
        default_factory=lambda: _parse_bool("TODO_LIST_SEED", _get_env("TODO_LIST_SEED", "true"))
    )
    log_level: str = field(
        default_factory=lambda: _get_env("TODO_LIST_LOG_LEVEL", AppConfig.DEFAULT_LOG_LEVEL)
    )
    table_format: str = field(
        default_factory=lambda: _get_env("TODO_LIST_TABLE_FORMAT", AppConfig.DEFAULT_TABLE_FORMAT)
    )

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Validate all configuration values.

        Raises:
            ConfigurationError: If any configuration value is invalid.

        """
        level = str(self.log_level).strip().upper()
        if level not in self.LOG_LEVELS:
            raise ConfigurationError(
                f"Invalid log_level: {self.log_level} (must be one of {', '.join(self.LOG_LEVELS)})"
            )
        # Use object.__setattr__ since dataclass is frozen
        object.__setattr__(self, "log_level", level)

        if self.table_format not in tabulate_formats:
            raise ConfigurationError(f"Unknown table_format: {self.table_format}")

    @property
    def log_level_value(self) -> int:
        """Numeric logging level."""
        return logging.getLevelName(self.log_level)

    def with_overrides(self, **kwargs: object) -> AppConfig:
        """Create a new configuration with specified overrides."""
        return replace(self, **kwargs)  # type: ignore[arg-type]


def _get_env(key: str, default: str) -> str:
    """Get environment variable with default."""
    value = os.environ.get(key)
    if value is None or value == "":
        return default
    return value


def _parse_bool(key: str, value: str) -> bool:
    """Interpret a boolean environment value.

    Raises:
        ConfigurationError: If the value is not a recognised boolean.

    """
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"{key} must be a boolean, got {value!r}")
