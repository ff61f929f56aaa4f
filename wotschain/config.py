"""Configuration management for wotschain.

Hash functions, domain tags and WOTS parameters are protocol constants, not
settings.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

ENV_ENFORCE_ONE_TIME = "WOTSCHAIN_ENFORCE_ONE_TIME"
ENV_LOG_LEVEL = "WOTSCHAIN_LOG_LEVEL"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


@dataclass
class KeyConfig:
    """Keypair behaviour settings."""

    enforce_one_time: bool = True


@dataclass
class LoggingConfig:
    """Logging settings for the ``wotschain`` logger."""

    level: str = "WARNING"


def _parse_bool(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"not a boolean value: {value!r}")


class Config:
    """
    Main configuration manager for wotschain.

    Custom values set through :meth:`set_custom_config` take precedence over
    the section dataclasses.
    """

    def __init__(
        self,
        keys: Optional[KeyConfig] = None,
        logging_config: Optional[LoggingConfig] = None,
    ) -> None:
        """
        Initialize configuration manager.

        Args:
            keys: Keypair settings. Defaults to :class:`KeyConfig`.
            logging_config: Logging settings. Defaults to :class:`LoggingConfig`.
        """
        self.keys = keys or KeyConfig()
        self.logging = logging_config or LoggingConfig()
        self._custom_config: Dict[str, Any] = {}

    @classmethod
    def from_environment(cls) -> Config:
        """
        Build a configuration from ``WOTSCHAIN_*`` environment variables.

        Raises:
            ValueError: If ``WOTSCHAIN_ENFORCE_ONE_TIME`` is not a boolean.
        """
        config = cls()
        enforce = os.getenv(ENV_ENFORCE_ONE_TIME)
        if enforce is not None:
            config.keys.enforce_one_time = _parse_bool(enforce)
        level = os.getenv(ENV_LOG_LEVEL)
        if level is not None:
            config.logging.level = level.strip().upper()
        return config

    @property
    def enforce_one_time(self) -> bool:
        return bool(self.get("enforce_one_time", True))

    def set_custom_config(self, key: str, value: Any) -> None:
        """
        Set custom configuration value.

        Args:
            key: Configuration key.
            value: Configuration value.
        """
        self._custom_config[key] = value

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value.

        Checks custom config first, then the section dataclasses.

        Args:
            key: Configuration key.
            default: Default value if key not found.

        Returns:
            Configuration value or default.
        """
        if key in self._custom_config:
            return self._custom_config[key]

        for section in (self.keys, self.logging):
            if hasattr(section, key):
                return getattr(section, key)

        return default

    def get_from_environment(self, key: str, env_var: str, default: Any = None) -> Any:
        """
        Get configuration value from environment variable or config.

        Args:
            key: Configuration key.
            env_var: Environment variable name.
            default: Default value.

        Returns:
            Configuration value from environment or config.
        """
        env_value = os.getenv(env_var)
        if env_value is not None:
            return env_value
        return self.get(key, default)

    def validate(self) -> List[str]:
        """
        Validate current configuration.

        Returns:
            List of validation errors. Empty if valid.
        """
        errors = []

        if not isinstance(self.get("enforce_one_time"), bool):
            errors.append("enforce_one_time must be a boolean")

        level = self.get("level")
        if not isinstance(level, str) or level.upper() not in _LOG_LEVELS:
            errors.append(f"level must be one of {', '.join(_LOG_LEVELS)}")

        return errors

    def configure_logging(self) -> None:
        """Apply the configured level to the ``wotschain`` logger."""
        level = str(self.get("level", "WARNING")).upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"unknown log level: {level!r}")
        logging.getLogger("wotschain").setLevel(level)

