"""
Application configuration management.

Provides centralized access to configuration values with:
- Typed configuration objects
- Default values for missing config
"""

from __future__ import annotations
import configparser
import os
from typing import Optional
from dataclasses import dataclass
import logging

from mvvm_counter.core.exceptions import ConfigurationError

log = logging.getLogger("CounterLogger")


@dataclass
class WindowConfig:
    """Root window configuration."""

    title: str
    width: int
    height: int


@dataclass
class CounterConfig:
    """Counter feature configuration."""

    initial_count: int


class AppConfig:
    """
    Centralized configuration management.

    Reads from config.ini and provides typed configuration objects.

    Example:
        config = AppConfig()
        window = config.window_config
        print(f"Opening '{window.title}' at {window.width}x{window.height}")
    """

    _instance: Optional[AppConfig] = None

    def __new__(cls, config_path: str = "config.ini") -> AppConfig:
        """Singleton pattern - only one config instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, config_path: str = "config.ini"):
        """
        Initialize configuration.

        Args:
            config_path: Path to config.ini file
        """
        if self._initialized:
            return

        # Values are literal text: "100% Counter" is a valid title
        self._config = configparser.ConfigParser(interpolation=None)

        if os.path.exists(config_path):
            self._config.read(config_path)
            log.info(f"Configuration loaded from {config_path}")
        else:
            log.warning(f"Config file not found at {config_path}, using defaults")

        self._initialized = True

    @classmethod
    def reset(cls) -> None:
        """Drop the singleton so the next AppConfig() reads a fresh file."""
        cls._instance = None

    @property
    def window_config(self) -> WindowConfig:
        """Get root window configuration."""
        return WindowConfig(
            title=self._get_value("WINDOW", "title", "Counter"),
            width=self._get_int("WINDOW", "width", 360),
            height=self._get_int("WINDOW", "height", 280),
        )

    @property
    def counter_config(self) -> CounterConfig:
        """Get counter feature configuration."""
        return CounterConfig(
            initial_count=self._get_int("COUNTER", "initial_count", 0),
        )

    @property
    def log_level(self) -> str:
        """Get log level."""
        return self._get_value("LOGGING", "level", "INFO")

    def _get_value(self, section: str, key: str, default: str = "") -> str:
        """
        Get a configuration value.

        Args:
            section: Config section name
            key: Key within section
            default: Default value if not found

        Returns:
            Configuration value or default
        """
        try:
            return self._config[section][key]
        except KeyError:
            return default

    def _get_int(self, section: str, key: str, default: int) -> int:
        raw = self._get_value(section, key, str(default))
        try:
            return int(raw)
        except ValueError:
            raise ConfigurationError(f"{section}.{key}", raw, "is not an integer")

