"""
Configuration module.
"""

from mvvm_counter.core.config.app_config import (
    AppConfig,
    CounterConfig,
    WindowConfig,
)

__all__ = ["AppConfig", "CounterConfig", "WindowConfig"]
