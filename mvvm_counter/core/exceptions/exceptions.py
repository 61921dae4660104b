"""
Custom exceptions for MVVM Counter.

State slices never raise; these cover the wiring around them:
- Configuration errors
- Dependency resolution errors
"""

from typing import Any


class CounterAppException(Exception):
    """Base exception for all application exceptions."""

    def __init__(self, message: str = "An error occurred"):
        self.message = message
        super().__init__(self.message)


class ConfigurationError(CounterAppException):
    """Raised when a configuration value cannot be read as its expected type."""

    def __init__(self, config_key: str, value: Any = None, message: str = "is invalid"):
        self.config_key = config_key
        self.value = value
        super().__init__(f"Configuration '{config_key}' {message}: {value!r}")


class ServiceNotRegisteredError(CounterAppException, LookupError):
    """Raised when a type is not registered in the DI container or environment."""

    def __init__(self, service_type: type):
        self.service_type = service_type
        type_name = getattr(service_type, "__name__", str(service_type))
        super().__init__(f"Service {type_name} is not registered")
