"""
Custom exceptions module.
"""

from mvvm_counter.core.exceptions.exceptions import (
    CounterAppException,
    ConfigurationError,
    ServiceNotRegisteredError,
)

__all__ = [
    "CounterAppException",
    "ConfigurationError",
    "ServiceNotRegisteredError",
]
