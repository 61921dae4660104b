"""
Application layer - bootstrap and dependency wiring.
"""

from mvvm_counter.application.bootstrap import (
    ApplicationBootstrap,
    initialize_app,
)

__all__ = [
    "ApplicationBootstrap",
    "initialize_app",
]
