"""
MVVM Counter - a counter and text-commit demo built on PyQt6.

Layers:
- core/: Cross-cutting concerns (config, DI container, exceptions)
- application/: Bootstrap and dependency wiring
- presentation/: MVVM base classes, state slices, view models and views
"""

__version__ = "1.0.0"
