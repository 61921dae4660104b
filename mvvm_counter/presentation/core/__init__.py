"""
MVVM (Model-View-ViewModel) base classes for the presentation layer.

Contains:
- BaseViewModel: Base class with observable properties
- BaseView: Base class with .qss loading and environment lookup
- BaseWindow: Base class for windows owning an Environment
- Environment: Registry of state slices keyed by type
"""

from mvvm_counter.presentation.core.base_view_model import BaseViewModel, ObservableProperty
from mvvm_counter.presentation.core.environment import Environment
from mvvm_counter.presentation.core.base_view import BaseView, find_environment
from mvvm_counter.presentation.core.base_window import BaseWindow

__all__ = [
    "BaseViewModel",
    "ObservableProperty",
    "Environment",
    "BaseView",
    "find_environment",
    "BaseWindow",
]
