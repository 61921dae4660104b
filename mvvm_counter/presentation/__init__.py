"""
Presentation layer - UI components using MVVM pattern.

Contains:
- core/: Base classes (BaseViewModel, BaseView, BaseWindow, Environment)
- state/: Independently observable state slices
- viewmodels/: Feature ViewModels
- views/: Widgets observing the state slices
- windows/: Root window (composition root)

Note: viewmodels, views and windows are NOT imported here to avoid
circular imports. Import them directly from their submodules when needed.
"""

from mvvm_counter.presentation.core import (
    BaseViewModel,
    ObservableProperty,
    Environment,
    BaseView,
    BaseWindow,
)
from mvvm_counter.presentation.state import (
    CountState,
    InputEditorState,
    SubmittedOutputState,
)

__all__ = [
    # MVVM base classes
    "BaseViewModel",
    "ObservableProperty",
    "Environment",
    "BaseView",
    "BaseWindow",
    # State slices
    "CountState",
    "InputEditorState",
    "SubmittedOutputState",
]
