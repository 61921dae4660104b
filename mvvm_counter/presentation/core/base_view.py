"""
Base View class with stylesheet loading and environment lookup.

Provides .qss stylesheet loading from the view module directory, ViewModel
binding, and ambient lookup of state slices from an ancestor Environment.
"""

import inspect
import logging
import os
from typing import Any, Callable, List, Optional, Tuple, Type, TypeVar

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import QWidget

from mvvm_counter.core.exceptions import ServiceNotRegisteredError
from mvvm_counter.presentation.core.base_view_model import BaseViewModel
from mvvm_counter.presentation.core.environment import Environment

log = logging.getLogger("CounterLogger")

T = TypeVar("T")


def find_environment(widget: Optional[QWidget]) -> Optional[Environment]:
    """Return the Environment of the nearest widget (self included) that owns one."""
    while widget is not None:
        environment = getattr(widget, "_environment", None)
        if environment is not None:
            return environment
        widget = widget.parentWidget()
    return None


class BaseView(QWidget):
    """
    Base class for Views in MVVM pattern.

    Features:
    - Automatic .qss stylesheet loading
    - ViewModel binding support with tracked signal connections
    - Ambient state lookup through environment_object()
    - Lifecycle management (onDestroy)

    Usage:
        1. Set qss_file to a stylesheet name next to the view module on
           the outermost view; nested views inherit it from their parent
        2. Inherit from BaseView and implement bind_view_model()
        3. Call self.render_view() (or emit on_update) whenever the view redraws

    Example:
        class CountSection(BaseView):
            def __init__(self, parent=None):
                super().__init__(parent)
                self.set_view_model(self.environment_object(CountState))

            def bind_view_model(self, vm: CountState):
                self.connect_signal(vm.count_changed, self._on_count_changed)
    """

    # Emitted every time the view re-renders from its state
    on_update = pyqtSignal()

    # Stylesheet file name, resolved next to the subclass module
    qss_file: Optional[str] = None

    def __init__(self, *args: Any, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self._view_model: Optional[BaseViewModel] = None
        self._environment: Optional[Environment] = None
        self._connections: List[Tuple[Any, Callable[..., Any]]] = []
        self.render_count = 0

        self._load_styles()

        log.debug(f"{self.__class__.__name__} initialized")

    def _get_file_path(self, file_name: str) -> Optional[str]:
        """
        Get the path to a companion file next to the subclass module.

        Returns:
            Full path to file or None if not found
        """
        module = inspect.getmodule(self.__class__)
        if module is None or module.__file__ is None:
            return None

        file_path = os.path.join(os.path.dirname(module.__file__), file_name)
        if os.path.exists(file_path):
            return file_path

        return None

    def _load_styles(self) -> None:
        """Load qss_file if the subclass names one."""
        if not self.qss_file:
            return
        qss_path = self._get_file_path(self.qss_file)
        if qss_path:
            try:
                with open(qss_path, "r") as f:
                    self.setStyleSheet(f.read())
                log.debug(f"Loaded styles: {qss_path}")
            except OSError as e:
                log.error(f"Error loading styles {qss_path}: {e}")

    # ----------------------------------------------------------------
    # Environment
    # ----------------------------------------------------------------

    def set_environment(self, environment: Environment) -> None:
        """Make this view the environment root for its descendants."""
        self._environment = environment

    def environment_object(self, slice_type: Type[T]) -> T:
        """
        Resolve a state slice from the nearest ancestor environment.

        Raises:
            ServiceNotRegisteredError: If no ancestor provides slice_type
        """
        environment = find_environment(self)
        if environment is None:
            raise ServiceNotRegisteredError(slice_type)
        return environment.get(slice_type)

    # ----------------------------------------------------------------
    # ViewModel binding
    # ----------------------------------------------------------------

    @property
    def view_model(self) -> Optional[BaseViewModel]:
        """Get the bound ViewModel."""
        return self._view_model

    def set_view_model(self, view_model: BaseViewModel) -> None:
        """
        Set and bind the ViewModel.

        Args:
            view_model: The ViewModel to bind
        """
        if self._view_model is not None:
            self._unbind_view_model()

        self._view_model = view_model
        self.bind_view_model(view_model)

    def bind_view_model(self, vm: BaseViewModel) -> None:
        """
        Override this to bind ViewModel properties to View elements.

        Args:
            vm: The ViewModel to bind
        """
        pass  # Override in subclass

    def connect_signal(self, signal: Any, slot: Callable[..., Any]) -> None:
        """Connect signal to slot and remember it for onDestroy()."""
        signal.connect(slot)
        self._connections.append((signal, slot))

    def _unbind_view_model(self) -> None:
        """Disconnect everything connected through connect_signal()."""
        for signal, slot in self._connections:
            try:
                signal.disconnect(slot)
            except (TypeError, RuntimeError):
                pass
        self._connections.clear()
        self._view_model = None

    def render_view(self) -> None:
        """Count a re-render and notify on_update listeners."""
        self.render_count += 1
        self.on_update.emit()

    def onDestroy(self) -> None:
        """
        Called when view is being destroyed.

        Override to add custom cleanup logic.
        """
        log.debug(f"{self.__class__.__name__} destroying")
        self._unbind_view_model()
