"""
Base ViewModel class with observable properties.

Provides reactive property binding using Qt signals.
"""

import logging
from typing import Generic, List, Optional, TypeVar

from PyQt6.QtCore import QObject, pyqtSignal

log = logging.getLogger("CounterLogger")

T = TypeVar("T")


class ObservableProperty(Generic[T]):
    """
    Descriptor for observable properties in ViewModels.

    On a changed value, emits the owner's property_changed(name, value)
    signal and, if the owner declares one, its "<name>_changed" signal.
    Both emissions happen synchronously inside the assignment.

    Example:
        class NameState(BaseViewModel):
            name_changed = pyqtSignal(str)
            name = ObservableProperty[str]("")

        state = NameState()
        state.name = "Test"  # Emits property_changed("name", "Test")
                             # and name_changed("Test")
    """

    def __init__(self, default: T = None):
        self.default = default
        self.name: Optional[str] = None

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, obj: Optional[object], objtype: type = None) -> T:
        if obj is None:
            return self  # type: ignore
        return getattr(obj, f"_prop_{self.name}", self.default)

    def __set__(self, obj: object, value: T) -> None:
        old_value = getattr(obj, f"_prop_{self.name}", self.default)
        if old_value == value:
            return
        setattr(obj, f"_prop_{self.name}", value)

        if hasattr(obj, "property_changed"):
            obj.property_changed.emit(self.name, value)
        changed = getattr(obj, f"{self.name}_changed", None)
        if changed is not None:
            changed.emit(value)


class BaseViewModel(QObject):
    """
    Base class for ViewModels in MVVM pattern.

    Features:
    - Observable properties via property_changed signal
    - dispose() disconnects every subscriber of those signals

    Example:
        class CountState(BaseViewModel):
            count_changed = pyqtSignal(int)
            count = ObservableProperty[int](0)

            def increment(self):
                self.count += 1

        # In View:
        state.count_changed.connect(self._render_count)
    """

    # Emitted when any property changes: (property_name, new_value)
    property_changed = pyqtSignal(str, object)

    def __init__(self, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._disposed = False

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    def observable_names(self) -> List[str]:
        """Names of the ObservableProperty fields declared on this class."""
        names = []
        for klass in type(self).__mro__:
            for name, attr in vars(klass).items():
                if isinstance(attr, ObservableProperty) and name not in names:
                    names.append(name)
        return names

    def dispose(self) -> None:
        """Disconnect all subscribers from the change signals."""
        if self._disposed:
            return

        signals = [self.property_changed]
        for name in self.observable_names():
            changed = getattr(self, f"{name}_changed", None)
            if changed is not None:
                signals.append(changed)

        for signal in signals:
            try:
                signal.disconnect()
            except TypeError:
                # Raised when the signal has no connections
                pass

        self._disposed = True
        log.debug(f"{self.__class__.__name__} disposed")
