"""
Count slice of the counter feature.
"""

import logging
from typing import Optional

from PyQt6.QtCore import QObject, pyqtSignal

from mvvm_counter.presentation.core.base_view_model import BaseViewModel, ObservableProperty

log = logging.getLogger("CounterLogger")


class CountState(BaseViewModel):
    """
    Owns the integer counter.

    No bounds are enforced: decrementing below zero is allowed.
    """

    count_changed = pyqtSignal(int)

    count = ObservableProperty[int](0)

    def __init__(self, initial_count: int = 0, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._prop_count = initial_count

    def increment(self) -> None:
        self.count += 1
        log.debug(f"Count incremented to {self.count}")

    def decrement(self) -> None:
        self.count -= 1
        log.debug(f"Count decremented to {self.count}")
