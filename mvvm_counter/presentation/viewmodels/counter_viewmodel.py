"""
Feature-level ViewModel for the counter screen.
"""

import logging
from typing import Dict, Optional

from PyQt6.QtCore import QObject

from mvvm_counter.core.config.app_config import CounterConfig
from mvvm_counter.presentation.core.base_view_model import BaseViewModel
from mvvm_counter.presentation.state import (
    CountState,
    InputEditorState,
    SubmittedOutputState,
)

log = logging.getLogger("CounterLogger")


class CounterViewModel(BaseViewModel):
    """
    Aggregates the three state slices of the counter feature.

    The slices are created here and owned for the whole application
    session. The ViewModel adds no behavior of its own: views observe the
    slices directly so that each re-renders only for its own slice.

    Example:
        vm = CounterViewModel()
        vm.count_state.increment()
        vm.input_editor.user_input = "hello"
        vm.input_output.submit(vm.input_editor.user_input)
    """

    def __init__(
        self,
        counter_config: Optional[CounterConfig] = None,
        parent: Optional[QObject] = None,
    ):
        super().__init__(parent)
        initial_count = counter_config.initial_count if counter_config else 0

        self.count_state = CountState(initial_count, parent=self)
        self.input_editor = InputEditorState(parent=self)
        self.input_output = SubmittedOutputState(parent=self)

        log.info("CounterViewModel initialized")

    def slices(self) -> Dict[type, BaseViewModel]:
        """The owned state slices keyed by their type."""
        return {
            CountState: self.count_state,
            InputEditorState: self.input_editor,
            SubmittedOutputState: self.input_output,
        }

    def dispose(self) -> None:
        for state in self.slices().values():
            state.dispose()
        super().dispose()
