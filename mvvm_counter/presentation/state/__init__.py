"""
State slices for the counter feature.

Each slice is observed independently: a change to one never notifies
subscribers of another.
"""

from mvvm_counter.presentation.state.count_state import CountState
from mvvm_counter.presentation.state.input_editor_state import InputEditorState
from mvvm_counter.presentation.state.submitted_output_state import SubmittedOutputState

__all__ = [
    "CountState",
    "InputEditorState",
    "SubmittedOutputState",
]
