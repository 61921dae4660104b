"""
Live text input slice of the counter feature.
"""

from typing import Optional

from PyQt6.QtCore import QObject, pyqtSignal

from mvvm_counter.presentation.core.base_view_model import BaseViewModel, ObservableProperty


class InputEditorState(BaseViewModel):
    """Holds the uncommitted edit buffer, stored exactly as typed."""

    user_input_changed = pyqtSignal(str)

    user_input = ObservableProperty[str]("")

    def __init__(self, parent: Optional[QObject] = None):
        super().__init__(parent)
