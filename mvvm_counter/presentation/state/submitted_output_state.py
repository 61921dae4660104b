"""
Committed text slice of the counter feature.
"""

import logging
from typing import Optional

from PyQt6.QtCore import QObject, pyqtSignal

from mvvm_counter.presentation.core.base_view_model import BaseViewModel, ObservableProperty

log = logging.getLogger("CounterLogger")


class SubmittedOutputState(BaseViewModel):
    """
    Holds the last submitted text.

    Only submit() changes it; typing into the editor never does.
    Empty until the first submit.
    """

    submitted_text_changed = pyqtSignal(str)

    submitted_text = ObservableProperty[str]("")

    def __init__(self, parent: Optional[QObject] = None):
        super().__init__(parent)

    def submit(self, text: str) -> None:
        """Commit text as the displayed value, replacing any previous one."""
        self.submitted_text = text
        log.debug(f"Submitted text: {text!r}")
