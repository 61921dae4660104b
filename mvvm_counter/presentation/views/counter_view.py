"""
Counter screen views.

CounterView composes two sections that each observe only their own
slice of state:
- CountSection re-renders on CountState changes
- InputSection writes keystrokes to InputEditorState and re-renders its
  SubmittedTextView only on SubmittedOutputState changes

Slices are looked up from the hosting window's Environment, so neither
CounterView nor its caller passes them down explicitly.
"""

import logging
from typing import Optional

from PyQt6.QtCore import Qt, pyqtSlot
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from mvvm_counter.presentation.core.base_view import BaseView
from mvvm_counter.presentation.state import (
    CountState,
    InputEditorState,
    SubmittedOutputState,
)

log = logging.getLogger("CounterLogger")


class CountSection(BaseView):
    """Count label with "-" and "+" buttons. Observes CountState only."""

    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.setObjectName("count_section")
        self._setup_ui()
        self.set_view_model(self.environment_object(CountState))

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)

        self.count_label = QLabel("")
        self.count_label.setObjectName("count_label")
        self.count_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.count_label)

        buttons = QHBoxLayout()
        buttons.setSpacing(40)
        buttons.addStretch()

        self.minus_button = QPushButton("-")
        self.minus_button.setObjectName("minus_button")
        buttons.addWidget(self.minus_button)

        self.plus_button = QPushButton("+")
        self.plus_button.setObjectName("plus_button")
        buttons.addWidget(self.plus_button)

        buttons.addStretch()
        layout.addLayout(buttons)

    def bind_view_model(self, vm: CountState) -> None:
        self._count_state = vm
        self.connect_signal(self.minus_button.clicked, self._on_minus_clicked)
        self.connect_signal(self.plus_button.clicked, self._on_plus_clicked)
        self.connect_signal(vm.count_changed, self._on_count_changed)
        self._on_count_changed(vm.count)

    def _on_minus_clicked(self) -> None:
        self._count_state.decrement()

    def _on_plus_clicked(self) -> None:
        self._count_state.increment()

    @pyqtSlot(int)
    def _on_count_changed(self, count: int) -> None:
        self.count_label.setText(f"Count: {count}")
        self.render_view()


class SubmittedTextView(BaseView):
    """Stateless label showing the committed text."""

    def __init__(self, submitted_text: str = "", parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.setObjectName("submitted_text_view")

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        self.submitted_label = QLabel("")
        self.submitted_label.setObjectName("submitted_label")
        self.submitted_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.submitted_label)

        self.set_submitted_text(submitted_text)

    @property
    def submitted_text(self) -> str:
        return self._submitted_text

    def set_submitted_text(self, submitted_text: str) -> None:
        self._submitted_text = submitted_text
        self.submitted_label.setText(f"You typed: {submitted_text}")
        self.render_view()


class InputSection(BaseView):
    """
    Text field and Submit button.

    The field is bound two-way to InputEditorState.user_input. Submit
    commits the current edit buffer to SubmittedOutputState; only that
    commit updates the SubmittedTextView.
    """

    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.setObjectName("input_section")

        self._input_editor = self.environment_object(InputEditorState)
        self._input_output = self.environment_object(SubmittedOutputState)

        self._setup_ui()
        self._bind()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setSpacing(16)

        self.input_field = QLineEdit()
        self.input_field.setObjectName("input_field")
        self.input_field.setPlaceholderText("Enter something")
        self.input_field.setText(self._input_editor.user_input)
        layout.addWidget(self.input_field)

        self.submit_button = QPushButton("Submit")
        self.submit_button.setObjectName("submit_button")
        layout.addWidget(self.submit_button)

        self.submitted_view = SubmittedTextView(
            self._input_output.submitted_text, parent=self
        )
        layout.addWidget(self.submitted_view)

    def _bind(self) -> None:
        self.connect_signal(self.input_field.textChanged, self._on_text_changed)
        self.connect_signal(
            self._input_editor.user_input_changed, self._on_user_input_changed
        )
        self.connect_signal(self.submit_button.clicked, self._on_submit_clicked)
        self.connect_signal(
            self._input_output.submitted_text_changed, self._on_submitted_text_changed
        )

    @pyqtSlot(str)
    def _on_text_changed(self, text: str) -> None:
        self._input_editor.user_input = text

    @pyqtSlot(str)
    def _on_user_input_changed(self, text: str) -> None:
        # Keeps the field in sync when user_input is set programmatically
        if self.input_field.text() != text:
            self.input_field.setText(text)

    def _on_submit_clicked(self) -> None:
        self._input_output.submit(self._input_editor.user_input)

    @pyqtSlot(str)
    def _on_submitted_text_changed(self, text: str) -> None:
        self.submitted_view.set_submitted_text(text)
        self.render_view()


class CounterView(BaseView):
    """Feature view stacking CountSection above InputSection."""

    qss_file = "counter_view.qss"

    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.setObjectName("counter_view")

        layout = QVBoxLayout(self)
        layout.setSpacing(20)
        layout.setContentsMargins(16, 16, 16, 16)

        self.count_section = CountSection(parent=self)
        layout.addWidget(self.count_section)

        self.input_section = InputSection(parent=self)
        layout.addWidget(self.input_section)

        layout.addStretch()

        log.info("CounterView initialized")

    def onDestroy(self) -> None:
        self.count_section.onDestroy()
        self.input_section.onDestroy()
        super().onDestroy()
