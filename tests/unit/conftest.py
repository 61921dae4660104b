"""
Unit test fixtures.

All unit tests should be:
- Fast
- Isolated (no windows shown, no files outside tmp_path)
- Deterministic
"""

import pytest

from mvvm_counter.presentation.state import (
    CountState,
    InputEditorState,
    SubmittedOutputState,
)
from mvvm_counter.presentation.viewmodels import CounterViewModel


@pytest.fixture
def count_state():
    return CountState()


@pytest.fixture
def input_editor():
    return InputEditorState()


@pytest.fixture
def input_output():
    return SubmittedOutputState()


@pytest.fixture
def view_model():
    vm = CounterViewModel()
    yield vm
    vm.dispose()
