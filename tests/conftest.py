"""
Shared test fixtures.

Widgets need a QApplication; tests run on the offscreen platform so no
display is required.
"""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt6.QtWidgets import QApplication

from mvvm_counter.core.config import AppConfig


class SignalRecorder:
    """Callable slot that records every emission it receives."""

    def __init__(self):
        self.calls = []

    def __call__(self, *args):
        self.calls.append(args)

    @property
    def count(self):
        return len(self.calls)

    @property
    def values(self):
        return [args[0] if len(args) == 1 else args for args in self.calls]


@pytest.fixture(scope="session", autouse=True)
def qapp():
    """One QApplication for the whole test session."""
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture(autouse=True)
def fresh_config():
    """AppConfig is a singleton; give every test its own."""
    AppConfig.reset()
    yield
    AppConfig.reset()


@pytest.fixture
def recorder():
    """Factory for SignalRecorder slots."""
    return SignalRecorder
