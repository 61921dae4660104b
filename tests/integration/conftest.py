"""
Integration test fixtures.

Integration tests:
- Build real widgets on the offscreen platform
- Wire them through the real bootstrap and container
"""

import pytest

from mvvm_counter.application.bootstrap import ApplicationBootstrap
from mvvm_counter.core.config import AppConfig
from mvvm_counter.presentation.windows import RootWindow


@pytest.fixture
def bootstrap(tmp_path):
    app = ApplicationBootstrap(AppConfig(str(tmp_path / "config.ini")))
    app.configure()
    yield app
    app.shutdown()


@pytest.fixture
def window(bootstrap):
    win = RootWindow(
        bootstrap.counter_view_model,
        window_config=bootstrap.config.window_config,
        container=bootstrap.container,
    )
    yield win
    win.close()
    win.deleteLater()


@pytest.fixture
def view(window):
    return window.counter_view
