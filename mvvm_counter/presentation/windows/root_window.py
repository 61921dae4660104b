"""
Root window - composition root for the counter screen.
"""

import logging
from typing import Optional

from mvvm_counter.core.config.app_config import WindowConfig
from mvvm_counter.core.di.container import DIContainer
from mvvm_counter.presentation.core.base_window import BaseWindow
from mvvm_counter.presentation.core.environment import Environment
from mvvm_counter.presentation.viewmodels.counter_viewmodel import CounterViewModel
from mvvm_counter.presentation.views.counter_view import CounterView

log = logging.getLogger("CounterLogger")


class RootWindow(BaseWindow):
    """
    Hosts CounterView and injects the counter state slices.

    The CounterViewModel is handed in once and kept for the window's
    lifetime. Each of its slices is provided to the window Environment,
    where the sections below look them up by type.

    Example:
        bootstrap = initialize_app()
        window = RootWindow(
            bootstrap.counter_view_model,
            container=bootstrap.container,
        )
        window.show()
    """

    def __init__(
        self,
        view_model: CounterViewModel,
        window_config: Optional[WindowConfig] = None,
        container: Optional[DIContainer] = None,
    ):
        super().__init__()
        self.setObjectName("root_window")

        if window_config is not None:
            self.setWindowTitle(window_config.title)
            self.resize(window_config.width, window_config.height)

        self.set_view_model(view_model)

        environment = Environment(container)
        for slice_type, state in view_model.slices().items():
            environment.provide(state, as_type=slice_type)
        self.set_environment(environment)

        self.set_page(CounterView(parent=self))

        log.info("RootWindow initialized")

    @property
    def counter_view(self) -> CounterView:
        return self.current_page
