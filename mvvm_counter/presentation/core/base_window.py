"""
Base Window class owning an Environment for the views it hosts.
"""

import logging
from typing import Any, Optional

from PyQt6.QtWidgets import QMainWindow

from mvvm_counter.presentation.core.base_view import BaseView
from mvvm_counter.presentation.core.base_view_model import BaseViewModel
from mvvm_counter.presentation.core.environment import Environment

log = logging.getLogger("CounterLogger")


class BaseWindow(QMainWindow):
    """
    Base class for Windows in MVVM pattern.

    Features:
    - Environment ownership: views created under the window look their
      state slices up from it
    - Page lifecycle: the central page is destroyed on replace and on close

    The window only borrows its ViewModel. ViewModels live for the
    application session and are disposed by ApplicationBootstrap.shutdown(),
    not when a window closes.

    Example:
        class RootWindow(BaseWindow):
            def __init__(self, view_model: CounterViewModel):
                super().__init__()
                self.set_view_model(view_model)
                self.set_environment(Environment().provide(view_model.count_state))
                self.set_page(CounterView(parent=self))
    """

    def __init__(self, *args: Any, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self._current_page: Optional[BaseView] = None
        self._view_model: Optional[BaseViewModel] = None
        self._environment: Optional[Environment] = None

        log.debug(f"{self.__class__.__name__} initialized")

    @property
    def environment(self) -> Optional[Environment]:
        return self._environment

    def set_environment(self, environment: Environment) -> None:
        """Make the window the environment root for every view it hosts."""
        self._environment = environment

    @property
    def current_page(self) -> Optional[BaseView]:
        """Get the current page."""
        return self._current_page

    def set_page(self, page: BaseView) -> None:
        """Replace the central page, destroying the previous one."""
        if self._current_page is not None:
            self._current_page.onDestroy()
        self._current_page = page
        self.setCentralWidget(page)

    @property
    def view_model(self) -> Optional[BaseViewModel]:
        return self._view_model

    def set_view_model(self, view_model: BaseViewModel) -> None:
        self._view_model = view_model

    def closeEvent(self, event: Any) -> None:
        """Destroy the current page; the ViewModel stays alive."""
        log.info(f"{self.__class__.__name__} closing")

        if self._current_page is not None:
            self._current_page.onDestroy()

        event.accept()
