"""
Application bootstrap and dependency injection configuration.

Wires the counter feature's ViewModel and its state slices into the
container once per application session.
"""

import logging
from typing import Optional

from mvvm_counter.core.di.container import DIContainer
from mvvm_counter.core.config.app_config import AppConfig, CounterConfig
from mvvm_counter.presentation.state import (
    CountState,
    InputEditorState,
    SubmittedOutputState,
)
from mvvm_counter.presentation.viewmodels.counter_viewmodel import CounterViewModel

log = logging.getLogger("CounterLogger")


class ApplicationBootstrap:
    """
    Application bootstrapper.

    Configures the dependency injection container.

    Example:
        bootstrap = ApplicationBootstrap()
        bootstrap.configure()

        vm = bootstrap.counter_view_model

        # Cleanup on exit
        bootstrap.shutdown()
    """

    def __init__(self, config: Optional[AppConfig] = None):
        """
        Initialize bootstrap.

        Args:
            config: Optional application configuration
        """
        self.config = config or AppConfig()
        self.container = DIContainer()
        self._configured = False

    def configure(self) -> None:
        """Configure all dependencies in the container."""
        if self._configured:
            return

        log.info("Configuring application dependencies")

        self.container.register_singleton(AppConfig, instance=self.config)
        self.container.register_singleton(
            CounterConfig,
            factory=lambda c: c.resolve(AppConfig).counter_config,
        )

        self._register_view_models()

        self._configured = True
        log.info("Application dependencies configured")

    def _register_view_models(self) -> None:
        """Register the feature ViewModel and expose its slices by type."""
        self.container.register_singleton(
            CounterViewModel,
            factory=lambda c: CounterViewModel(c.resolve(CounterConfig)),
        )

        self.container.register_singleton(
            CountState,
            factory=lambda c: c.resolve(CounterViewModel).count_state,
        )
        self.container.register_singleton(
            InputEditorState,
            factory=lambda c: c.resolve(CounterViewModel).input_editor,
        )
        self.container.register_singleton(
            SubmittedOutputState,
            factory=lambda c: c.resolve(CounterViewModel).input_output,
        )

    def shutdown(self) -> None:
        """Dispose the session ViewModel and its state slices."""
        log.info("Shutting down application")

        self.container.dispose_all()
        self._configured = False
        log.info("Application shutdown complete")

    # ----------------------------------------------------------------
    # Convenience accessors
    # ----------------------------------------------------------------

    @property
    def counter_view_model(self) -> CounterViewModel:
        """Get the counter feature ViewModel."""
        return self.container.resolve(CounterViewModel)


def initialize_app(config: Optional[AppConfig] = None) -> ApplicationBootstrap:
    """
    Create and configure the application bootstrap.

    Args:
        config: Optional application configuration

    Returns:
        Configured ApplicationBootstrap
    """
    bootstrap = ApplicationBootstrap(config)
    bootstrap.configure()
    return bootstrap
