"""Integration tests for the application bootstrap."""

from mvvm_counter.application.bootstrap import ApplicationBootstrap, initialize_app
from mvvm_counter.core.config import AppConfig, CounterConfig
from mvvm_counter.presentation.state import (
    CountState,
    InputEditorState,
    SubmittedOutputState,
)
from mvvm_counter.presentation.viewmodels import CounterViewModel


class TestApplicationBootstrap:
    """Test one-time construction of the feature ViewModel."""

    def test_view_model_constructed_once(self, bootstrap):
        first = bootstrap.counter_view_model
        second = bootstrap.container.resolve(CounterViewModel)
        assert first is second

    def test_slices_resolve_to_view_model_slices(self, bootstrap):
        vm = bootstrap.counter_view_model
        container = bootstrap.container

        assert container.resolve(CountState) is vm.count_state
        assert container.resolve(InputEditorState) is vm.input_editor
        assert container.resolve(SubmittedOutputState) is vm.input_output

    def test_config_registered(self, bootstrap):
        assert bootstrap.container.resolve(AppConfig) is bootstrap.config
        assert isinstance(bootstrap.container.resolve(CounterConfig), CounterConfig)

    def test_initial_count_from_config(self, tmp_path):
        path = tmp_path / "config.ini"
        path.write_text("[COUNTER]\ninitial_count = 4\n")
        app = ApplicationBootstrap(AppConfig(str(path)))
        app.configure()

        assert app.counter_view_model.count_state.count == 4
        app.shutdown()

    def test_configure_is_idempotent(self, bootstrap):
        vm = bootstrap.counter_view_model
        bootstrap.configure()
        assert bootstrap.counter_view_model is vm

    def test_initialize_app_returns_configured_bootstrap(self, tmp_path):
        app = initialize_app(AppConfig(str(tmp_path / "config.ini")))
        try:
            assert isinstance(app.counter_view_model, CounterViewModel)
        finally:
            app.shutdown()

    def test_initialize_app_builds_independent_bootstraps(self, tmp_path):
        config = AppConfig(str(tmp_path / "config.ini"))
        first = initialize_app(config)
        second = initialize_app(config)
        try:
            assert first.counter_view_model is not second.counter_view_model
        finally:
            first.shutdown()
            second.shutdown()


class TestShutdown:
    """Shutdown disposes the session ViewModel and its slices."""

    def test_shutdown_disposes_view_model(self, tmp_path):
        app = initialize_app(AppConfig(str(tmp_path / "config.ini")))
        vm = app.counter_view_model

        app.shutdown()

        assert vm.is_disposed
        for state in vm.slices().values():
            assert state.is_disposed

    def test_shutdown_silences_subscribers(self, tmp_path, recorder):
        app = initialize_app(AppConfig(str(tmp_path / "config.ini")))
        count_state = app.counter_view_model.count_state
        slot = recorder()
        count_state.count_changed.connect(slot)

        app.shutdown()
        count_state.increment()

        assert slot.count == 0

    def test_shutdown_leaves_provided_config(self, bootstrap):
        config = bootstrap.config
        bootstrap.shutdown()
        assert bootstrap.container.resolve(AppConfig) is config
