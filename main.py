"""
MVVM Counter - Main entry point.

Uses:
- Dependency Injection for the one-time ViewModel construction
- MVVM pattern for UI with independently observed state slices
"""

import argparse
import logging
import logging.config
import os
import signal
import sys

from PyQt6.QtCore import QTimer
from PyQt6.QtWidgets import QApplication

from mvvm_counter.application.bootstrap import initialize_app
from mvvm_counter.core.config import AppConfig
from mvvm_counter.presentation.windows import RootWindow

LOGGING_CONF = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), "mvvm_counter", "logging.conf"
)

# Create logger
log = logging.getLogger("CounterLogger")


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="MVVM Counter")
    parser.add_argument(
        "--config",
        type=str,
        default="config.ini",
        help="Path to the INI configuration file (default: config.ini)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override the log level from the configuration file",
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)

    # Set logging from config file
    logging.config.fileConfig(LOGGING_CONF, disable_existing_loggers=False)

    try:
        config = AppConfig(args.config)
        log.setLevel(args.log_level or config.log_level.upper())

        bootstrap = initialize_app(config)

        app = QApplication(sys.argv)
        app.setApplicationName("MVVM Counter")

        # Allow Ctrl+C to properly terminate the application
        def handle_sigint(signum, frame):
            print("\nCtrl+C pressed, shutting down...", flush=True)
            app.quit()

        signal.signal(signal.SIGINT, handle_sigint)
        signal.signal(signal.SIGTERM, handle_sigint)

        # Timer lets Python process signals while Qt event loop runs
        timer = QTimer()
        timer.timeout.connect(lambda: None)
        timer.start(100)

        window = RootWindow(
            bootstrap.counter_view_model,
            window_config=config.window_config,
            container=bootstrap.container,
        )
        window.show()

        exit_code = app.exec()
        bootstrap.shutdown()
        return exit_code

    except Exception as e:
        log.critical(f"Fatal error: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
