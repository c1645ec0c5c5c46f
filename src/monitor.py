"""
Application entry point and lifecycle management for CO2Dash.
"""

import logging
import signal
import sys

from PyQt6.QtWidgets import QApplication, QMessageBox

from co2dash import constants
from co2dash.core.theme import detect_system_theme
from co2dash.utils.config import ConfigManager, ConfigError
from co2dash.views.dashboard import DashboardWindow


def main() -> int:
    """
    Main entry point for the CO2Dash application.

    Orchestrates the application's startup sequence:
    1. Loads configuration (read-only).
    2. Sets up logging at the configured level.
    3. Seeds the theme from the host preference.
    4. Creates the dashboard window and runs the event loop.

    Returns:
        An integer exit code.
    """
    # The QApplication must be created before any UI elements.
    app = QApplication(sys.argv)
    app.setApplicationName(constants.app.APP_NAME)
    app.setApplicationVersion(constants.app.VERSION)

    try:
        config = ConfigManager().load()
    except ConfigError as e:
        logging.basicConfig(level=logging.ERROR)
        logging.getLogger(constants.logs.LOGGER_NAME).critical("Cannot read configuration: %s", e)
        QMessageBox.critical(None, "Application Error", f"The configuration could not be read:\n\n{e}")
        return 1

    ConfigManager.setup_logging(config["log_level"])
    logger = logging.getLogger("CO2Dash.Main")
    logger.info("Starting %s %s", constants.app.APP_NAME, constants.app.VERSION)

    try:
        theme = detect_system_theme()
        logger.info("Initial theme from host preference: %s", theme.value)

        window = DashboardWindow(config=config, theme=theme)

        # Let Ctrl+C and SIGTERM end the event loop cleanly.
        signal.signal(signal.SIGINT, lambda s, f: QApplication.instance().quit())
        signal.signal(signal.SIGTERM, lambda s, f: QApplication.instance().quit())
        app.aboutToQuit.connect(window.close)

        window.show()
        return app.exec()

    except Exception as e:
        # This is a global catch-all for any critical error during startup.
        logger.critical("A critical error occurred during startup: %s", e, exc_info=True)
        QMessageBox.critical(None, "Application Error", f"A critical error occurred and {constants.app.APP_NAME} must close:\n\n{e}")
        return 1

if __name__ == "__main__":
    sys.exit(main())
