"""
GT Theme - Demo Entry Point

Composition root: owns the single ThemeService and hands it to the widgets.

Usage:
    python -m gt_theme.main
"""

import sys
from PyQt6.QtWidgets import QApplication

from .config import Config
from .themes import get_theme_service, reset_theme_service, ThemeService
from .utils.logging_config import LoggingConfig


def setup_application(theme_service: ThemeService) -> QApplication:
    """
    Initialize and configure the Qt application

    Args:
        theme_service: Service whose effective brightness drives the stylesheet

    Returns:
        Configured QApplication instance
    """
    app = QApplication.instance() or QApplication(sys.argv)

    # Set application metadata
    app.setApplicationName(Config.APP_NAME)
    app.setApplicationVersion(Config.APP_VERSION)
    app.setOrganizationName(Config.APP_AUTHOR)

    # Follow the OS and restore the saved mode after the first paint
    theme_service.start_listening()
    app.setStyleSheet(theme_service.get_current_stylesheet())

    # Connect theme changes to stylesheet updates
    def on_theme_changed(_value):
        """Update stylesheet when mode or system brightness changes"""
        app.setStyleSheet(theme_service.get_current_stylesheet())

    theme_service.theme_mode_notifier.subscribe(on_theme_changed)
    theme_service.system_brightness_notifier.subscribe(on_theme_changed)

    # Close notifiers and drop the OS observer on exit
    app.aboutToQuit.connect(reset_theme_service)

    return app


def main():
    """
    Main entry point for the GT Theme demo

    Creates the application, sets up the demo window, and runs the event loop.
    """
    # Setup logging first
    LoggingConfig.setup_logging(Config.get_logs_directory())

    logger = LoggingConfig.get_logger(__name__)
    logger.info(f"Starting {Config.APP_NAME} {Config.APP_VERSION}...")

    theme_service = get_theme_service()
    app = setup_application(theme_service)
    logger.info(f"Theme: {theme_service!r}")

    # Create and show demo window
    from .widgets.example_window import ThemeExampleWindow
    window = ThemeExampleWindow(theme_service)
    window.show()

    logger.info("Application started successfully!")

    # Run event loop
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
