"""
PlatformBrightnessSource - OS light/dark detection via Qt style hints

Reads QStyleHints.colorScheme() (Qt 6.5+) and relays colorSchemeChanged.
When Qt cannot tell, the application palette's window colour decides.
"""

from typing import Callable, Dict, Optional

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QGuiApplication, QPalette

from ..config import Config
from ..utils.logging_config import LoggingConfig
from .models import Brightness

logger = LoggingConfig.get_logger(__name__)

# Window colours darker than this are treated as a dark scheme
DARK_LIGHTNESS_THRESHOLD = 128


class PlatformBrightnessSource:
    """
    Host platform brightness query and change notification

    Usage:
        source = PlatformBrightnessSource()
        brightness = source.current_brightness()
        source.add_observer(on_changed)  # on_changed() takes no arguments
    """

    def __init__(self, app: Optional[QGuiApplication] = None):
        self._app = app
        self._observers: Dict[Callable[[], None], Callable] = {}

    def _get_app(self) -> Optional[QGuiApplication]:
        if self._app is not None:
            return self._app
        # A bare QCoreApplication has no style hints or palette
        app = QGuiApplication.instance()
        return app if isinstance(app, QGuiApplication) else None

    def current_brightness(self) -> Brightness:
        """Current OS brightness; never raises"""
        app = self._get_app()
        if app is None:
            logger.debug("No QGuiApplication, using default system brightness")
            return Brightness(Config.DEFAULT_SYSTEM_BRIGHTNESS)

        try:
            scheme = app.styleHints().colorScheme()
            if scheme == Qt.ColorScheme.Dark:
                return Brightness.DARK
            if scheme == Qt.ColorScheme.Light:
                return Brightness.LIGHT
        except AttributeError:
            # Qt < 6.5 has no colorScheme()
            logger.debug("Qt style hints do not expose a color scheme")

        return self._brightness_from_palette(app)

    def _brightness_from_palette(self, app: QGuiApplication) -> Brightness:
        window = app.palette().color(QPalette.ColorRole.Window)
        if window.lightness() < DARK_LIGHTNESS_THRESHOLD:
            return Brightness.DARK
        return Brightness.LIGHT

    def add_observer(self, callback: Callable[[], None]) -> bool:
        """
        Call callback() whenever the OS color scheme changes

        Returns:
            True if the callback was registered
        """
        if callback in self._observers:
            return True

        app = self._get_app()
        if app is None:
            logger.warning("Cannot observe system brightness without a QGuiApplication")
            return False

        def relay(*_args):
            callback()

        try:
            app.styleHints().colorSchemeChanged.connect(relay)
        except AttributeError:
            logger.warning("System brightness changes are not reported by this Qt version")
            return False

        self._observers[callback] = relay
        return True

    def remove_observer(self, callback: Callable[[], None]) -> None:
        """Stop calling callback; unknown callbacks are ignored"""
        relay = self._observers.pop(callback, None)
        if relay is None:
            return

        app = self._get_app()
        if app is None:
            return
        try:
            app.styleHints().colorSchemeChanged.disconnect(relay)
        except (AttributeError, TypeError) as e:
            logger.debug(f"Brightness observer already disconnected: {e}")


__all__ = ['PlatformBrightnessSource']
