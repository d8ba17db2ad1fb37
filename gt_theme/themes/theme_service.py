"""
ThemeService - Theme mode and system brightness state

Pattern: Singleton QObject with two observable values.
Mode changes are published synchronously and persisted in the background;
style bundles are built once and only selected among afterwards.
"""

from functools import partial
from typing import Dict, Optional, Tuple, Union

from PyQt6.QtCore import QObject, QTimer

from ..config import Config
from ..core.exceptions import ThemeStorageError
from ..utils.logging_config import LoggingConfig
from .cupertino_theme import CupertinoTheme, build_cupertino_theme
from .material_theme import MaterialTheme, build_material_theme
from .models import Brightness, DesignSystem, ThemeMode
from .observable import ObservableValue
from .storage import ThemeModeStore
from .style_bundle import StyleBundle
from .system_brightness import PlatformBrightnessSource

logger = LoggingConfig.get_logger(__name__)


class ThemeService(QObject):
    """
    Tracks the user's theme mode and the OS brightness

    Usage:
        theme_service = get_theme_service()
        theme_service.start_listening()
        theme_service.theme_mode_notifier.subscribe(on_mode_changed)
        theme_service.set_theme_mode(ThemeMode.DARK)
        bundle = theme_service.get_style_bundle(
            DesignSystem.MATERIAL, theme_service.effective_brightness
        )
    """

    def __init__(
        self,
        store: Optional[ThemeModeStore] = None,
        platform: Optional[PlatformBrightnessSource] = None,
        parent: Optional[QObject] = None
    ):
        super().__init__(parent)
        self._store = store if store is not None else ThemeModeStore()
        self._platform = platform if platform is not None else PlatformBrightnessSource()

        self._current_theme_mode = ThemeMode(Config.DEFAULT_THEME_MODE)
        self._current_system_brightness = Brightness(Config.DEFAULT_SYSTEM_BRIGHTNESS)
        self._is_disposed = False
        self._is_listening = False

        self._theme_mode_notifier = ObservableValue(self._current_theme_mode, self)
        self._system_brightness_notifier = ObservableValue(self._current_system_brightness, self)

        self._style_bundles = self._build_style_bundles()

    def _build_style_bundles(self) -> Dict[Tuple[DesignSystem, Brightness], StyleBundle]:
        bundles = {}
        for brightness in Brightness:
            bundles[(DesignSystem.MATERIAL, brightness)] = build_material_theme(brightness)
            bundles[(DesignSystem.CUPERTINO, brightness)] = build_cupertino_theme(brightness)
        return bundles

    # ==================== STATE ====================

    @property
    def theme_mode_notifier(self) -> ObservableValue:
        return self._theme_mode_notifier

    @property
    def system_brightness_notifier(self) -> ObservableValue:
        return self._system_brightness_notifier

    @property
    def current_theme_mode(self) -> ThemeMode:
        return self._current_theme_mode

    @property
    def current_system_brightness(self) -> Brightness:
        return self._current_system_brightness

    @property
    def is_disposed(self) -> bool:
        return self._is_disposed

    @property
    def is_listening(self) -> bool:
        return self._is_listening

    @property
    def effective_brightness(self) -> Brightness:
        """System brightness in SYSTEM mode, otherwise the explicit choice"""
        if self._current_theme_mode is ThemeMode.SYSTEM:
            return self._current_system_brightness
        if self._current_theme_mode is ThemeMode.DARK:
            return Brightness.DARK
        return Brightness.LIGHT

    # ==================== LIFECYCLE ====================

    def start_listening(self) -> None:
        """
        Start following the OS brightness and restore the saved mode

        Call once after the QApplication exists. The saved mode is read on
        the next event loop pass so it does not delay the first paint.
        """
        if self._is_disposed or self._is_listening:
            return
        self._is_listening = True

        self._update_system_brightness(self._platform.current_brightness())
        self._platform.add_observer(self.on_platform_brightness_changed)

        QTimer.singleShot(Config.THEME_LOAD_DELAY_MS, self._load_theme_mode)

    def dispose(self) -> None:
        """Stop observing the OS and close both notifiers"""
        if self._is_disposed:
            return
        self._is_disposed = True

        if self._is_listening:
            self._platform.remove_observer(self.on_platform_brightness_changed)
            self._is_listening = False

        self._theme_mode_notifier.close()
        self._system_brightness_notifier.close()
        logger.debug("ThemeService disposed")

    # ==================== THEME MODE ====================

    def set_theme_mode(self, theme_mode: Union[ThemeMode, str]) -> None:
        """Set light, dark or system mode; unchanged values are ignored"""
        if self._is_disposed:
            return
        theme_mode = ThemeMode(theme_mode)
        if theme_mode is self._current_theme_mode:
            return

        self._current_theme_mode = theme_mode
        self._theme_mode_notifier.set_value(theme_mode)

        # Persist in the background; last write wins
        QTimer.singleShot(0, partial(self._save_theme_mode, theme_mode))

    def _load_theme_mode(self) -> None:
        if self._is_disposed:
            return
        try:
            saved_mode = self._store.load()
        except ThemeStorageError as e:
            logger.warning(f"Error loading theme mode: {e}")
            return

        if saved_mode is None:
            return

        if saved_mode is not self._current_theme_mode:
            self._current_theme_mode = saved_mode
            self._theme_mode_notifier.set_value(saved_mode)
            logger.info(f"Restored theme mode: {saved_mode.label}")

    def _save_theme_mode(self, theme_mode: ThemeMode) -> None:
        try:
            self._store.save(theme_mode)
        except ThemeStorageError as e:
            logger.warning(f"Error saving theme mode: {e}")

    # ==================== SYSTEM BRIGHTNESS ====================

    def on_platform_brightness_changed(self) -> None:
        """Called by the platform source when the OS color scheme changes"""
        if self._is_disposed:
            return
        self._update_system_brightness(self._platform.current_brightness())

    def _update_system_brightness(self, brightness: Brightness) -> None:
        if brightness is not self._current_system_brightness:
            self._current_system_brightness = brightness
            self._system_brightness_notifier.set_value(brightness)

    # ==================== STYLE BUNDLES ====================

    def get_style_bundle(
        self,
        design_system: Union[DesignSystem, str],
        brightness: Union[Brightness, str]
    ) -> StyleBundle:
        """Get the prebuilt bundle for a design system and brightness"""
        return self._style_bundles[(DesignSystem(design_system), Brightness(brightness))]

    def get_material_theme(self, brightness: Union[Brightness, str]) -> MaterialTheme:
        return self.get_style_bundle(DesignSystem.MATERIAL, brightness)

    def get_cupertino_theme(self, brightness: Union[Brightness, str]) -> CupertinoTheme:
        return self.get_style_bundle(DesignSystem.CUPERTINO, brightness)

    def get_current_stylesheet(self, design_system: Union[DesignSystem, str, None] = None) -> str:
        """Stylesheet of the bundle matching the effective brightness"""
        if design_system is None:
            design_system = Config.DEFAULT_DESIGN_SYSTEM
        return self.get_style_bundle(design_system, self.effective_brightness).get_stylesheet()

    def __repr__(self):
        return (
            f"ThemeService(mode: {self._current_theme_mode.value}, "
            f"system: {self._current_system_brightness.value}, "
            f"effective: {self.effective_brightness.value})"
        )


# Singleton instance
_theme_service_instance: Optional[ThemeService] = None


def get_theme_service() -> ThemeService:
    """Get global ThemeService singleton instance"""
    global _theme_service_instance

    if _theme_service_instance is None:
        _theme_service_instance = ThemeService()

    return _theme_service_instance


def reset_theme_service() -> None:
    """Dispose and forget the singleton (application teardown, tests)"""
    global _theme_service_instance

    if _theme_service_instance is not None:
        _theme_service_instance.dispose()
    _theme_service_instance = None


__all__ = ['ThemeService', 'get_theme_service', 'reset_theme_service']
