"""
ThemeModeStore - Persists the theme mode preference in QSettings

One key, value in ThemeMode.to_storage() form. Errors are raised as
ThemeStorageError; ThemeService decides how to degrade.
"""

from typing import Optional

from PyQt6.QtCore import QSettings

from ..config import Config
from ..core.exceptions import ThemeStorageError
from ..utils.logging_config import LoggingConfig
from .models import ThemeMode

logger = LoggingConfig.get_logger(__name__)


class ThemeModeStore:
    """
    Local key-value storage for the theme mode

    Usage:
        store = ThemeModeStore()
        store.save(ThemeMode.DARK)
        mode = store.load()  # ThemeMode.DARK, or None if never saved
    """

    def __init__(self, settings: Optional[QSettings] = None, key: str = None):
        self._settings = settings
        self._key = key or Config.THEME_MODE_SETTINGS_KEY

    @property
    def key(self) -> str:
        return self._key

    def _get_settings(self) -> QSettings:
        # Created on first use so the store can be built before QApplication
        if self._settings is None:
            self._settings = QSettings(Config.APP_AUTHOR, Config.APP_NAME)
        return self._settings

    def _check_status(self, settings: QSettings, action: str) -> None:
        status = settings.status()
        if status != QSettings.Status.NoError:
            raise ThemeStorageError(f"Could not {action} theme mode", status.name)

    def load(self) -> Optional[ThemeMode]:
        """
        Read the persisted theme mode

        Returns:
            The stored mode, or None if nothing has been stored

        Raises:
            ThemeStorageError: settings backend reported an error
        """
        settings = self._get_settings()
        self._check_status(settings, "read")

        if not settings.contains(self._key):
            return None

        raw = settings.value(self._key)
        mode = ThemeMode.from_storage(raw if isinstance(raw, str) else None)
        if mode.to_storage() != raw:
            logger.warning(f"Unrecognised stored theme mode {raw!r}, using {mode.to_storage()}")
        return mode

    def save(self, mode: ThemeMode) -> None:
        """
        Write the theme mode and flush it to disk

        Raises:
            ThemeStorageError: settings backend reported an error
        """
        settings = self._get_settings()
        settings.setValue(self._key, mode.to_storage())
        settings.sync()
        self._check_status(settings, "write")

    def clear(self) -> None:
        """Forget the stored theme mode"""
        settings = self._get_settings()
        settings.remove(self._key)
        settings.sync()


__all__ = ['ThemeModeStore']
