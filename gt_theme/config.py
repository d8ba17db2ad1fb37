"""
Configuration for GT Theme

Centralized app configuration with sensible defaults.
Pattern: Single source of truth for all settings.
"""

import os
import sys
from pathlib import Path

from . import __version__


class Config:
    """
    Application configuration

    Features:
    - App metadata (also used as the QSettings organization/application)
    - Theme defaults and persistence key
    - Path configuration for logs
    - Demo window defaults
    """

    # ==================== APP METADATA ====================
    APP_NAME = "GT Theme"

    APP_VERSION = __version__

    APP_AUTHOR = "GTTheme"

    # ==================== PATHS ====================
    APP_ROOT: Path = Path(__file__).parent
    USER_DATA_FOLDER = "GTTheme"
    LOGS_FOLDER = "logs"

    # ==================== THEME ====================
    # QSettings key holding the persisted theme mode ("ThemeMode.<value>")
    THEME_MODE_SETTINGS_KEY = "theme/theme_mode_preference"

    # Enum values, resolved by the themes package
    DEFAULT_THEME_MODE = "system"
    DEFAULT_SYSTEM_BRIGHTNESS = "light"  # Used until the OS has been queried
    DEFAULT_DESIGN_SYSTEM = "material"

    # Delay before the persisted preference is read (0 = next event loop pass)
    THEME_LOAD_DELAY_MS = 0

    # ==================== UI DEFAULTS ====================
    DEFAULT_WINDOW_WIDTH = 640
    DEFAULT_WINDOW_HEIGHT = 820
    MIN_WINDOW_WIDTH = 420
    MIN_WINDOW_HEIGHT = 480

    @classmethod
    def get_user_data_dir(cls) -> Path:
        """Get user data directory in OS AppData.

        Portable mode: if portable.txt exists next to the app root,
        falls back to a local data/ folder.
        """
        portable_marker = cls.APP_ROOT.parent / 'portable.txt'
        if portable_marker.exists():
            user_dir = cls.APP_ROOT.parent / 'data'
            user_dir.mkdir(parents=True, exist_ok=True)
            return user_dir

        # OS-specific AppData
        if sys.platform == 'win32':
            base = Path(os.environ.get('LOCALAPPDATA', Path.home() / 'AppData' / 'Local'))
        elif sys.platform == 'darwin':
            base = Path.home() / 'Library' / 'Application Support'
        else:
            base = Path(os.environ.get('XDG_DATA_HOME', Path.home() / '.local' / 'share'))

        user_dir = base / cls.USER_DATA_FOLDER
        user_dir.mkdir(parents=True, exist_ok=True)
        return user_dir

    @classmethod
    def get_logs_directory(cls) -> Path:
        """Get logs directory path"""
        logs_dir = cls.get_user_data_dir() / cls.LOGS_FOLDER
        logs_dir.mkdir(parents=True, exist_ok=True)
        return logs_dir


__all__ = ['Config']
