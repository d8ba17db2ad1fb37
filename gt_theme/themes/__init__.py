"""
Theme system for GT Theme

Provides the theme service and the built-in Material and Cupertino bundles.
"""

from .models import ThemeMode, Brightness, DesignSystem
from .observable import ObservableValue
from .style_bundle import TextStyle, ColorPalette, ComponentMetrics, StyleBundle
from .material_theme import MaterialTheme, build_material_theme
from .cupertino_theme import CupertinoTheme, build_cupertino_theme
from .storage import ThemeModeStore
from .system_brightness import PlatformBrightnessSource
from .theme_service import ThemeService, get_theme_service, reset_theme_service

__all__ = [
    'ThemeMode',
    'Brightness',
    'DesignSystem',
    'ObservableValue',
    'TextStyle',
    'ColorPalette',
    'ComponentMetrics',
    'StyleBundle',
    'MaterialTheme',
    'build_material_theme',
    'CupertinoTheme',
    'build_cupertino_theme',
    'ThemeModeStore',
    'PlatformBrightnessSource',
    'ThemeService',
    'get_theme_service',
    'reset_theme_service',
]
