"""
Widgets for GT Theme

Presentational widgets that render ThemeService state.
"""

from .theme_consumer import ThemeConsumer
from .theme_mode_selector import ThemeModeSelector
from .brightness_indicator import BrightnessIndicator
from .theme_info_card import ThemeInfoCard
from .example_window import ThemeExampleWindow

__all__ = [
    'ThemeConsumer',
    'ThemeModeSelector',
    'BrightnessIndicator',
    'ThemeInfoCard',
    'ThemeExampleWindow',
]
