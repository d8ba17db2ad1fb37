"""
Core UI infrastructure for GT Theme widgets.

Provides:
- Colors, Icons: Centralized color and glyph constants
- ThemePanel: Base class for service-driven widgets
"""

from .styles import Colors, Icons
from .base_widget import ThemePanel

__all__ = [
    'Colors',
    'Icons',
    'ThemePanel',
]
