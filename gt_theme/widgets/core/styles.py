"""
Centralized colors for GT Theme widgets.

The widgets draw themselves from these constants so they look right
whether or not an application stylesheet is installed.

Usage:
    from gt_theme.widgets.core import Colors

    color = Colors.pick(is_dark, Colors.ACCENT_LIGHT, Colors.ACCENT_DARK)
"""


class Colors:
    """
    Light/dark color pairs used by the widgets.

    Naming convention: ROLE_LIGHT / ROLE_DARK
    """

    # Accent (selected state, icons)
    ACCENT_LIGHT = "#6750A4"
    ACCENT_DARK = "#D0BCFF"

    # Borders
    BORDER_LIGHT = "#E7E0EC"
    BORDER_DARK = "#49454E"

    # Card / indicator backgrounds
    PANEL_LIGHT = "#F5EFF7"
    PANEL_DARK = "#2B2930"

    # Text
    TEXT_LIGHT = "#1C1B1F"
    TEXT_DARK = "#E7E0EC"
    LABEL_LIGHT = "#49454E"
    LABEL_DARK = "#C4C7C5"
    UNSELECTED_TEXT_LIGHT = "#49454E"
    UNSELECTED_TEXT_DARK = "#B0B0B0"

    # Selected button fill (accent at 10% / 20% alpha)
    SELECTED_FILL_LIGHT = "rgba(103, 80, 164, 0.1)"
    SELECTED_FILL_DARK = "rgba(103, 80, 164, 0.2)"

    # Indicator background (panel at 50% alpha)
    INDICATOR_FILL_LIGHT = "rgba(245, 239, 247, 0.5)"
    INDICATOR_FILL_DARK = "rgba(43, 41, 48, 0.5)"

    # Demo panel
    DEMO_FILL_LIGHT = "#F3E5F5"
    DEMO_FILL_DARK = "rgba(74, 20, 140, 0.3)"
    DEMO_ACCENT_LIGHT = "#7B1FA2"
    DEMO_ACCENT_DARK = "#CE93D8"

    @staticmethod
    def pick(is_dark: bool, light: str, dark: str) -> str:
        """Choose the light or dark variant"""
        return dark if is_dark else light


class Icons:
    """Text glyphs used in place of icon resources"""

    LIGHT_MODE = "☀"   # sun
    DARK_MODE = "☾"    # crescent moon
    SYSTEM_MODE = "⚙"  # gear
    SPEED = "⚡"        # lightning


__all__ = ['Colors', 'Icons']
