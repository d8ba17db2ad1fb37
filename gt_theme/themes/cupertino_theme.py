"""
CupertinoTheme - iOS-style bundles

Pattern: StyleBundle subclass with stylesheet generation.
Colors follow the iOS system palette (systemBlue, label, inactiveGray).
"""

from dataclasses import dataclass

from .models import Brightness, DesignSystem
from .style_bundle import (
    ColorPalette, ComponentMetrics, StyleBundle, TextStyle, freeze_text_styles
)

SYSTEM_BLUE = "#007AFF"
SYSTEM_BLUE_DARK = "#0A84FF"
SYSTEM_GREY = "#8E8E93"
INACTIVE_GRAY = "#999999"
INACTIVE_GRAY_DARK = "#757575"
LABEL = "#000000"

LIGHT_PALETTE = ColorPalette(
    primary=SYSTEM_BLUE,
    on_primary="#FFFFFF",
    background="#FFFFFF",
    surface="#F2F2F7",
    text_primary=LABEL,
    text_secondary=INACTIVE_GRAY,
    outline="#C6C6C8",
    input_fill="#FFFFFF",
    bar_background="#F9F9F9",
    bar_foreground=LABEL,
)

DARK_PALETTE = ColorPalette(
    primary=SYSTEM_BLUE_DARK,
    on_primary="#000000",
    background="#000000",
    surface="#1C1C1E",
    text_primary=SYSTEM_GREY,
    text_secondary=INACTIVE_GRAY_DARK,
    outline="#38383A",
    input_fill="#1C1C1E",
    bar_background="#1C1C1E",
    bar_foreground=SYSTEM_GREY,
)

CUPERTINO_METRICS = ComponentMetrics(
    card_radius=10,
    button_radius=8,
    input_radius=6,
    button_padding=(10, 20),
    text_button_padding=(6, 10),
    input_padding=(8, 10),
    focus_border_width=1,
    bar_title_size=17,
    bar_title_weight=600,
)


@dataclass(frozen=True, eq=False, repr=False)
class CupertinoTheme(StyleBundle):
    """iOS look: translucent bar, plain text actions, rounded grouped cards"""

    def get_stylesheet(self) -> str:
        """Generate QSS stylesheet for the Cupertino bundle"""
        p = self.palette
        m = self.metrics
        body = self.text_styles['textStyle']
        action = self.text_styles['actionTextStyle']

        return f"""
/* ===== GLOBAL STYLES ===== */
QWidget {{
    background-color: {p.background};
    color: {body.color};
    font-family: {self.font_family};
    font-size: {body.font_size}px;
}}

/* ===== NAVIGATION BAR ===== */
QWidget[appBar="true"] {{
    background-color: {p.bar_background};
    border-bottom: 1px solid {p.outline};
}}

QWidget[appBar="true"] QLabel {{
    font-size: {m.bar_title_size}px;
    font-weight: {m.bar_title_weight};
    color: {p.bar_foreground};
}}

/* ===== GROUPED CARDS ===== */
QFrame[card="true"] {{
    background-color: {p.surface};
    border: none;
    border-radius: {m.card_radius}px;
}}

/* ===== BUTTONS ===== */
/* Filled */
QPushButton {{
    background-color: {p.primary};
    color: {p.on_primary};
    border: none;
    border-radius: {m.button_radius}px;
    padding: {m.button_padding[0]}px {m.button_padding[1]}px;
}}

QPushButton:pressed {{
    background-color: {p.outline};
}}

/* Plain action text */
QPushButton[flat="true"], QPushButton[outlined="true"] {{
    background-color: transparent;
    color: {action.color};
    font-size: {action.font_size}px;
    border: none;
    padding: {m.text_button_padding[0]}px {m.text_button_padding[1]}px;
}}

/* ===== INPUTS ===== */
QLineEdit {{
    background-color: {p.input_fill};
    border: 1px solid {p.outline};
    border-radius: {m.input_radius}px;
    padding: {m.input_padding[0]}px {m.input_padding[1]}px;
}}

QLineEdit:focus {{
    border: {m.focus_border_width}px solid {p.primary};
}}

/* ===== TYPOGRAPHY ===== */
{self._text_style_rules()}
"""


def _build_text_styles(brightness: Brightness, palette: ColorPalette):
    inactive = INACTIVE_GRAY_DARK if brightness is Brightness.DARK else INACTIVE_GRAY
    label = palette.text_primary
    return freeze_text_styles({
        'tabLabelTextStyle': TextStyle(10, 600, inactive),
        'navTitleTextStyle': TextStyle(17, 600, label),
        'navLargeTitleTextStyle': TextStyle(34, 700, label),
        'pickerTextStyle': TextStyle(21, 400, label),
        'dateTimePickerTextStyle': TextStyle(21, 400, label),
        'textStyle': TextStyle(17, 400, label),
        'actionTextStyle': TextStyle(16, 400, palette.primary),
    })


def build_cupertino_theme(brightness: Brightness) -> CupertinoTheme:
    """Build the Cupertino bundle for a brightness"""
    palette = DARK_PALETTE if brightness is Brightness.DARK else LIGHT_PALETTE
    return CupertinoTheme(
        design_system=DesignSystem.CUPERTINO,
        brightness=brightness,
        palette=palette,
        text_styles=_build_text_styles(brightness, palette),
        metrics=CUPERTINO_METRICS,
        font_family='"SF Pro Text", "Helvetica Neue", Arial, sans-serif',
    )


__all__ = ['CupertinoTheme', 'build_cupertino_theme']
