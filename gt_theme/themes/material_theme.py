"""
MaterialTheme - Material 3 style bundles

Pattern: StyleBundle subclass with stylesheet generation.
Seed color #6750A4, tonal-spot light and dark schemes.
"""

from dataclasses import dataclass

from .models import Brightness, DesignSystem
from .style_bundle import (
    ColorPalette, ComponentMetrics, StyleBundle, TextStyle, freeze_text_styles
)

SEED_COLOR = "#6750A4"

# (font size, weight) per Material 3 type scale role
_TYPE_SCALE = {
    'displayLarge': (57, 400),
    'displayMedium': (45, 400),
    'displaySmall': (36, 400),
    'headlineLarge': (32, 400),
    'headlineMedium': (28, 500),
    'headlineSmall': (24, 500),
    'titleLarge': (22, 500),
    'titleMedium': (16, 500),
    'titleSmall': (14, 500),
    'bodyLarge': (16, 400),
    'bodyMedium': (14, 400),
    'bodySmall': (12, 400),
    'labelLarge': (14, 500),
    'labelMedium': (12, 500),
    'labelSmall': (11, 500),
}

# bodySmall uses the secondary text color, everything else the primary one
_SECONDARY_ROLES = frozenset({'bodySmall'})

LIGHT_PALETTE = ColorPalette(
    primary=SEED_COLOR,
    on_primary="#FFFFFF",
    background="#FFFBFE",
    surface="#FFFBFE",
    text_primary="#1C1B1F",
    text_secondary="#49454E",
    outline="#E7E0EC",
    input_fill="#F5EFF7",
    bar_background="#FFFBFE",
    bar_foreground="#1C1B1F",
)

DARK_PALETTE = ColorPalette(
    primary="#D0BCFF",
    on_primary="#381E72",
    background="#1C1B1F",
    surface="#2B2930",
    text_primary="#E7E0EC",
    text_secondary="#C4C7C5",
    outline="#49454E",
    input_fill="#2B2930",
    bar_background="#1C1B1F",
    bar_foreground="#E7E0EC",
)


@dataclass(frozen=True, eq=False, repr=False)
class MaterialTheme(StyleBundle):
    """Material 3 look: filled inputs, solid and outlined buttons, flat cards"""

    def get_stylesheet(self) -> str:
        """Generate QSS stylesheet for the Material bundle"""
        p = self.palette
        m = self.metrics

        return f"""
/* ===== GLOBAL STYLES ===== */
QWidget {{
    background-color: {p.background};
    color: {p.text_primary};
    font-family: {self.font_family};
    font-size: 14px;
}}

QMainWindow {{
    background-color: {p.background};
}}

/* ===== APP BAR ===== */
QWidget[appBar="true"] {{
    background-color: {p.bar_background};
    color: {p.bar_foreground};
    border: none;
}}

QWidget[appBar="true"] QLabel {{
    font-size: {m.bar_title_size}px;
    font-weight: {m.bar_title_weight};
    color: {p.bar_foreground};
}}

/* ===== CARDS ===== */
QFrame[card="true"] {{
    background-color: {p.surface};
    border: 1px solid {p.outline};
    border-radius: {m.card_radius}px;
}}

/* ===== BUTTONS ===== */
/* Elevated (default) */
QPushButton {{
    background-color: {p.primary};
    color: {p.on_primary};
    border: none;
    border-radius: {m.button_radius}px;
    padding: {m.button_padding[0]}px {m.button_padding[1]}px;
}}

QPushButton:disabled {{
    background-color: {p.outline};
    color: {p.text_secondary};
}}

/* Outlined */
QPushButton[outlined="true"] {{
    background-color: transparent;
    color: {p.primary};
    border: 1px solid {p.primary};
}}

/* Text */
QPushButton[flat="true"] {{
    background-color: transparent;
    color: {p.primary};
    border: none;
    padding: {m.text_button_padding[0]}px {m.text_button_padding[1]}px;
}}

/* ===== INPUTS ===== */
QLineEdit, QTextEdit, QPlainTextEdit {{
    background-color: {p.input_fill};
    border: 1px solid {p.outline};
    border-radius: {m.input_radius}px;
    padding: {m.input_padding[0]}px {m.input_padding[1]}px;
}}

QLineEdit:focus, QTextEdit:focus, QPlainTextEdit:focus {{
    border: {m.focus_border_width}px solid {p.primary};
}}

/* ===== TYPOGRAPHY ===== */
{self._text_style_rules()}
"""


def _build_text_styles(palette: ColorPalette):
    styles = {}
    for name, (size, weight) in _TYPE_SCALE.items():
        color = palette.text_secondary if name in _SECONDARY_ROLES else palette.text_primary
        styles[name] = TextStyle(font_size=size, font_weight=weight, color=color)
    return freeze_text_styles(styles)


def build_material_theme(brightness: Brightness) -> MaterialTheme:
    """Build the Material bundle for a brightness"""
    palette = DARK_PALETTE if brightness is Brightness.DARK else LIGHT_PALETTE
    return MaterialTheme(
        design_system=DesignSystem.MATERIAL,
        brightness=brightness,
        palette=palette,
        text_styles=_build_text_styles(palette),
        metrics=ComponentMetrics(),
        font_family='"Roboto", "Segoe UI", Arial, sans-serif',
    )


__all__ = ['MaterialTheme', 'build_material_theme', 'SEED_COLOR']
