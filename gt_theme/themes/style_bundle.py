"""
StyleBundle - Immutable style values for one design system at one brightness

Pattern: Frozen dataclasses with stylesheet generation in subclasses.
ThemeService builds four bundles once and only ever selects among them.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Tuple

from .models import Brightness, DesignSystem


@dataclass(frozen=True)
class TextStyle:
    """Font size (px), CSS weight and color of one typography role"""

    font_size: int
    font_weight: int = 400
    color: str = "#000000"

    def to_qss(self) -> str:
        return (
            f"font-size: {self.font_size}px; "
            f"font-weight: {self.font_weight}; "
            f"color: {self.color};"
        )


@dataclass(frozen=True)
class ColorPalette:
    """Color palette for a style bundle"""

    # Accent colors
    primary: str
    on_primary: str

    # Background colors
    background: str
    surface: str

    # Text colors
    text_primary: str
    text_secondary: str

    # Border/Divider colors
    outline: str

    # Inputs
    input_fill: str

    # Top bar (app bar / navigation bar)
    bar_background: str
    bar_foreground: str


@dataclass(frozen=True)
class ComponentMetrics:
    """Sizes shared by the generated stylesheet, in px"""

    card_radius: int = 12
    button_radius: int = 8
    input_radius: int = 8
    button_padding: Tuple[int, int] = (12, 24)       # vertical, horizontal
    text_button_padding: Tuple[int, int] = (8, 12)
    input_padding: Tuple[int, int] = (12, 16)
    focus_border_width: int = 2
    bar_title_size: int = 22
    bar_title_weight: int = 500


def freeze_text_styles(styles: Mapping[str, TextStyle]) -> Mapping[str, TextStyle]:
    """Read-only copy of a text style table"""
    return MappingProxyType(dict(styles))


@dataclass(frozen=True, eq=False)
class StyleBundle:
    """
    Base style bundle

    Subclasses implement get_stylesheet(). Equality is identity.
    """

    design_system: DesignSystem
    brightness: Brightness
    palette: ColorPalette
    text_styles: Mapping[str, TextStyle] = field(default_factory=lambda: freeze_text_styles({}))
    metrics: ComponentMetrics = field(default_factory=ComponentMetrics)
    font_family: str = '"Segoe UI", Arial, sans-serif'

    @property
    def is_dark(self) -> bool:
        return self.brightness is Brightness.DARK

    def text_style(self, name: str) -> TextStyle:
        """Look up a typography role, e.g. 'titleLarge'"""
        return self.text_styles[name]

    def get_stylesheet(self) -> str:
        """Generate Qt stylesheet for this bundle"""
        raise NotImplementedError("Subclasses must implement get_stylesheet()")

    def _text_style_rules(self) -> str:
        # Widgets opt in with label.setProperty("textStyle", "<name>")
        rules = []
        for name, style in self.text_styles.items():
            rules.append(f'QLabel[textStyle="{name}"] {{ {style.to_qss()} }}')
        return "\n".join(rules)

    def __repr__(self):
        return (
            f"{type(self).__name__}(design_system={self.design_system.value}, "
            f"brightness={self.brightness.value})"
        )


__all__ = [
    'TextStyle',
    'ColorPalette',
    'ComponentMetrics',
    'StyleBundle',
    'freeze_text_styles',
]
