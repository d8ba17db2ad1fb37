"""
ThemeExampleWindow - Demo window for the theme widgets

Pattern: QMainWindow composed of the GT Theme widgets.
The ThemeService is passed in by the application, never looked up here.
"""

from typing import Optional

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QFrame, QHBoxLayout, QLabel, QMainWindow, QPushButton, QScrollArea,
    QVBoxLayout, QWidget
)

from ..config import Config
from ..themes.models import ThemeMode
from ..themes.theme_service import ThemeService
from ..utils.logging_config import LoggingConfig
from .brightness_indicator import BrightnessIndicator
from .core.styles import Colors, Icons
from .theme_consumer import ThemeConsumer
from .theme_info_card import ThemeInfoCard
from .theme_mode_selector import ThemeModeSelector

logger = LoggingConfig.get_logger(__name__)


class ThemeExampleWindow(QMainWindow):
    """
    Demo window

    Features:
    - Theme mode selector
    - System brightness indicator
    - Theme information card
    - Quick action buttons
    - ThemeConsumer rebuild demo
    """

    WINDOW_TITLE = "GT Theme Example"

    def __init__(self, theme_service: ThemeService, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self._theme_service = theme_service

        self.setWindowTitle(self.WINDOW_TITLE)
        self.resize(Config.DEFAULT_WINDOW_WIDTH, Config.DEFAULT_WINDOW_HEIGHT)
        self.setMinimumSize(Config.MIN_WINDOW_WIDTH, Config.MIN_WINDOW_HEIGHT)

        self._init_ui()

    def _init_ui(self):
        """Initialize UI layout"""
        central = QWidget()
        root_layout = QVBoxLayout(central)
        root_layout.setContentsMargins(0, 0, 0, 0)
        root_layout.setSpacing(0)

        # App bar
        app_bar = QWidget()
        app_bar.setProperty("appBar", True)
        bar_layout = QHBoxLayout(app_bar)
        bar_layout.setContentsMargins(16, 12, 16, 12)
        bar_title = QLabel(self.WINDOW_TITLE)
        bar_title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        bar_layout.addWidget(bar_title)
        root_layout.addWidget(app_bar)

        # Scrollable content
        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QFrame.Shape.NoFrame)
        content = QWidget()
        layout = QVBoxLayout(content)
        layout.setContentsMargins(24, 24, 24, 24)
        layout.setSpacing(8)

        heading = QLabel("Welcome to GT Theme")
        heading.setProperty("textStyle", "headlineMedium")
        layout.addWidget(heading)

        subheading = QLabel("Light, dark and system theme management for Qt")
        subheading.setProperty("textStyle", "bodyLarge")
        layout.addWidget(subheading)
        layout.addSpacing(24)

        self.mode_selector = ThemeModeSelector(
            self._theme_service,
            on_theme_mode_changed=self._on_theme_mode_changed,
        )
        layout.addWidget(self._build_section("Choose Theme Mode", self.mode_selector))
        layout.addSpacing(16)

        self.brightness_indicator = BrightnessIndicator(self._theme_service)
        layout.addWidget(self._build_section("System Brightness", self.brightness_indicator))
        layout.addSpacing(16)

        self.info_card = ThemeInfoCard(self._theme_service)
        layout.addWidget(self._build_section("Theme Information", self.info_card))
        layout.addSpacing(24)

        layout.addWidget(self._build_quick_actions())
        layout.addSpacing(24)

        self.consumer_demo = ThemeConsumer(self._theme_service, self._build_performance_demo)
        layout.addWidget(self.consumer_demo)
        layout.addStretch()

        scroll.setWidget(content)
        root_layout.addWidget(scroll)
        self.setCentralWidget(central)

    def _build_section(self, title: str, child: QWidget) -> QWidget:
        section = QWidget()
        layout = QVBoxLayout(section)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(12)

        title_label = QLabel(title)
        title_label.setProperty("textStyle", "titleLarge")
        layout.addWidget(title_label)

        card = QFrame()
        card.setProperty("card", True)
        card_layout = QVBoxLayout(card)
        card_layout.setContentsMargins(16, 16, 16, 16)
        card_layout.addWidget(child)
        layout.addWidget(card)
        return section

    def _build_quick_actions(self) -> QWidget:
        section = QWidget()
        layout = QVBoxLayout(section)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(16)

        title = QLabel("Quick Actions")
        title.setProperty("textStyle", "titleLarge")
        layout.addWidget(title)

        row = QHBoxLayout()
        row.setSpacing(12)
        glyphs = {
            ThemeMode.LIGHT: Icons.LIGHT_MODE,
            ThemeMode.DARK: Icons.DARK_MODE,
            ThemeMode.SYSTEM: Icons.SYSTEM_MODE,
        }
        for mode, glyph in glyphs.items():
            button = QPushButton(f"{glyph}  {mode.label}")
            button.clicked.connect(lambda _checked=False, m=mode: self._theme_service.set_theme_mode(m))
            row.addWidget(button)
        row.addStretch()
        layout.addLayout(row)
        return section

    def _build_performance_demo(self, service: ThemeService, _child) -> QWidget:
        is_dark = service.effective_brightness.is_dark
        accent = Colors.pick(is_dark, Colors.DEMO_ACCENT_LIGHT, Colors.DEMO_ACCENT_DARK)
        fill = Colors.pick(is_dark, Colors.DEMO_FILL_LIGHT, Colors.DEMO_FILL_DARK)

        panel = QWidget()
        layout = QVBoxLayout(panel)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(12)

        title = QLabel("ThemeConsumer Demo")
        title.setProperty("textStyle", "titleLarge")
        layout.addWidget(title)

        card = QFrame()
        card.setObjectName("consumerDemoCard")
        card.setStyleSheet(f"QFrame#consumerDemoCard {{ background-color: {fill}; border-radius: 12px; }}")
        card_layout = QVBoxLayout(card)
        card_layout.setContentsMargins(16, 16, 16, 16)

        heading = QLabel(f"{Icons.SPEED}  Optimized Rebuilds")
        heading.setStyleSheet(f"color: {accent}; font-weight: bold; background: transparent;")
        card_layout.addWidget(heading)

        body = QLabel(
            "This panel is rebuilt only when the theme mode or system brightness "
            f"changes. Current effective brightness: {service.effective_brightness.label}."
        )
        body.setWordWrap(True)
        body.setStyleSheet("background: transparent;")
        card_layout.addWidget(body)

        layout.addWidget(card)
        return panel

    def _on_theme_mode_changed(self):
        logger.info(f"Theme changed to: {self._theme_service.current_theme_mode.label}")


__all__ = ['ThemeExampleWindow']
