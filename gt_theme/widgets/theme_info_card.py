"""
ThemeInfoCard - Current theme mode, system and effective brightness
"""

from typing import Dict

from PyQt6.QtWidgets import QGridLayout, QLabel, QVBoxLayout

from .core.base_widget import ThemePanel
from .core.styles import Colors

ROW_THEME_MODE = "Theme Mode"
ROW_SYSTEM_BRIGHTNESS = "System Brightness"
ROW_EFFECTIVE_BRIGHTNESS = "Effective Brightness"


class ThemeInfoCard(ThemePanel):
    """Card listing the service state, colored by effective brightness"""

    TITLE = "Theme Information"
    ROWS = (ROW_THEME_MODE, ROW_SYSTEM_BRIGHTNESS, ROW_EFFECTIVE_BRIGHTNESS)

    def _setup_ui(self):
        self.setObjectName("themeInfoCard")
        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(12)

        self._title = QLabel(self.TITLE)
        layout.addWidget(self._title)

        grid = QGridLayout()
        grid.setVerticalSpacing(8)
        self._name_labels: Dict[str, QLabel] = {}
        self._value_labels: Dict[str, QLabel] = {}
        for row, name in enumerate(self.ROWS):
            name_label = QLabel(name)
            value_label = QLabel()
            grid.addWidget(name_label, row, 0)
            grid.addWidget(value_label, row, 1)
            grid.setColumnStretch(0, 1)
            self._name_labels[name] = name_label
            self._value_labels[name] = value_label
        layout.addLayout(grid)

    def _connect_signals(self):
        self._listen(self._theme_service.theme_mode_notifier, self._on_state_changed)
        self._listen(self._theme_service.system_brightness_notifier, self._on_state_changed)

    def value_text(self, row: str) -> str:
        return self._value_labels[row].text()

    def _on_state_changed(self, _value):
        self._refresh()

    def _refresh(self):
        service = self._theme_service
        effective = service.effective_brightness
        is_dark = effective.is_dark

        self._value_labels[ROW_THEME_MODE].setText(service.current_theme_mode.label)
        self._value_labels[ROW_SYSTEM_BRIGHTNESS].setText(service.current_system_brightness.label)
        self._value_labels[ROW_EFFECTIVE_BRIGHTNESS].setText(effective.label)

        text = Colors.pick(is_dark, Colors.TEXT_LIGHT, Colors.TEXT_DARK)
        label = Colors.pick(is_dark, Colors.LABEL_LIGHT, Colors.LABEL_DARK)

        self._title.setStyleSheet(
            f"color: {text}; font-size: 16px; font-weight: 600; background: transparent;"
        )
        for name in self.ROWS:
            self._name_labels[name].setStyleSheet(
                f"color: {label}; font-size: 14px; background: transparent;"
            )
            self._value_labels[name].setStyleSheet(
                f"color: {text}; font-size: 14px; font-weight: 600; background: transparent;"
            )
        self.setStyleSheet(f"""
            QFrame#themeInfoCard {{
                background-color: {Colors.pick(is_dark, Colors.PANEL_LIGHT, Colors.PANEL_DARK)};
                border: 1px solid {Colors.pick(is_dark, Colors.BORDER_LIGHT, Colors.BORDER_DARK)};
                border-radius: 12px;
            }}
        """)


__all__ = ['ThemeInfoCard', 'ROW_THEME_MODE', 'ROW_SYSTEM_BRIGHTNESS', 'ROW_EFFECTIVE_BRIGHTNESS']
