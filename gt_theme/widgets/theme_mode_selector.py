"""
ThemeModeSelector - Light / Dark / System buttons

Pattern: Exclusive checkable buttons mirroring theme_mode_notifier.
"""

from typing import Callable, Dict, Optional

from PyQt6.QtWidgets import (
    QButtonGroup, QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget
)

from ..themes.models import ThemeMode
from ..themes.theme_service import ThemeService
from .core.base_widget import ThemePanel
from .core.styles import Colors


class ThemeModeSelector(ThemePanel):
    """
    Lets the user pick a theme mode

    Usage:
        selector = ThemeModeSelector(theme_service, on_theme_mode_changed=callback)
    """

    TITLE = "Theme Mode"

    def __init__(
        self,
        theme_service: ThemeService,
        on_theme_mode_changed: Optional[Callable[[], None]] = None,
        parent: Optional[QWidget] = None
    ):
        self._on_theme_mode_changed = on_theme_mode_changed
        self._buttons: Dict[ThemeMode, QPushButton] = {}
        super().__init__(theme_service, parent)

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(8)

        self._title = QLabel(self.TITLE)
        self._title.setStyleSheet("font-size: 16px; font-weight: 600;")
        layout.addWidget(self._title)

        row = QHBoxLayout()
        row.setSpacing(8)
        self._group = QButtonGroup(self)
        self._group.setExclusive(True)

        for mode in ThemeMode:
            button = QPushButton(mode.label)
            button.setCheckable(True)
            button.setProperty("themeMode", mode.value)
            self._group.addButton(button)
            self._buttons[mode] = button
            row.addWidget(button)

        row.addStretch()
        layout.addLayout(row)

    def _connect_signals(self):
        for mode, button in self._buttons.items():
            button.clicked.connect(lambda _checked=False, m=mode: self._on_button_clicked(m))

        self._listen(self._theme_service.theme_mode_notifier, self._on_state_changed)
        self._listen(self._theme_service.system_brightness_notifier, self._on_state_changed)

    def button(self, mode: ThemeMode) -> QPushButton:
        return self._buttons[mode]

    def _on_button_clicked(self, mode: ThemeMode):
        self._theme_service.set_theme_mode(mode)
        if self._on_theme_mode_changed is not None:
            self._on_theme_mode_changed()
        # Restore the check state if the service ignored the change
        self._refresh()

    def _on_state_changed(self, _value):
        self._refresh()

    def _refresh(self):
        current = self._theme_service.current_theme_mode
        is_dark = self._theme_service.current_system_brightness.is_dark
        for mode, button in self._buttons.items():
            selected = mode is current
            button.setChecked(selected)
            button.setStyleSheet(self._button_style(selected, is_dark))

    @staticmethod
    def _button_style(selected: bool, is_dark: bool) -> str:
        if selected:
            border = Colors.pick(is_dark, Colors.ACCENT_LIGHT, Colors.ACCENT_DARK)
            fill = Colors.pick(is_dark, Colors.SELECTED_FILL_LIGHT, Colors.SELECTED_FILL_DARK)
            text = border
            width, weight = 2, 600
        else:
            border = Colors.pick(is_dark, Colors.BORDER_LIGHT, Colors.BORDER_DARK)
            fill = "transparent"
            text = Colors.pick(is_dark, Colors.UNSELECTED_TEXT_LIGHT, Colors.UNSELECTED_TEXT_DARK)
            width, weight = 1, 500

        return f"""
            QPushButton {{
                background-color: {fill};
                color: {text};
                border: {width}px solid {border};
                border-radius: 8px;
                padding: 10px 16px;
                font-size: 14px;
                font-weight: {weight};
            }}
        """


__all__ = ['ThemeModeSelector']
