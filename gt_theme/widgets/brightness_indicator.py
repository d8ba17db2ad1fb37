"""
BrightnessIndicator - Shows the current OS brightness
"""

from PyQt6.QtWidgets import QHBoxLayout, QLabel

from .core.base_widget import ThemePanel
from .core.styles import Colors, Icons


class BrightnessIndicator(ThemePanel):
    """Icon plus 'System: Light|Dark', restyled on system_brightness_notifier"""

    def _setup_ui(self):
        self.setObjectName("brightnessIndicator")
        layout = QHBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(8)

        self._icon_label = QLabel()
        layout.addWidget(self._icon_label)

        self._text_label = QLabel()
        layout.addWidget(self._text_label)
        layout.addStretch()

    def _connect_signals(self):
        self._listen(self._theme_service.system_brightness_notifier, self._on_brightness_changed)

    @property
    def text(self) -> str:
        return self._text_label.text()

    def _on_brightness_changed(self, _brightness):
        self._refresh()

    def _refresh(self):
        brightness = self._theme_service.current_system_brightness
        is_dark = brightness.is_dark

        self._icon_label.setText(Icons.DARK_MODE if is_dark else Icons.LIGHT_MODE)
        self._text_label.setText(f"System: {brightness.label}")

        accent = Colors.pick(is_dark, Colors.ACCENT_LIGHT, Colors.ACCENT_DARK)
        text = Colors.pick(is_dark, Colors.TEXT_LIGHT, Colors.TEXT_DARK)
        self._icon_label.setStyleSheet(f"color: {accent}; font-size: 20px; background: transparent;")
        self._text_label.setStyleSheet(
            f"color: {text}; font-size: 14px; font-weight: 500; background: transparent;"
        )
        self.setStyleSheet(f"""
            QFrame#brightnessIndicator {{
                background-color: {Colors.pick(is_dark, Colors.INDICATOR_FILL_LIGHT, Colors.INDICATOR_FILL_DARK)};
                border: 1px solid {Colors.pick(is_dark, Colors.BORDER_LIGHT, Colors.BORDER_DARK)};
                border-radius: 12px;
            }}
        """)


__all__ = ['BrightnessIndicator']
