"""
ThemeConsumer - Rebuilds its content when theme state changes

Pattern: Builder callback re-run on either ThemeService notifier.
The optional child widget is kept alive across rebuilds.
"""

from typing import Callable, Optional

from PyQt6.QtWidgets import QVBoxLayout, QWidget

from ..themes.theme_service import ThemeService
from .core.base_widget import ThemePanel

Builder = Callable[[ThemeService, Optional[QWidget]], QWidget]


class ThemeConsumer(ThemePanel):
    """
    Container whose content is produced by builder(theme_service, child)

    Usage:
        consumer = ThemeConsumer(
            theme_service,
            lambda service, child: QLabel(service.effective_brightness.label),
        )
    """

    def __init__(
        self,
        theme_service: ThemeService,
        builder: Builder,
        child: Optional[QWidget] = None,
        parent: Optional[QWidget] = None
    ):
        self._builder = builder
        self._child = child
        self._content: Optional[QWidget] = None
        self._build_count = 0
        super().__init__(theme_service, parent)

    @property
    def build_count(self) -> int:
        """Number of times the builder has run"""
        return self._build_count

    @property
    def content(self) -> Optional[QWidget]:
        return self._content

    def _setup_ui(self):
        self._layout = QVBoxLayout(self)
        self._layout.setContentsMargins(0, 0, 0, 0)

    def _connect_signals(self):
        self._listen(self._theme_service.theme_mode_notifier, self._on_theme_changed)
        self._listen(self._theme_service.system_brightness_notifier, self._on_theme_changed)

    def _on_theme_changed(self, _value):
        self._refresh()

    def _refresh(self):
        if self._content is not None:
            # Keep the child out of the widget about to be deleted
            if self._child is not None:
                self._child.setParent(self)
                self._child.hide()
            self._layout.removeWidget(self._content)
            self._content.deleteLater()
            self._content = None

        self._build_count += 1
        self._content = self._builder(self._theme_service, self._child)
        if self._child is not None:
            self._child.show()
        self._layout.addWidget(self._content)


__all__ = ['ThemeConsumer']
