"""
Base widget classes for GT Theme UI.

Usage:
    class MyPanel(ThemePanel):
        def _setup_ui(self):
            layout = QVBoxLayout(self)
            # Add widgets...

        def _connect_signals(self):
            self._listen(self._theme_service.theme_mode_notifier, self._on_mode)
"""

import inspect
import weakref
from functools import partial
from typing import Any, Callable, Optional

from PyQt6.QtWidgets import QFrame, QWidget

from ...themes.observable import ObservableValue
from ...themes.theme_service import ThemeService


class ThemePanel(QFrame):
    """
    Base class for widgets that render ThemeService state.

    Subclasses should implement:
    - _setup_ui(): Create layout and add widgets
    - _connect_signals(): Subscribe to service notifiers (optional)
    - _refresh(): Re-render from current service state (optional)

    Subscriptions made with _listen() are dropped when the widget is destroyed.
    """

    def __init__(self, theme_service: ThemeService, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self._theme_service = theme_service
        self._setup_ui()
        self._connect_signals()
        self._refresh()

    @property
    def theme_service(self) -> ThemeService:
        return self._theme_service

    def _setup_ui(self) -> None:
        """
        Set up the UI layout and widgets.

        Must be implemented by subclasses.
        """
        raise NotImplementedError("Subclasses must implement _setup_ui()")

    def _connect_signals(self) -> None:
        """
        Connect notifiers and widget signals to handlers.

        Override in subclasses. Called after _setup_ui().
        """
        pass

    def _refresh(self) -> None:
        """
        Render current service state.

        Override in subclasses. Called once after construction.
        """
        pass

    def _listen(self, notifier: ObservableValue, callback: Callable[[Any], None]) -> None:
        """Subscribe callback to notifier for the lifetime of this widget"""
        notifier.subscribe(callback)
        # Must not keep a parentless panel alive
        ref = weakref.WeakMethod(callback) if inspect.ismethod(callback) else (lambda: callback)
        self.destroyed.connect(partial(_drop_subscription, notifier, ref))


def _drop_subscription(notifier: ObservableValue, ref) -> None:
    callback = ref()
    if callback is None:
        notifier.discard_dead_subscribers()
    else:
        notifier.unsubscribe(callback)


__all__ = ['ThemePanel']
