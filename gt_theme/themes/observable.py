"""
ObservableValue - Single-value publish/subscribe channel

Pattern: QObject holding the latest value plus a change signal.
Reads always return the last synchronously published value.
Bound-method subscribers are held weakly so widgets can be collected.
"""

import inspect
import weakref
from typing import Any, Callable, List, Optional

from PyQt6.QtCore import QObject, pyqtSignal

SubscriberRef = Callable[[], Optional[Callable[[Any], None]]]


def _make_ref(callback: Callable[[Any], None]) -> SubscriberRef:
    if inspect.ismethod(callback):
        return weakref.WeakMethod(callback)
    return lambda: callback


class ObservableValue(QObject):
    """
    Holds one value and notifies subscribers when it changes

    Usage:
        notifier = ObservableValue(ThemeMode.SYSTEM)
        notifier.subscribe(on_mode_changed)
        notifier.set_value(ThemeMode.DARK)  # on_mode_changed(ThemeMode.DARK)
    """

    value_changed = pyqtSignal(object)

    def __init__(self, initial_value: Any, parent=None):
        super().__init__(parent)
        self._value = initial_value
        self._subscribers: List[SubscriberRef] = []
        self._closed = False

    @property
    def value(self) -> Any:
        return self._value

    @property
    def is_closed(self) -> bool:
        return self._closed

    def set_value(self, value: Any) -> bool:
        """
        Publish a new value

        Returns:
            True if subscribers were notified
        """
        if self._closed or value == self._value:
            return False
        self._value = value
        self.value_changed.emit(value)
        return True

    def subscribe(self, callback: Callable[[Any], None]) -> None:
        """Call callback(value) on every change"""
        if self._closed:
            return
        self.value_changed.connect(callback)
        self._subscribers.append(_make_ref(callback))

    def unsubscribe(self, callback: Callable[[Any], None]) -> None:
        """Stop calling callback; unknown callbacks are ignored"""
        self.discard_dead_subscribers()
        for ref in self._subscribers:
            connected = ref()
            # Bound methods compare equal without being identical
            if connected is not None and connected == callback:
                self._subscribers.remove(ref)
                try:
                    self.value_changed.disconnect(connected)
                except TypeError:
                    # Already disconnected, e.g. the receiver was destroyed
                    pass
                return

    def discard_dead_subscribers(self) -> None:
        """Forget bound-method subscribers whose objects were collected"""
        self._subscribers = [ref for ref in self._subscribers if ref() is not None]

    def subscriber_count(self) -> int:
        self.discard_dead_subscribers()
        return len(self._subscribers)

    def close(self) -> None:
        """Disconnect every subscriber; later set_value() calls are ignored"""
        if self._closed:
            return
        self._closed = True
        self._subscribers.clear()
        try:
            self.value_changed.disconnect()
        except TypeError:
            # No connections
            pass

    def __repr__(self):
        return f"ObservableValue({self._value!r})"


__all__ = ['ObservableValue']
