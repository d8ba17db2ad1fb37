"""
Theme enums shared by the service, the style bundles and the widgets.
"""

from enum import Enum
from typing import Optional


class ThemeMode(Enum):
    """User-facing theme choice. Persisted."""

    LIGHT = "light"
    DARK = "dark"
    SYSTEM = "system"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    def to_storage(self) -> str:
        """Serialized form written to settings, e.g. 'ThemeMode.dark'"""
        return f"ThemeMode.{self.value}"

    @classmethod
    def from_storage(cls, raw: Optional[str]) -> 'ThemeMode':
        """
        Parse a value written by to_storage()

        Anything unrecognised maps to SYSTEM.
        """
        if not raw:
            return cls.SYSTEM
        for mode in cls:
            if raw == mode.to_storage():
                return mode
        return cls.SYSTEM


class Brightness(Enum):
    """Light or dark, as reported by the OS or implied by a ThemeMode."""

    LIGHT = "light"
    DARK = "dark"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @property
    def is_dark(self) -> bool:
        return self is Brightness.DARK


class DesignSystem(Enum):
    """Visual design systems with prebuilt style bundles."""

    MATERIAL = "material"
    CUPERTINO = "cupertino"


__all__ = ['ThemeMode', 'Brightness', 'DesignSystem']
