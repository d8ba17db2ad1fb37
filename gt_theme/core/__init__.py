"""
Core functionality for GT Theme

Contains custom exceptions for error handling.
"""

from .exceptions import GTThemeError, ThemeStorageError

__all__ = [
    'GTThemeError',
    'ThemeStorageError',
]
