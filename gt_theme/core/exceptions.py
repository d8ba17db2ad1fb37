"""
Custom exceptions for GT Theme

Pattern: Domain-specific exceptions raised at I/O boundaries.
ThemeService catches these and degrades to defaults.
"""


class GTThemeError(Exception):
    """Base exception for all GT Theme errors"""

    def __init__(self, message: str, details: str = None):
        self.message = message
        self.details = details
        super().__init__(message)

    def __str__(self):
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class ThemeStorageError(GTThemeError):
    """Reading or writing the persisted theme preference failed"""
    pass


__all__ = [
    'GTThemeError',
    'ThemeStorageError',
]
