"""
GT Theme

Light/dark/system theme management for PyQt6 applications.
"""

__version__ = "1.0.0"
__author__ = "GT Theme Team"

__all__ = ['__version__', '__author__']
