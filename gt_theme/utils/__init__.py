"""
Utility functions for GT Theme
"""

from .logging_config import LoggingConfig

__all__ = [
    'LoggingConfig',
]
