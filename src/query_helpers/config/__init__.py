"""Configuration management for query-helpers.

Usage:
    >>> from query_helpers.config import get_settings
    >>> settings = get_settings()
    >>> settings.param_style
    'pyformat'
"""

from query_helpers.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
