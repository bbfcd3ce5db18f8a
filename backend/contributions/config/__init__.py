"""
Configuration module for contribution stores.
"""
from .settings import (
    Settings,
    ThreadStrategy,
    get_settings,
)

__all__ = [
    'Settings',
    'ThreadStrategy',
    'get_settings',
]
