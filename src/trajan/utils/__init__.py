"""
Utilities module for trajan.

This module provides configuration management and helper functions.
"""

from .config_manager import ConfigManager
from .helpers import (
    update_dict_recursively,
    ensure_directory,
    configure_logging
)

__all__ = [
    'ConfigManager',
    'update_dict_recursively',
    'ensure_directory',
    'configure_logging'
]
