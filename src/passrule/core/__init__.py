"""Core PassRule utilities.

This module exports configuration, logging and error types for use
throughout the library.
"""

from passrule.core.config import Settings, get_settings
from passrule.core.exceptions import (
    InsufficientLengthError,
    PolicyConfigurationError,
    PolicyError,
    UnsortedDictionaryError,
)
from passrule.core.logging import configure_logging, get_logger

__all__ = [
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    "PolicyError",
    "PolicyConfigurationError",
    "UnsortedDictionaryError",
    "InsufficientLengthError",
]
