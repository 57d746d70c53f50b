"""
Re-export exceptions module for cleaner imports.

This allows: from schemacore.exceptions import WrongNullableListOptionError
Instead of: from schemacore.meta.typing.errors import WrongNullableListOptionError
"""

from .abstract.exceptions.traced_exceptions import TracedException, format_exception
from .meta.typing.errors import (
    ConfigurationError,
    DefaultingInstanceError,
    InvalidTypeOptionsError,
    TypingError,
    WrongNullableListOptionError,
)

__all__ = [
    "TracedException",
    "format_exception",
    "TypingError",
    "WrongNullableListOptionError",
    "ConfigurationError",
    "InvalidTypeOptionsError",
    "DefaultingInstanceError",
]
