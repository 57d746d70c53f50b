"""
Re-export enums module for cleaner imports.

This allows: from schemacore.enums import get_enum_values_map
Instead of: from schemacore.meta.classes.enums import get_enum_values_map
"""

from .meta.classes.enums import get_enum_values_map, is_integer_key

__all__ = [
    "get_enum_values_map",
    "is_integer_key",
]
