"""
Re-export type options and wrapping modules for cleaner imports.

This allows: from schemacore.wrapping import TypeOptions, wrap_with_type_options
Instead of: from schemacore.meta.typing.wrapping import wrap_with_type_options
"""

from .meta.typing.options import (
    ITEMS,
    ITEMS_AND_LIST,
    NullableMode,
    TypeOptions,
    is_items_nullable,
    is_outer_non_null,
)
from .meta.typing.wrapping import wrap_type_in_nested_list, wrap_with_type_options

__all__ = [
    "ITEMS",
    "ITEMS_AND_LIST",
    "NullableMode",
    "TypeOptions",
    "is_items_nullable",
    "is_outer_non_null",
    "wrap_type_in_nested_list",
    "wrap_with_type_options",
]
