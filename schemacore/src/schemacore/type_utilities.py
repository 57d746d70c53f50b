"""
Re-export utilities module for cleaner imports.

This allows: from schemacore.type_utilities import list_depth
Instead of: from schemacore.meta.typing.utilities import list_depth
"""

from .meta.typing.utilities import (
    get_leaf_type,
    is_list,
    is_non_null,
    list_depth,
    strip_non_null,
)

__all__ = [
    "get_leaf_type",
    "is_list",
    "is_non_null",
    "list_depth",
    "strip_non_null",
]
