"""
Re-export scalars modules for cleaner imports.

This allows: from schemacore.scalars import convert_type_if_scalar
Instead of: from schemacore.meta.typing.scalars.resolver import convert_type_if_scalar
"""

from .meta.typing.scalars import (
    GraphQLISODateTime,
    GraphQLTimestamp,
    ScalarsRegistry,
    ScalarsTypeMap,
)
from .meta.typing.scalars.resolver import convert_type_if_scalar

__all__ = [
    "GraphQLISODateTime",
    "GraphQLTimestamp",
    "ScalarsRegistry",
    "ScalarsTypeMap",
    "convert_type_if_scalar",
]
