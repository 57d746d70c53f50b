"""Scalar definitions and custom scalars registry for schemacore.

The resolver is not imported here: it depends on the build context, which itself holds a
ScalarsRegistry. Import it from `schemacore.scalars` or from `.resolver`.
"""

from .known_scalars import GraphQLISODateTime, GraphQLTimestamp
from .registry import ScalarsRegistry, ScalarsTypeMap

__all__ = [
    "GraphQLISODateTime",
    "GraphQLTimestamp",
    "ScalarsRegistry",
    "ScalarsTypeMap",
]
