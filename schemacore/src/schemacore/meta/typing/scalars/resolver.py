"""Conversion of declared python types to scalar types."""

from datetime import datetime
from typing import Any

from graphql import GraphQLBoolean, GraphQLFloat, GraphQLScalarType, GraphQLString

from .known_scalars import GraphQLISODateTime, GraphQLTimestamp
from .registry import ScalarsRegistry
from ...config.build_context import TIMESTAMP_DATE_MODE, build_context


def convert_type_if_scalar(
    type_: Any, registry: ScalarsRegistry | None = None
) -> GraphQLScalarType | None:
    """Get the scalar type representing a declared type, if any.

    Scalars are returned as is. Otherwise the custom scalars registry is searched first, then
    the built-in python types (str, bool, float, int, datetime) are mapped. `int` follows
    `float` since both are plain numbers.

    Args:
        type_ (Any): The declared type.
        registry (ScalarsRegistry | None): Custom scalars. Defaults to the build context's.

    Returns:
        GraphQLScalarType | None: The scalar, or None when the type is not a scalar (an object
            type for instance).
    """
    if isinstance(type_, GraphQLScalarType):
        return type_

    context = build_context()
    scalar = (registry if registry is not None else context.scalars_map).find(type_)
    if scalar is not None:
        return scalar

    if type_ is str:
        return GraphQLString
    if type_ is bool:
        return GraphQLBoolean
    if type_ is float or type_ is int:
        return GraphQLFloat
    if type_ is datetime:
        if context.date_scalar_mode == TIMESTAMP_DATE_MODE:
            return GraphQLTimestamp
        return GraphQLISODateTime
    return None
