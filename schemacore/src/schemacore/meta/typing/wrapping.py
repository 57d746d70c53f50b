"""
MIT License

Copyright (c) 2025 Sébastien Gachoud

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in all
copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
SOFTWARE.

-------------------------------------------------------------------------------

Author: Sébastien Gachoud
Created: 2025-12-16
Description: Wrapping of a resolved type with the modifiers declared on a field: nested lists
            and non-null.
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

from typing import Any

from graphql import GraphQLList, GraphQLNonNull, GraphQLType

from .errors import InvalidTypeOptionsError, WrongNullableListOptionError
from .options import TypeOptions, is_items_nullable, is_outer_non_null
from ..config.build_context import build_context


def wrap_type_in_nested_list(
    target_type: GraphQLType, depth: int, nullable: bool
) -> GraphQLType:
    """Wrap a type in `depth` nested lists. The items are made non-null unless nullable.
    Lists themselves are left nullable.
        >>> wrap_type_in_nested_list(GraphQLInt, 2, False)
        <GraphQLList <GraphQLList <GraphQLNonNull <GraphQLScalarType 'Int'>>>>

    Args:
        target_type (GraphQLType): The item type.
        depth (int): The number of lists. 0 returns the type unchanged.
        nullable (bool): Whether the items may be null.

    Raises:
        InvalidTypeOptionsError: Raised for a negative depth.

    Returns:
        GraphQLType: The wrapped type.
    """
    if depth < 0:
        raise InvalidTypeOptionsError(
            f"Array depth must be a non negative integer, got '{depth}'.", array_depth=depth
        )
    if depth == 0:
        return target_type
    wrapped: GraphQLType = target_type if nullable else GraphQLNonNull(target_type)
    for _ in range(depth):
        wrapped = GraphQLList(wrapped)
    return wrapped


def _target_name(target: Any) -> str:
    return getattr(target, "__name__", str(target))


def wrap_with_type_options[T: GraphQLType](
    target: Any,
    property_name: str,
    type_: T,
    type_options: TypeOptions,
    nullable_by_default: bool | None = None,
) -> T:
    """Wrap a resolved type with the modifiers declared for a field.

    Items of lists are nullable with 'items', 'itemsAndList', or when nullable is unset and
    types are nullable by default. The field itself is non-null with False, with 'items', or
    when nullable is unset and types are not nullable by default.

    Args:
        target (Any): The class declaring the field. Used for error messages.
        property_name (str): The name of the field. Used for error messages.
        type_ (T): The resolved type of the field.
        type_options (TypeOptions): The declared modifiers.
        nullable_by_default (bool | None): Defaults to the build context option.

    Raises:
        WrongNullableListOptionError: Raised when items nullability is set on a non-list field.
        InvalidTypeOptionsError: Raised for a negative array depth on a list field.

    Returns:
        T: The wrapped type.
    """
    if not type_options.array and type_options.has_nullable_list_mode:
        raise WrongNullableListOptionError(
            _target_name(target), property_name, type_options.nullable
        )

    if nullable_by_default is None:
        nullable_by_default = build_context().nullable_by_default

    gql_type: GraphQLType = type_
    if type_options.array:
        gql_type = wrap_type_in_nested_list(
            gql_type,
            type_options.array_depth,
            is_items_nullable(type_options, nullable_by_default),
        )

    if is_outer_non_null(type_options, nullable_by_default):
        gql_type = GraphQLNonNull(gql_type)

    return gql_type  # type: ignore[return-value]
