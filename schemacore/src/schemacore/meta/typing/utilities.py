"""Wrapped type utility functions.

This module provides helper functions to inspect types wrapped with list and non-null
modifiers, such as the ones produced by `wrap_with_type_options`.
"""
from graphql import GraphQLList, GraphQLNonNull, GraphQLType


def is_non_null(type_: GraphQLType) -> bool:
    """Check if the outermost modifier of a type is non-null.

    Args:
        type_ (GraphQLType): The type to check.

    Returns:
        bool: Whether the type is non-null.
    """
    return isinstance(type_, GraphQLNonNull)


def is_list(type_: GraphQLType) -> bool:
    """Check if a type is a list, once an outer non-null modifier is removed.

    Args:
        type_ (GraphQLType): The type to check.

    Returns:
        bool: Whether the type is a list.
    """
    return isinstance(strip_non_null(type_), GraphQLList)


def strip_non_null(type_: GraphQLType) -> GraphQLType:
    """Remove the outermost non-null modifier, if any."""
    return type_.of_type if isinstance(type_, GraphQLNonNull) else type_


def list_depth(type_: GraphQLType) -> int:
    """Count the lists nested in a type. `[[Int!]]!` has a depth of 2.

    Args:
        type_ (GraphQLType): The type to inspect.

    Returns:
        int: The number of list modifiers.
    """
    depth = 0
    while isinstance(type_, (GraphQLList, GraphQLNonNull)):
        if isinstance(type_, GraphQLList):
            depth += 1
        type_ = type_.of_type
    return depth


def get_leaf_type(type_: GraphQLType) -> GraphQLType:
    """Get the type wrapped in all the modifiers, keeping the non-null modifier of the leaf.
    `[[Int!]]!` gives `Int!`.

    Args:
        type_ (GraphQLType): The type to inspect.

    Returns:
        GraphQLType: The innermost element type.
    """
    while isinstance(strip_non_null(type_), GraphQLList):
        type_ = strip_non_null(type_).of_type
    return type_
