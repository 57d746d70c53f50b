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
Description: Registry of custom scalars. Maps a python type to the scalar type that represents
            it in the schema. Entries are looked up by identity of the python type, in
            registration order.
🦙
"""

from __future__ import annotations

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

import logging
from collections.abc import Iterable, Iterator
from typing import Any, NamedTuple

from graphql import GraphQLScalarType

_log = logging.getLogger(__name__)


class ScalarsTypeMap(NamedTuple):
    """Associates a python type to a scalar type."""

    type: Any
    scalar: GraphQLScalarType


class ScalarsRegistry:
    """
    A class to hold the custom scalar of python types. The first entry registered for a type
    wins, later ones are kept but shadowed.
    """

    __maps: list[ScalarsTypeMap]

    def __init__(self, maps: Iterable[ScalarsTypeMap] = ()) -> None:
        self.__maps = []
        self.extend(maps)

    def register(self, type_: Any, scalar: GraphQLScalarType) -> None:
        """Register the scalar to use for a python type.

        Args:
            type_ (Any): The python type to map.
            scalar (GraphQLScalarType): The scalar representing the type in the schema.
        """
        self.__maps.append(ScalarsTypeMap(type_, scalar))
        _log.debug("Registered scalar '%s' for type %r.", scalar.name, type_)

    def extend(self, maps: Iterable[ScalarsTypeMap | tuple[Any, GraphQLScalarType]]) -> None:
        """Register several (type, scalar) pairs at once."""
        for type_, scalar in maps:
            self.register(type_, scalar)

    def find(self, type_: Any) -> GraphQLScalarType | None:
        """Get the scalar registered for a type.

        Args:
            type_ (Any): The python type to look for. Compared by identity.

        Returns:
            GraphQLScalarType | None: The scalar, or None if the type has no registered scalar.
        """
        return next((m.scalar for m in self.__maps if m.type is type_), None)

    def has_scalar(self, type_: Any) -> bool:
        """Check if a scalar is registered for a type."""
        return any(m.type is type_ for m in self.__maps)

    def list_registered_types(self) -> list[Any]:
        """Get all registered types for debugging/introspection."""
        return [m.type for m in self.__maps]

    def clear(self) -> None:
        """Remove all the registered scalars."""
        self.__maps.clear()

    def __iter__(self) -> Iterator[ScalarsTypeMap]:
        return iter(tuple(self.__maps))

    def __len__(self) -> int:
        return len(self.__maps)
