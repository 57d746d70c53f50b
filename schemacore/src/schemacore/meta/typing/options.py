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
Description: Modifier options declared for a field: list nesting and nullability. Also provides
            the two nullability predicates used when wrapping a type:
            - is_items_nullable: whether the innermost list items may be null.
            - is_outer_non_null: whether the whole field (list or value) is non-null.
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

from typing import Final, Literal, NamedTuple, Self

from .errors import InvalidTypeOptionsError

type NullableListMode = Literal["items", "itemsAndList"]
type NullableMode = bool | NullableListMode | None

ITEMS: Final = "items"
ITEMS_AND_LIST: Final = "itemsAndList"
NULLABLE_LIST_MODES: Final[tuple[str, ...]] = (ITEMS, ITEMS_AND_LIST)


class TypeOptions(NamedTuple):
    """Modifiers declared for a single field.

    `nullable` is None when the declaration leaves nullability unset, in which case the
    `nullable_by_default` build option decides. `array_depth` is only read when `array` is True.
        >>> TypeOptions(array=True, array_depth=2, nullable="items")
        TypeOptions(array=True, array_depth=2, nullable='items')
    """

    array: bool = False
    array_depth: int = 1
    nullable: NullableMode = None

    @classmethod
    def create(
        cls, array: bool = False, array_depth: int = 1, nullable: NullableMode = None
    ) -> Self:
        """Create type options, rejecting values the wrapper cannot interpret.

        Raises:
            InvalidTypeOptionsError: Raised for an unknown nullable mode or a negative depth.
        """
        # bool first: True == 1 would otherwise compare equal to other values.
        if not (
            nullable is None
            or isinstance(nullable, bool)
            or nullable in NULLABLE_LIST_MODES
        ):
            raise InvalidTypeOptionsError(
                f"Unknown nullable option '{nullable}'. Expected None, True, False,"
                f" '{ITEMS}' or '{ITEMS_AND_LIST}'.",
                nullable=nullable,
            )
        if isinstance(array_depth, bool) or not isinstance(array_depth, int) or array_depth < 0:
            raise InvalidTypeOptionsError(
                f"Array depth must be a non negative integer, got '{array_depth}'.",
                array_depth=array_depth,
            )
        return cls(array=bool(array), array_depth=array_depth, nullable=nullable)

    @property
    def has_nullable_list_mode(self) -> bool:
        """Whether nullability targets list items ('items' or 'itemsAndList')."""
        return isinstance(self.nullable, str) and self.nullable in NULLABLE_LIST_MODES


def is_items_nullable(type_options: TypeOptions, nullable_by_default: bool) -> bool:
    """Whether the innermost list items may be null."""
    return type_options.has_nullable_list_mode or (
        type_options.nullable is None and nullable_by_default is True
    )


def is_outer_non_null(type_options: TypeOptions, nullable_by_default: bool) -> bool:
    """Whether the whole field must be wrapped as non-null.

    'items' makes only the items nullable, the list itself stays non-null. Only 'itemsAndList'
    releases the list.
    """
    return (
        type_options.nullable is False
        or (type_options.nullable is None and nullable_by_default is False)
        or type_options.nullable == ITEMS
    )
