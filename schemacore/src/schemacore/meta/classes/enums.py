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
Created: 2025-12-18
Description: Extraction of the name -> value map of enum-like objects.
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

import re
from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any, Final

# Same prefix parseInt accepts: the key "1" of a reverse mapping, but also "1a" or " -2".
_INTEGER_PREFIX: Final = re.compile(r"\s*[+-]?\d")


def is_integer_key(key: Any) -> bool:
    """Check if a key starts like an integer. Such keys come from numeric reverse mappings."""
    return _INTEGER_PREFIX.match(str(key)) is not None


def _raw_items(enum_object: Any) -> Iterable[tuple[Any, Any]]:
    if isinstance(enum_object, Mapping):
        return enum_object.items()
    if isinstance(enum_object, type) and issubclass(enum_object, Enum):
        return ((name, member.value) for name, member in enum_object.__members__.items())
    return ((k, v) for k, v in vars(enum_object).items() if not str(k).startswith("_"))


def get_enum_values_map(enum_object: Any) -> dict[str, Any]:
    """Get the name -> value map of an enum-like object, in declaration order.

    Keys that read as integers are dropped: they are the value -> name entries of numeric
    enums. The check is made on the raw keys only.
        >>> get_enum_values_map({"A": 0, "B": 1, "0": "A", "1": "B"})
        {'A': 0, 'B': 1}

    Args:
        enum_object (Any): A mapping, an Enum class, or a class whose public attributes are
            the members.

    Returns:
        dict[str, Any]: The values by name.
    """
    return {key: value for key, value in _raw_items(enum_object) if not is_integer_key(key)}
