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
Created: 2025-12-17
Description: Hydration of raw data (deserialized input, dicts, lists of dicts) into instances
            of the declared types. Instances are taken from the user's container when it can
            provide one, otherwise created from the factory registry.
🦙
"""

from __future__ import annotations

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

import inspect
import logging
from collections.abc import Iterable, Mapping
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Final

from graphql import GraphQLScalarType

from .container import ResolverData
from .factories import InstanceFactoryRegistry, instance_factory_registry

_log = logging.getLogger(__name__)

# Values of these types are never hydrated into object instances.
SIMPLE_TYPES: Final[tuple[type, ...]] = (
    str,
    bytes,
    bool,
    int,
    float,
    Decimal,
    datetime,
    date,
    Enum,
)


def is_simple_value(value: Any) -> bool:
    """Check if a value is of a simple kind: primitive, date, enum member or awaitable."""
    return isinstance(value, SIMPLE_TYPES) or inspect.isawaitable(value)


def _fields_of(data: Any) -> Iterable[tuple[str, Any]] | None:
    if isinstance(data, Mapping):
        return data.items()
    if hasattr(data, "__dict__"):
        return vars(data).items()
    return None


def _instance_from_container(target: Any, container: Any, resolver_data: ResolverData) -> Any:
    """Get an instance from the container, None if it cannot provide one."""
    if hasattr(container, "try_get_instance"):
        return container.try_get_instance(target, resolver_data)
    try:
        return container.get_instance(target, resolver_data)
    except Exception as e:  # pylint: disable=broad-except
        _log.debug("Container could not provide an instance of %r: %r", target, e)
        return None


def convert_to_type(
    target: Any,
    data: Any,
    container: Any = None,
    resolver_data: ResolverData | None = None,
    factories: InstanceFactoryRegistry | None = None,
) -> Any:
    """Convert raw data to an instance of target.

    None, scalar targets, simple values, and values already of the target type are returned
    as is. Lists and tuples are converted item by item. Other data has its fields assigned on
    an instance that comes from the container (only when both container and resolver_data are
    given) or, failing that, from the factory registry.
        >>> class Point:
        ...     x: int = 0
        ...     y: int = 0
        >>> p = convert_to_type(Point, {"x": 1})
        >>> (p.x, p.y)
        (1, 0)

    Args:
        target (Any): The type to convert to.
        data (Any): The raw data. Never modified.
        container (Any): Container with `try_get_instance` or `get_instance`, see IOCContainer.
        resolver_data (ResolverData | None): Data of the current request, given to the
            container.
        factories (InstanceFactoryRegistry | None): Factories of default instances. Defaults
            to instance_factory_registry().

    Raises:
        DefaultingInstanceError: Raised if no instance could be obtained nor created.

    Returns:
        Any: The converted value.
    """
    if data is None:
        return data
    # scalars, object scalars mostly, are values on their own.
    if isinstance(target, GraphQLScalarType):
        return data
    if is_simple_value(data):
        return data
    if isinstance(target, type) and isinstance(data, target):
        return data
    if isinstance(data, (list, tuple)):
        items = [
            convert_to_type(target, item, container, resolver_data, factories) for item in data
        ]
        return items if isinstance(data, list) else tuple(items)

    fields = _fields_of(data)
    if fields is None:
        return data

    instance = None
    if container is not None and resolver_data is not None:
        instance = _instance_from_container(target, container, resolver_data)

    if instance is None:
        registry = factories if factories is not None else instance_factory_registry()
        instance = registry.create_instance(target)
        _log.debug("Created a new instance of %r to hydrate.", target)

    for name, value in fields:
        setattr(instance, name, value)
    return instance
