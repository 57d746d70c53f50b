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
Description: Registry of the factories used to create default instances of object types when
            hydrating raw data. Types without a registered factory are called without
            arguments, as long as that is a valid call.
🦙
"""

from __future__ import annotations

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

import logging
from functools import lru_cache
from typing import Any, Callable

from ..errors import DefaultingInstanceError

_log = logging.getLogger(__name__)

type Factory = Callable[[], Any]


class InstanceFactoryRegistry:
    """
    A class to hold the factories of object types. It allows types whose constructor requires
    arguments to still be hydrated.
    """

    __factories: dict[type, Factory]

    def __init__(self) -> None:
        self.__factories = {}

    def register_factory(self, cls: type, factory: Factory) -> None:
        """
        Register the factory creating default instances of a type.

        Args:
            cls (type): The type for which the factory is registered.
            factory (Factory): A function without arguments returning a new instance.
        """
        self.__factories[cls] = factory
        _log.debug("Registered factory %r for %s.", factory, cls.__name__)

    def factory[F: Factory](self, cls: type) -> Callable[[F], F]:
        """Decorator form of register_factory.
            >>> @registry.factory(Point)
            ... def origin() -> Point:
            ...     return Point(0, 0)
        """

        def decorator(factory: F) -> F:
            self.register_factory(cls, factory)
            return factory

        return decorator

    def unregister_factory(self, cls: type) -> None:
        """Remove the factory of a type, if any."""
        self.__factories.pop(cls, None)

    def get_factory(self, cls: type) -> Factory | None:
        """Get the factory registered for a type, or None."""
        return self.__factories.get(cls)

    def has_factory(self, cls: type) -> bool:
        """Check if a factory is registered for a type."""
        return cls in self.__factories

    def list_registered_types(self) -> list[type]:
        """Get all registered types for debugging/introspection."""
        return list(self.__factories.keys())

    def clear(self) -> None:
        """Remove all registered factories."""
        self.__factories.clear()

    def create_instance[T](self, cls: type[T]) -> T:
        """Create a default instance of a type.

        Args:
            cls (type[T]): The type to instantiate.

        Raises:
            DefaultingInstanceError: Raised if no factory is registered and cls() is not a
                valid call.

        Returns:
            T: The new instance.
        """
        factory = self.get_factory(cls)
        if factory is not None:
            return factory()
        try:
            return cls()
        except TypeError as e:
            raise DefaultingInstanceError(
                f"Could not create a default instance of '{cls.__name__}'. {cls.__name__}() is"
                " not a valid default call, register a factory for it.",
                target_name=cls.__name__,
            ) from e


@lru_cache(1)
def instance_factory_registry() -> InstanceFactoryRegistry:
    """Default factory registry used when hydrating data.

    Returns:
        InstanceFactoryRegistry: the registry instance.
    """
    return InstanceFactoryRegistry()
