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
Description: Access to the dependency injection container of the user. This includes:
            - ResolverData: the per request data given to the container.
            - Container: the protocol a user container has to follow.
            - DefaultContainer: used when the user provides no container.
            - IOCContainer: adapter over a container, or over a function returning a
              container for the request.
🦙
"""

from __future__ import annotations

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

import logging
from collections.abc import Mapping
from typing import Any, Callable, NamedTuple, Protocol, runtime_checkable

_log = logging.getLogger(__name__)


class ResolverData(NamedTuple):
    """Data of the resolver being executed. Given to containers to resolve per request
    instances."""

    root: Any = None
    args: Any = None
    context: Any = None
    info: Any = None


@runtime_checkable
class Container(Protocol):
    """Protocol of a container able to provide instances of a type for a request."""

    def get_instance(self, target: Any, resolver_data: ResolverData, /) -> Any: ...


type ContainerGetter = Callable[[ResolverData], Any]


class DefaultContainer:
    """Container used when none is provided. Holds a single instance per class, created on
    first request with a call to the class."""

    __instances: dict[type, Any]

    def __init__(self) -> None:
        self.__instances = {}

    def get[T](self, cls: type[T]) -> T:
        """Get the instance of a class, creating it if needed."""
        if cls not in self.__instances:
            self.__instances[cls] = cls()
        return self.__instances[cls]

    def clear(self) -> None:
        """Forget all the created instances."""
        self.__instances.clear()


def _is_supported_container(value: Any) -> bool:
    # a mapping has `get`, but not the (cls, resolver_data) one of a container.
    if isinstance(value, Mapping):
        return False
    return hasattr(value, "get_instance") or hasattr(value, "get")


class IOCContainer:
    """Adapter giving a single access point to the user's container.

    Accepts either a container (an object with `get_instance(cls, resolver_data)` or
    `get(cls, resolver_data)`) or a callable receiving the resolver data and returning the
    container for the request. Without any, a DefaultContainer is used.
    """

    def __init__(self, container_or_getter: Any = None) -> None:
        self._container: Any = None
        self._container_getter: ContainerGetter | None = None
        self._default_container = DefaultContainer()

        if container_or_getter is None:
            return
        if _is_supported_container(container_or_getter):
            self._container = container_or_getter
        elif callable(container_or_getter):
            self._container_getter = container_or_getter
        else:
            raise TypeError(
                f"Unsupported container '{container_or_getter!r}'. Expected an object with"
                " a 'get_instance' or 'get' method, or a callable returning one."
            )

    @property
    def has_user_container(self) -> bool:
        """Whether a container or a container getter was provided."""
        return self._container is not None or self._container_getter is not None

    def get_instance(self, target: Any, resolver_data: ResolverData) -> Any:
        """Get an instance of target from the container. Errors of the container propagate.

        Args:
            target (Any): The type of the requested instance.
            resolver_data (ResolverData): The data of the current request.

        Returns:
            Any: The instance.
        """
        container = self._request_container(resolver_data)
        if container is None:
            return self._default_container.get(target)
        return self._get_from(container, target, resolver_data)

    def try_get_instance(self, target: Any, resolver_data: ResolverData) -> Any | None:
        """Get an instance of target from the user's container, or None if there is no user
        container for the request or it cannot provide one.

        The default container is never used here: its instances are shared by every request,
        hydrating into them would leak the fields of one request into the others.

        Args:
            target (Any): The type of the requested instance.
            resolver_data (ResolverData): The data of the current request.

        Returns:
            Any | None: The instance, or None.
        """
        try:
            container = self._request_container(resolver_data)
            if container is None:
                return None
            return self._get_from(container, target, resolver_data)
        except Exception as e:  # pylint: disable=broad-except
            _log.debug(
                "Container could not provide an instance of %s: %r", _type_name(target), e
            )
            return None

    def _request_container(self, resolver_data: ResolverData) -> Any:
        if self._container_getter is not None:
            return self._container_getter(resolver_data)
        return self._container

    @staticmethod
    def _get_from(container: Any, target: Any, resolver_data: ResolverData) -> Any:
        if hasattr(container, "get_instance"):
            return container.get_instance(target, resolver_data)
        return container.get(target, resolver_data)


def _type_name(target: Any) -> str:
    return getattr(target, "__name__", repr(target))
