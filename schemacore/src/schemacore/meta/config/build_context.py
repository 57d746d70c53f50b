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
Description: Options shared by the whole schema build: custom scalars, default nullability,
            date scalar and container. The schema building layer sets them once with
            `build_context().create(...)` before declaring types.
🦙
"""

from __future__ import annotations

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

import logging
from collections.abc import Iterable
from functools import lru_cache
from typing import Any, Final, Literal

from graphql import GraphQLScalarType

from ..typing.errors import InvalidTypeOptionsError
from ..typing.hydration.container import IOCContainer
from ..typing.scalars.registry import ScalarsRegistry

_log = logging.getLogger(__name__)

type DateScalarMode = Literal["isoDate", "timestamp"]

ISO_DATE_MODE: Final = "isoDate"
TIMESTAMP_DATE_MODE: Final = "timestamp"
DATE_SCALAR_MODES: Final[tuple[str, ...]] = (ISO_DATE_MODE, TIMESTAMP_DATE_MODE)


class BuildContext:
    """Build options. Every option not given to `create` keeps its current value."""

    scalars_map: ScalarsRegistry
    nullable_by_default: bool
    date_scalar_mode: DateScalarMode
    container: IOCContainer

    def __init__(self) -> None:
        self.reset()

    def create(
        self,
        *,
        scalars_map: ScalarsRegistry | Iterable[tuple[Any, GraphQLScalarType]] | None = None,
        nullable_by_default: bool | None = None,
        date_scalar_mode: DateScalarMode | None = None,
        container: Any = None,
    ) -> None:
        """Set the build options.

        Args:
            scalars_map: Custom scalars, as a registry or as (type, scalar) pairs.
            nullable_by_default (bool | None): Nullability of fields that leave it unset.
            date_scalar_mode (DateScalarMode | None): Scalar used for datetime.
            container (Any): An IOCContainer, or anything IOCContainer accepts.

        Raises:
            InvalidTypeOptionsError: Raised for an unknown date scalar mode.
        """
        if date_scalar_mode is not None:
            if date_scalar_mode not in DATE_SCALAR_MODES:
                raise InvalidTypeOptionsError(
                    f"Unknown date scalar mode '{date_scalar_mode}'. Expected one of"
                    f" {DATE_SCALAR_MODES}.",
                    date_scalar_mode=date_scalar_mode,
                )
            self.date_scalar_mode = date_scalar_mode
        if scalars_map is not None:
            self.scalars_map = (
                scalars_map
                if isinstance(scalars_map, ScalarsRegistry)
                else ScalarsRegistry(scalars_map)
            )
        if nullable_by_default is not None:
            self.nullable_by_default = nullable_by_default
        if container is not None:
            self.container = (
                container if isinstance(container, IOCContainer) else IOCContainer(container)
            )
        _log.debug(
            "Build context set: nullable_by_default=%s, date_scalar_mode=%s, %d custom scalars.",
            self.nullable_by_default,
            self.date_scalar_mode,
            len(self.scalars_map),
        )

    def reset(self) -> None:
        """Restore the default options."""
        self.scalars_map = ScalarsRegistry()
        self.nullable_by_default = False
        self.date_scalar_mode = ISO_DATE_MODE
        self.container = IOCContainer()
        _log.debug("Build context reset.")


@lru_cache(1)
def build_context() -> BuildContext:
    """Process wide build context.

    Returns:
        BuildContext: the build context instance.
    """
    return BuildContext()
