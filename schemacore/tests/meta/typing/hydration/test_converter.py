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
Description: Tests for the hydration of raw data into typed instances.
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

import asyncio
import logging
from datetime import datetime
from decimal import Decimal
from enum import Enum
from types import SimpleNamespace
from unittest.mock import MagicMock

from graphql import GraphQLString

import pytest

from schemacore.config import build_context
from schemacore.exceptions import DefaultingInstanceError
from schemacore.hydration import (
    InstanceFactoryRegistry,
    IOCContainer,
    ResolverData,
    convert_to_type,
    instance_factory_registry,
    is_simple_value,
)


class RecipeInput:
    """Test"""

    title: str = ""
    rating: float = 0.0


class Ingredient:
    """Test"""

    def __init__(self, name: str) -> None:
        self.name = name


class Color(Enum):
    """Test"""

    RED = 0


RESOLVER_DATA = ResolverData(root=None, args={}, context={"user": "me"}, info=None)


# =============================================================================
# Pass-through Tests
# =============================================================================


class TestPassThrough:
    """Test the values that are never hydrated."""

    def test_none_is_propagated(self):
        """Test that None is returned, never a default instance."""
        assert convert_to_type(RecipeInput, None) is None

    def test_scalar_target(self):
        """Test that data for a scalar target is returned as is."""
        data = {"title": "Soup"}

        assert convert_to_type(GraphQLString, data) is data

    def test_simple_values(self):
        """Test that primitive, date, decimal and enum values are returned as is."""
        values = [42, 4.2, "soup", True, b"raw", Decimal("1.5"), datetime(2025, 1, 1), Color.RED]
        for value in values:
            assert convert_to_type(RecipeInput, value) is value

    def test_awaitable_is_deferred_value(self):
        """Test that awaitables are returned as is."""

        async def later() -> dict[str, str]:
            return {"title": "Soup"}

        coroutine = later()
        try:
            assert convert_to_type(RecipeInput, coroutine) is coroutine
        finally:
            coroutine.close()

    def test_future_is_deferred_value(self):
        """Test that futures are returned as is."""
        loop = asyncio.new_event_loop()
        try:
            future = loop.create_future()
            assert convert_to_type(RecipeInput, future) is future
        finally:
            loop.close()

    def test_already_converted(self):
        """Test that an instance of the target is returned as is."""
        recipe = RecipeInput()

        assert convert_to_type(RecipeInput, recipe) is recipe

    def test_is_simple_value(self):
        """Test the simple value detection."""
        assert is_simple_value(1)
        assert is_simple_value("a")
        assert not is_simple_value({"a": 1})
        assert not is_simple_value([1])


# =============================================================================
# Instantiation Tests
# =============================================================================


class TestInstantiation:
    """Test the creation of instances from field mappings."""

    def test_fields_assigned_on_new_instance(self):
        """Test that every field of the data is assigned on a new instance."""
        recipe = convert_to_type(RecipeInput, {"title": "Soup", "rating": 4.5})

        assert isinstance(recipe, RecipeInput)
        assert recipe.title == "Soup"
        assert recipe.rating == 4.5

    def test_unknown_fields_are_assigned(self):
        """Test that fields not declared on the class are assigned too."""
        recipe = convert_to_type(RecipeInput, {"extra": 1})

        assert recipe.extra == 1  # type: ignore
        assert recipe.title == ""

    def test_data_not_mutated(self):
        """Test that the raw data is left untouched."""
        data = {"title": "Soup"}

        convert_to_type(RecipeInput, data)

        assert data == {"title": "Soup"}

    def test_nested_values_shared(self):
        """Test that merged values are shallow copies: nested objects are shared."""
        tags = ["hot"]

        recipe = convert_to_type(RecipeInput, {"tags": tags})

        assert recipe.tags is tags  # type: ignore

    def test_object_with_attributes(self):
        """Test that objects with attributes are hydrated from their attributes."""
        recipe = convert_to_type(RecipeInput, SimpleNamespace(title="Soup"))

        assert isinstance(recipe, RecipeInput)
        assert recipe.title == "Soup"

    def test_data_without_fields_returned_as_is(self):
        """Test that data having no fields is not hydrated."""
        data = frozenset({1, 2})

        assert convert_to_type(RecipeInput, data) is data

    def test_idempotence(self):
        """Test that converting twice is the same as converting once."""
        once = convert_to_type(RecipeInput, {"title": "Soup"})

        assert convert_to_type(RecipeInput, once) is once

    def test_registered_factory(self):
        """Test that a registered factory is used for types needing arguments."""
        instance_factory_registry().register_factory(Ingredient, lambda: Ingredient("salt"))

        ingredient = convert_to_type(Ingredient, {"quantity": 2})

        assert ingredient.name == "salt"
        assert ingredient.quantity == 2  # type: ignore

    def test_explicit_factories(self):
        """Test that an explicit factory registry replaces the default one."""
        factories = InstanceFactoryRegistry()
        factories.register_factory(Ingredient, lambda: Ingredient("pepper"))

        ingredient = convert_to_type(Ingredient, {}, factories=factories)

        assert ingredient.name == "pepper"

    def test_missing_factory_raises(self):
        """Test that a type that cannot be defaulted raises."""
        with pytest.raises(DefaultingInstanceError) as exc_info:
            convert_to_type(Ingredient, {"name": "salt"})

        assert "Ingredient" in str(exc_info.value)


# =============================================================================
# Sequences Tests
# =============================================================================


class TestSequences:
    """Test the conversion of lists and tuples."""

    def test_list_converted_item_by_item(self):
        """Test that each item is converted and order is kept."""
        data = [{"title": "Soup"}, {"title": "Cake"}]

        recipes = convert_to_type(RecipeInput, data)

        assert isinstance(recipes, list)
        assert [r.title for r in recipes] == ["Soup", "Cake"]
        assert all(isinstance(r, RecipeInput) for r in recipes)

    def test_list_items_match_single_conversion(self):
        """Test that converting a list equals converting each item."""
        a, b = {"title": "Soup", "rating": 1.0}, {"title": "Cake", "rating": 5.0}

        recipes = convert_to_type(RecipeInput, [a, b])
        singles = [convert_to_type(RecipeInput, a), convert_to_type(RecipeInput, b)]

        assert [vars(r) for r in recipes] == [vars(s) for s in singles]

    def test_nested_lists(self):
        """Test that lists of lists are converted recursively."""
        recipes = convert_to_type(RecipeInput, [[{"title": "Soup"}], [], [None]])

        assert isinstance(recipes[0][0], RecipeInput)
        assert recipes[1] == []
        assert recipes[2] == [None]

    def test_tuple_stays_tuple(self):
        """Test that tuples are converted to tuples."""
        recipes = convert_to_type(RecipeInput, ({"title": "Soup"},))

        assert isinstance(recipes, tuple)
        assert recipes[0].title == "Soup"

    def test_list_of_scalars(self):
        """Test that simple items of a list are kept."""
        assert convert_to_type(RecipeInput, [1, "a", None]) == [1, "a", None]

    def test_new_list_returned(self):
        """Test that the input list is not modified."""
        data = [{"title": "Soup"}]

        recipes = convert_to_type(RecipeInput, data)

        assert recipes is not data
        assert data == [{"title": "Soup"}]


# =============================================================================
# Container Tests
# =============================================================================


class TestContainer:
    """Test instances provided by a container."""

    def test_instance_from_container(self):
        """Test that the container instance is hydrated and returned."""
        provided = RecipeInput()
        container = MagicMock(spec=["get_instance"])
        container.get_instance.return_value = provided

        recipe = convert_to_type(RecipeInput, {"title": "Soup"}, container, RESOLVER_DATA)

        assert recipe is provided
        assert recipe.title == "Soup"
        container.get_instance.assert_called_once_with(RecipeInput, RESOLVER_DATA)

    def test_container_failure_falls_back_to_default(self):
        """Test that a failing container lookup creates a default instance."""
        container = MagicMock(spec=["get_instance"])
        container.get_instance.side_effect = LookupError("not registered")

        recipe = convert_to_type(RecipeInput, {"x": 1}, container, RESOLVER_DATA)

        assert isinstance(recipe, RecipeInput)
        assert recipe.x == 1  # type: ignore

    def test_container_failure_is_logged(self, caplog):
        """Test that the swallowed container error is logged at debug level."""
        container = MagicMock(spec=["get_instance"])
        container.get_instance.side_effect = LookupError("not registered")

        with caplog.at_level(logging.DEBUG):
            convert_to_type(RecipeInput, {"x": 1}, container, RESOLVER_DATA)

        assert "not registered" in caplog.text

    def test_container_returning_none(self):
        """Test that a container returning None falls back to default construction."""
        container = MagicMock(spec=["get_instance"])
        container.get_instance.return_value = None

        recipe = convert_to_type(RecipeInput, {"title": "Soup"}, container, RESOLVER_DATA)

        assert isinstance(recipe, RecipeInput)

    def test_container_requires_resolver_data(self):
        """Test that the container is not used without resolver data."""
        container = MagicMock(spec=["get_instance"])

        recipe = convert_to_type(RecipeInput, {"title": "Soup"}, container)

        assert isinstance(recipe, RecipeInput)
        container.get_instance.assert_not_called()

    def test_ioc_container_adapter(self):
        """Test hydration through an IOCContainer wrapping a failing user container."""
        user_container = MagicMock(spec=["get"])
        user_container.get.side_effect = KeyError("RecipeInput")

        recipe = convert_to_type(
            RecipeInput, {"title": "Soup"}, IOCContainer(user_container), RESOLVER_DATA
        )

        assert isinstance(recipe, RecipeInput)
        user_container.get.assert_called_once_with(RecipeInput, RESOLVER_DATA)

    def test_container_used_for_each_list_item(self):
        """Test that the container is queried for every item of a list."""
        container = MagicMock(spec=["get_instance"])
        container.get_instance.side_effect = lambda target, _: target()

        recipes = convert_to_type(
            RecipeInput, [{"title": "Soup"}, {"title": "Cake"}], container, RESOLVER_DATA
        )

        assert container.get_instance.call_count == 2
        assert recipes[0] is not recipes[1]

    def test_configured_default_container_gives_independent_instances(self):
        """Test that hydrations through the build context container do not share instances."""
        container = build_context().container

        soup = convert_to_type(
            RecipeInput, {"title": "Soup", "secret": 1}, container, RESOLVER_DATA
        )
        cake = convert_to_type(RecipeInput, {"title": "Cake"}, container, RESOLVER_DATA)

        assert soup is not cake
        assert soup.title == "Soup"
        assert cake.title == "Cake"
        assert not hasattr(cake, "secret")
