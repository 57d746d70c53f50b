"""Shared fixtures: every test starts from a fresh build context and factory registry."""

import pytest

from schemacore.config import build_context
from schemacore.hydration import instance_factory_registry


@pytest.fixture(autouse=True)
def fresh_build_state():
    """Reset the process wide build context and factories around each test."""
    build_context().reset()
    instance_factory_registry().clear()
    yield
    build_context().reset()
    instance_factory_registry().clear()
