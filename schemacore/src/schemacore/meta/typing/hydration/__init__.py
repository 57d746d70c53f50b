"""Hydration of raw data into typed instances for schemacore."""

from .container import (
    Container,
    ContainerGetter,
    DefaultContainer,
    IOCContainer,
    ResolverData,
)
from .converter import SIMPLE_TYPES, convert_to_type, is_simple_value
from .factories import Factory, InstanceFactoryRegistry, instance_factory_registry

__all__ = [
    # Container access
    "Container",
    "ContainerGetter",
    "DefaultContainer",
    "IOCContainer",
    "ResolverData",
    # Factories
    "Factory",
    "InstanceFactoryRegistry",
    "instance_factory_registry",
    # Main API functions
    "SIMPLE_TYPES",
    "convert_to_type",
    "is_simple_value",
]
