"""
Re-export hydration module for cleaner imports.

This allows: from schemacore.hydration import convert_to_type
Instead of: from schemacore.meta.typing.hydration.converter import convert_to_type
"""

from .meta.typing.hydration import (
    Container,
    DefaultContainer,
    InstanceFactoryRegistry,
    IOCContainer,
    ResolverData,
    convert_to_type,
    instance_factory_registry,
    is_simple_value,
)

__all__ = [
    "Container",
    "DefaultContainer",
    "InstanceFactoryRegistry",
    "IOCContainer",
    "ResolverData",
    "convert_to_type",
    "instance_factory_registry",
    "is_simple_value",
]
