"""
schemacore: Type modifiers resolution and object hydration for graph schemas.

This library provides:
- Scalar resolution of declared python types, with a registry of custom scalars
- Wrapping of resolved types with list and non-null modifiers
- Hydration of raw data into typed instances, through a dependency injection container
- Name -> value maps of enum-like objects
- TracedException for enhanced exception formatting
"""

__version__ = "0.1.0"
__author__ = "Sébastien Gachoud"
__license__ = "MIT"

__all__ = [
    # Version info
    "__version__",
    "__author__",
    "__license__",
]
