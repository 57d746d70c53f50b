"""
Re-export build context module for cleaner imports.

This allows: from schemacore.config import build_context
Instead of: from schemacore.meta.config.build_context import build_context
"""

from .meta.config.build_context import (
    DATE_SCALAR_MODES,
    ISO_DATE_MODE,
    TIMESTAMP_DATE_MODE,
    BuildContext,
    DateScalarMode,
    build_context,
)

__all__ = [
    "DATE_SCALAR_MODES",
    "ISO_DATE_MODE",
    "TIMESTAMP_DATE_MODE",
    "BuildContext",
    "DateScalarMode",
    "build_context",
]
