"""Errors raised while resolving declared types and hydrating data into them."""

from typing import Any

from ...abstract.exceptions.traced_exceptions import TracedException


class TypingError(TracedException):
    """Signals an error related to type resolution."""


class WrongNullableListOptionError(TypingError):
    """Signals that item level nullability was requested on a field that is not a list."""

    def __init__(self, target_name: str, property_name: str, nullable: Any) -> None:
        super().__init__(
            f"Wrong nullable option set for {target_name}#{property_name}. "
            f"You cannot combine non-list type with nullable '{nullable}'.",
            target_name=target_name,
            property_name=property_name,
            nullable=nullable,
        )
        self.target_name = target_name
        self.property_name = property_name
        self.nullable = nullable


# Declaration time mistakes are configuration errors.
ConfigurationError = WrongNullableListOptionError


class InvalidTypeOptionsError(TypingError):
    """Signals malformed type options (unknown nullable mode, negative depth...)."""


class DefaultingInstanceError(TypingError):
    """Signals an error while attempting to create a default instance of a type."""
