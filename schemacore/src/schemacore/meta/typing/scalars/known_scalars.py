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
Created: 2025-12-16
Description: Date scalars mapped from `datetime`. GraphQLISODateTime exchanges ISO 8601 strings,
            GraphQLTimestamp exchanges milliseconds since the epoch.
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

from datetime import datetime, timezone
from typing import Any

from graphql import GraphQLError, GraphQLScalarType
from graphql.language import IntValueNode, StringValueNode, ValueNode


def _ensure_datetime(value: Any, scalar_name: str) -> datetime:
    if not isinstance(value, datetime):
        raise GraphQLError(f"{scalar_name} cannot represent non-datetime value: {value!r}")
    return value


# ISO 8601


def serialize_iso_datetime(value: Any) -> str:
    """Serialize a datetime to an ISO 8601 string."""
    return _ensure_datetime(value, "GraphQLISODateTime").isoformat()


def parse_iso_datetime_value(value: Any) -> datetime:
    """Parse an ISO 8601 string to a datetime.

    Raises:
        GraphQLError: Raised if the value is not a valid ISO 8601 string.
    """
    if not isinstance(value, str):
        raise GraphQLError(f"GraphQLISODateTime cannot represent non-string value: {value!r}")
    try:
        return datetime.fromisoformat(value)
    except ValueError as e:
        raise GraphQLError(f"GraphQLISODateTime cannot represent an invalid date: {value!r}") from e


def parse_iso_datetime_literal(
    value_node: ValueNode, _variables: dict[str, Any] | None = None
) -> datetime:
    """Parse an ISO 8601 string literal to a datetime."""
    if not isinstance(value_node, StringValueNode):
        raise GraphQLError("GraphQLISODateTime can only parse string values.", value_node)
    return parse_iso_datetime_value(value_node.value)


GraphQLISODateTime = GraphQLScalarType(
    name="DateTimeISO",
    description=(
        "A date-time string at UTC, such as 2007-12-03T10:15:30Z, compliant with the"
        " `date-time` format outlined in section 5.6 of the RFC 3339 profile of the"
        " ISO 8601 standard for representation of dates and times using the Gregorian calendar."
    ),
    serialize=serialize_iso_datetime,
    parse_value=parse_iso_datetime_value,
    parse_literal=parse_iso_datetime_literal,
)


# Timestamp


def serialize_timestamp(value: Any) -> int:
    """Serialize a datetime to milliseconds since the epoch."""
    return int(_ensure_datetime(value, "GraphQLTimestamp").timestamp() * 1000)


def parse_timestamp_value(value: Any) -> datetime:
    """Parse milliseconds since the epoch to an aware UTC datetime."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise GraphQLError(f"GraphQLTimestamp cannot represent non-integer value: {value!r}")
    return datetime.fromtimestamp(value / 1000, tz=timezone.utc)


def parse_timestamp_literal(
    value_node: ValueNode, _variables: dict[str, Any] | None = None
) -> datetime:
    """Parse an integer literal to an aware UTC datetime."""
    if not isinstance(value_node, IntValueNode):
        raise GraphQLError("GraphQLTimestamp can only parse integer values.", value_node)
    return parse_timestamp_value(int(value_node.value))


GraphQLTimestamp = GraphQLScalarType(
    name="Timestamp",
    description=(
        "The javascript `Date` as integer. Type represents date and time as number of"
        " milliseconds from start of UNIX epoch."
    ),
    serialize=serialize_timestamp,
    parse_value=parse_timestamp_value,
    parse_literal=parse_timestamp_literal,
)
