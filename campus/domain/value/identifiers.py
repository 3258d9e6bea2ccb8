"""Strongly typed identifiers for marketplace domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

from campus.domain.error import InvalidArgumentError

# Core domain entity identifiers
UserId = NewType("UserId", UUID)
PostId = NewType("PostId", UUID)
VoteId = NewType("VoteId", UUID)


def parse_uuid(value: str | UUID, kind: str = "id") -> UUID:
    """Parse an incoming identifier string.

    Args:
        value: Raw identifier (string from the request, or an existing UUID)
        kind: Human-readable name used in the error message

    Returns:
        Parsed UUID

    Raises:
        InvalidArgumentError: If the value is not a well-formed UUID
    """
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except (TypeError, ValueError):
        raise InvalidArgumentError(f"Malformed {kind}: {value!r}")
