"""Domain value objects for the campus marketplace."""

from campus.domain.value.identifiers import PostId, UserId, VoteId, parse_uuid
from campus.domain.value.types import (
    POST_COUNTERS,
    CounterField,
    VoteResolution,
    VoteState,
    VoteType,
)

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "VoteId",
    "parse_uuid",
    # Types
    "CounterField",
    "POST_COUNTERS",
    "VoteType",
    "VoteResolution",
    "VoteState",
]
