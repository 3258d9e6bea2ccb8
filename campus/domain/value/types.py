"""Domain value objects for community voting.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import Field

from campus.domain.error import InvalidArgumentError
from campus.domain.value.common import ValueObject


class CounterField(str, Enum):
    """Allow-list of counter columns that may be adjusted by one.

    Counter mutations are built from this enum only, never from raw
    request input.
    """

    UPVOTES = "upvotes"
    DOWNVOTES = "downvotes"
    COMMENT_COUNT = "comment_count"
    MEMBER_COUNT = "member_count"
    POST_COUNT = "post_count"
    TOTAL_REVIEWS = "total_reviews"
    UNREAD_BY_BUYER = "unread_by_buyer"
    UNREAD_BY_SELLER = "unread_by_seller"


# Counters stored on community posts
POST_COUNTERS = frozenset(
    {CounterField.UPVOTES, CounterField.DOWNVOTES, CounterField.COMMENT_COUNT}
)


class VoteType(str, Enum):
    """Polarity of a vote on a community post."""

    UPVOTE = "upvote"
    DOWNVOTE = "downvote"

    @property
    def counter_field(self) -> CounterField:
        """Post counter that tracks votes of this polarity."""
        if self is VoteType.UPVOTE:
            return CounterField.UPVOTES
        return CounterField.DOWNVOTES

    @classmethod
    def parse(cls, value: Any) -> "VoteType":
        """Parse a requested polarity.

        Raises:
            InvalidArgumentError: If value is not 'upvote' or 'downvote'
        """
        try:
            return cls(value)
        except ValueError:
            raise InvalidArgumentError(
                f"Invalid vote type {value!r} (expected 'upvote' or 'downvote')"
            )


class VoteResolution(str, Enum):
    """How a cast vote was resolved against the voter's existing vote."""

    CREATED = "created"  # No prior vote
    REMOVED = "removed"  # Same polarity cast again (toggle-off)
    SWITCHED = "switched"  # Opposite polarity replaced the prior vote


class VoteState(ValueObject):
    """Aggregate vote counters of a post plus the caller's own polarity."""

    upvotes: int = Field(ge=0)
    downvotes: int = Field(ge=0)
    user_vote: Optional[VoteType] = None
