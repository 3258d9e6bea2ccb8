"""Community post aggregate.

Only the fields the voting subsystem reads are modelled here; the rest of a
post (media, community, comments) is owned by other collaborators.
"""

from datetime import datetime

from pydantic import Field

from campus.domain.model.common import DomainModel
from campus.domain.value import CounterField, PostId, UserId, VoteState, VoteType


class Post(DomainModel):
    """Community forum post.

    Vote counters are denormalized: they are a cache of the post's Vote
    records and change only as a side effect of a vote transition.
    """

    id: PostId
    author_id: UserId
    title: str = Field(min_length=1, max_length=300)
    content: str = Field(default="", max_length=10000)
    upvotes: int = Field(default=0, ge=0)
    downvotes: int = Field(default=0, ge=0)
    comment_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    def counter(self, field: CounterField) -> int:
        """Current value of a post counter."""
        return getattr(self, field.value)

    def vote_state(self, user_vote: VoteType | None = None) -> VoteState:
        """Build the vote state seen by a caller."""
        return VoteState(
            upvotes=self.upvotes, downvotes=self.downvotes, user_vote=user_vote
        )
