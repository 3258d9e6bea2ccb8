"""Vote entity.

A vote is one voter's current stance on one community post.
"""

from datetime import datetime

from pydantic import Field

from campus.domain.model.common import DomainModel
from campus.domain.value import PostId, UserId, VoteId, VoteType


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - At most one vote per (post, voter), also enforced by a unique constraint
    - Casting the same polarity again removes the vote (toggle-off)
    - Casting the opposite polarity flips the existing vote in place
    """

    id: VoteId
    post_id: PostId
    user_id: UserId
    vote_type: VoteType
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
