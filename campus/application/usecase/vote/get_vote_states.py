"""Get vote states use case (batch)."""

from pydantic import BaseModel, Field

from campus.domain.service import VoteLedger
from campus.domain.value import PostId, UserId, VoteType, parse_uuid

MAX_BATCH_SIZE = 100


class GetVoteStatesRequest(BaseModel):
    """Get vote states request."""

    post_ids: list[str] = Field(min_length=1, max_length=MAX_BATCH_SIZE)
    user_id: str | None = None  # Current user ID (if authenticated)


class PostVoteState(BaseModel):
    """Vote state of one post."""

    post_id: str
    upvotes: int
    downvotes: int
    user_vote: VoteType | None


class GetVoteStatesResponse(BaseModel):
    """Get vote states response.

    Posts that don't exist are left out.
    """

    votes: list[PostVoteState]


class GetVoteStatesUseCase:
    """Use case for reading vote state for a page of posts."""

    def __init__(self, vote_ledger: VoteLedger) -> None:
        """Initialize get vote states use case.

        Args:
            vote_ledger: Vote ledger domain service
        """
        self.vote_ledger = vote_ledger

    async def execute(self, request: GetVoteStatesRequest) -> GetVoteStatesResponse:
        """Execute get vote states flow.

        Args:
            request: Post IDs and optional caller ID

        Returns:
            Vote states in request order

        Raises:
            InvalidArgumentError: If any ID is malformed
        """
        post_ids = [PostId(parse_uuid(pid, "post id")) for pid in request.post_ids]
        user_id = (
            UserId(parse_uuid(request.user_id, "user id")) if request.user_id else None
        )

        states = await self.vote_ledger.get_vote_states(post_ids, user_id)

        # Preserve request order, skip duplicates and unknown posts
        votes = [
            PostVoteState(
                post_id=str(post_id),
                upvotes=states[post_id].upvotes,
                downvotes=states[post_id].downvotes,
                user_vote=states[post_id].user_vote,
            )
            for post_id in dict.fromkeys(post_ids)
            if post_id in states
        ]

        return GetVoteStatesResponse(votes=votes)
