"""Get vote state use case."""

from pydantic import BaseModel

from campus.domain.service import VoteLedger
from campus.domain.value import PostId, UserId, VoteType, parse_uuid


class GetVoteStateRequest(BaseModel):
    """Get vote state request."""

    post_id: str  # UUID string
    user_id: str | None = None  # Current user ID (if authenticated)


class GetVoteStateResponse(BaseModel):
    """Get vote state response."""

    post_id: str
    upvotes: int
    downvotes: int
    user_vote: VoteType | None


class GetVoteStateUseCase:
    """Use case for reading a post's vote counters and the caller's vote."""

    def __init__(self, vote_ledger: VoteLedger) -> None:
        """Initialize get vote state use case.

        Args:
            vote_ledger: Vote ledger domain service
        """
        self.vote_ledger = vote_ledger

    async def execute(self, request: GetVoteStateRequest) -> GetVoteStateResponse:
        """Execute get vote state flow.

        Args:
            request: Post ID and optional caller ID

        Returns:
            Vote counters and the caller's own vote

        Raises:
            InvalidArgumentError: If the post ID is malformed
            NotFoundError: If the post doesn't exist
        """
        post_id = PostId(parse_uuid(request.post_id, "post id"))
        user_id = (
            UserId(parse_uuid(request.user_id, "user id")) if request.user_id else None
        )

        state = await self.vote_ledger.get_vote_state(post_id, user_id)

        return GetVoteStateResponse(
            post_id=str(post_id),
            upvotes=state.upvotes,
            downvotes=state.downvotes,
            user_vote=state.user_vote,
        )
