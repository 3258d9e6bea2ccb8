"""Get user vote use case."""

from pydantic import BaseModel

from campus.domain.service import VoteLedger
from campus.domain.value import PostId, UserId, VoteType, parse_uuid


class GetUserVoteRequest(BaseModel):
    """Get user vote request."""

    post_id: str
    user_id: str | None = None


class GetUserVoteResponse(BaseModel):
    """Get user vote response."""

    post_id: str
    vote_type: VoteType | None


class GetUserVoteUseCase:
    """Use case for reading the caller's own vote on a post."""

    def __init__(self, vote_ledger: VoteLedger) -> None:
        self.vote_ledger = vote_ledger

    async def execute(self, request: GetUserVoteRequest) -> GetUserVoteResponse:
        """Execute get user vote flow.

        Raises:
            UnauthenticatedError: If no user is attached to the request
            InvalidArgumentError: If an ID is malformed
        """
        post_id = PostId(parse_uuid(request.post_id, "post id"))
        user_id = (
            UserId(parse_uuid(request.user_id, "user id")) if request.user_id else None
        )

        vote_type = await self.vote_ledger.get_user_vote(post_id, user_id)

        return GetUserVoteResponse(post_id=str(post_id), vote_type=vote_type)
