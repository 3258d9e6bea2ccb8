"""Cast vote use case."""

from typing import Any

from pydantic import BaseModel

from campus.application.usecase.base import BaseUseCase
from campus.domain.error import UnauthenticatedError
from campus.domain.service import VoteLedger
from campus.domain.value import PostId, UserId, VoteType, parse_uuid


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    post_id: str  # UUID string
    vote_type: Any  # 'upvote' or 'downvote', validated by the ledger
    user_id: str | None = None  # User ID from authenticated user


class VoteSummary(BaseModel):
    """Post vote counters after the cast."""

    upvotes: int
    downvotes: int
    user_vote: VoteType | None


class CastVoteResponse(BaseModel):
    """Cast vote response.

    ``vote_id`` and ``vote_type`` are None when the cast removed the vote.
    """

    post_id: str
    vote_id: str | None
    vote_type: VoteType | None
    votes: VoteSummary
    message: str


class CastVoteUseCase(BaseUseCase):
    """Use case for upvoting or downvoting a community post."""

    def __init__(self, vote_ledger: VoteLedger) -> None:
        """Initialize cast vote use case.

        Args:
            vote_ledger: Vote ledger domain service
        """
        self.vote_ledger = vote_ledger

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Args:
            request: Cast vote request

        Returns:
            The resulting vote (if any) and the post's updated counters

        Raises:
            UnauthenticatedError: If no user is attached to the request
            InvalidArgumentError: If an ID is malformed or the vote type is unknown
            NotFoundError: If the post doesn't exist
            StorageFailureError: If the vote could not be stored
        """
        if not request.user_id:
            raise UnauthenticatedError()

        user_id = UserId(parse_uuid(request.user_id, "user id"))
        post_id = PostId(parse_uuid(request.post_id, "post id"))

        vote = await self.vote_ledger.cast_vote(user_id, post_id, request.vote_type)
        state = await self.vote_ledger.get_vote_state(post_id, user_id)

        return CastVoteResponse(
            post_id=str(post_id),
            vote_id=str(vote.id) if vote else None,
            vote_type=vote.vote_type if vote else None,
            votes=VoteSummary(
                upvotes=state.upvotes,
                downvotes=state.downvotes,
                user_vote=state.user_vote,
            ),
            message="Vote recorded" if vote else "Vote removed",
        )
