"""Vote use cases."""

from .cast_vote import CastVoteRequest, CastVoteResponse, CastVoteUseCase, VoteSummary
from .get_user_vote import GetUserVoteRequest, GetUserVoteResponse, GetUserVoteUseCase
from .get_vote_state import (
    GetVoteStateRequest,
    GetVoteStateResponse,
    GetVoteStateUseCase,
)
from .get_vote_states import (
    GetVoteStatesRequest,
    GetVoteStatesResponse,
    GetVoteStatesUseCase,
    PostVoteState,
)

__all__ = [
    "CastVoteRequest",
    "CastVoteResponse",
    "CastVoteUseCase",
    "VoteSummary",
    "GetUserVoteRequest",
    "GetUserVoteResponse",
    "GetUserVoteUseCase",
    "GetVoteStateRequest",
    "GetVoteStateResponse",
    "GetVoteStateUseCase",
    "GetVoteStatesRequest",
    "GetVoteStatesResponse",
    "GetVoteStatesUseCase",
    "PostVoteState",
]
