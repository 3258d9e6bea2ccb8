"""Vote routes."""

from typing import Any

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, Query
from pydantic import BaseModel

from campus.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
    GetUserVoteRequest,
    GetUserVoteResponse,
    GetUserVoteUseCase,
    GetVoteStateRequest,
    GetVoteStateResponse,
    GetVoteStatesRequest,
    GetVoteStatesResponse,
    GetVoteStatesUseCase,
    GetVoteStateUseCase,
)
from campus.application.usecase.vote.get_vote_states import MAX_BATCH_SIZE
from campus.domain.error import InvalidArgumentError
from campus.domain.service import JWTService

router = APIRouter(tags=["votes"], route_class=DishkaRoute)


class CastVoteBody(BaseModel):
    """Cast vote request body.

    ``vote_type`` accepts any JSON value so an unknown polarity, including
    a non-string one, is reported as an invalid argument rather than a
    schema error.
    """

    vote_type: Any


def _caller_id(
    jwt_service: JWTService, authorization: str | None, auth_token: str | None
) -> str | None:
    """Resolve the caller from a bearer header, falling back to the cookie."""
    token = None
    if authorization:
        scheme, _, credentials = authorization.partition(" ")
        if scheme.lower() == "bearer" and credentials:
            token = credentials.strip()

    user_id = jwt_service.get_user_id_from_token(token or auth_token)
    return str(user_id) if user_id else None


@router.post("/posts/{post_id}/vote", response_model=CastVoteResponse)
async def cast_vote(
    post_id: str,
    body: CastVoteBody,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> CastVoteResponse:
    """Upvote or downvote a post.

    Casting the same vote twice removes it; casting the opposite vote
    switches it. Requires authentication.

    Args:
        post_id: Post UUID
        body: Requested vote type
        cast_vote_use_case: Cast vote use case from DI
        jwt_service: JWT service for token verification (injected)
        authorization: Bearer token header
        auth_token: JWT token from cookie

    Returns:
        The resulting vote (null when removed) and updated counters
    """
    request = CastVoteRequest(
        post_id=post_id,
        vote_type=body.vote_type,
        user_id=_caller_id(jwt_service, authorization, auth_token),
    )
    return await cast_vote_use_case.execute(request)


@router.get("/posts/votes", response_model=GetVoteStatesResponse)
async def get_vote_states(
    get_vote_states_use_case: FromDishka[GetVoteStatesUseCase],
    jwt_service: FromDishka[JWTService],
    post_ids: list[str] = Query(default=[]),
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> GetVoteStatesResponse:
    """Get vote state for a page of posts.

    Authentication is optional; anonymous callers get ``user_vote: null``.
    Unknown posts are left out of the response.
    """
    if not 1 <= len(post_ids) <= MAX_BATCH_SIZE:
        raise InvalidArgumentError(
            f"post_ids must contain between 1 and {MAX_BATCH_SIZE} ids"
        )

    request = GetVoteStatesRequest(
        post_ids=post_ids,
        user_id=_caller_id(jwt_service, authorization, auth_token),
    )
    return await get_vote_states_use_case.execute(request)


@router.get("/posts/{post_id}/votes", response_model=GetVoteStateResponse)
async def get_vote_state(
    post_id: str,
    get_vote_state_use_case: FromDishka[GetVoteStateUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> GetVoteStateResponse:
    """Get a post's vote counters and the caller's own vote.

    Authentication is optional.
    """
    request = GetVoteStateRequest(
        post_id=post_id,
        user_id=_caller_id(jwt_service, authorization, auth_token),
    )
    return await get_vote_state_use_case.execute(request)


@router.get("/posts/{post_id}/vote", response_model=GetUserVoteResponse)
async def get_user_vote(
    post_id: str,
    get_user_vote_use_case: FromDishka[GetUserVoteUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> GetUserVoteResponse:
    """Get the caller's own vote on a post. Requires authentication."""
    request = GetUserVoteRequest(
        post_id=post_id,
        user_id=_caller_id(jwt_service, authorization, auth_token),
    )
    return await get_user_vote_use_case.execute(request)
