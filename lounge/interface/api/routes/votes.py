"""Vote routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header

from lounge.application.usecase.base import CamelModel
from lounge.application.usecase.vote import (
    CastVoteRequest,
    CastVoteUseCase,
    GetVoteStatusRequest,
    GetVoteStatusUseCase,
    VoteTallyResponse,
)
from lounge.domain.service import JWTService
from lounge.domain.value import VotableType, VoteType
from lounge.interface.api.auth import extract_token

router = APIRouter(tags=["votes"], route_class=DishkaRoute)


class VoteBody(CamelModel):
    """Body of ``POST /votes``."""

    target_type: VotableType
    target_id: UUID
    type: VoteType


class TargetVoteBody(CamelModel):
    """Body of the per-item vote routes."""

    type: VoteType


async def _cast(
    use_case: CastVoteUseCase,
    jwt_service: JWTService,
    token: str | None,
    votable_type: VotableType,
    votable_id: UUID,
    vote_type: VoteType,
) -> VoteTallyResponse:
    user_id = jwt_service.require_user_id(token)
    request = CastVoteRequest(
        votable_type=votable_type,
        votable_id=str(votable_id),
        user_id=str(user_id),
        vote_type=vote_type,
    )
    return await use_case.execute(request)


@router.post("/votes", response_model=VoteTallyResponse)
async def cast_vote(
    body: VoteBody,
    use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> VoteTallyResponse:
    """Vote on a post or comment.

    Requires authentication. Casting the vote the caller already holds
    removes it; casting the other type flips it.

    Returns:
        Counters after the vote and the caller's resulting vote
    """
    with logfire.span(
        "api.cast_vote", target_type=body.target_type.value, target_id=str(body.target_id)
    ):
        return await _cast(
            use_case,
            jwt_service,
            extract_token(authorization, auth_token),
            body.target_type,
            body.target_id,
            body.type,
        )


@router.post("/posts/{post_id}/vote", response_model=VoteTallyResponse)
async def vote_on_post(
    post_id: UUID,
    body: TargetVoteBody,
    use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> VoteTallyResponse:
    """Vote on a post. Requires authentication."""
    return await _cast(
        use_case,
        jwt_service,
        extract_token(authorization, auth_token),
        VotableType.POST,
        post_id,
        body.type,
    )


@router.post("/comments/{comment_id}/vote", response_model=VoteTallyResponse)
async def vote_on_comment(
    comment_id: UUID,
    body: TargetVoteBody,
    use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> VoteTallyResponse:
    """Vote on a comment. Requires authentication."""
    return await _cast(
        use_case,
        jwt_service,
        extract_token(authorization, auth_token),
        VotableType.COMMENT,
        comment_id,
        body.type,
    )


@router.get("/posts/{post_id}/vote", response_model=VoteTallyResponse)
async def get_post_vote_status(
    post_id: UUID,
    use_case: FromDishka[GetVoteStatusUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> VoteTallyResponse:
    """Read a post's counters. The caller's vote is included when authenticated."""
    user_id = jwt_service.get_user_id_from_token(extract_token(authorization, auth_token))
    request = GetVoteStatusRequest(
        votable_type=VotableType.POST,
        votable_id=str(post_id),
        user_id=str(user_id) if user_id else None,
    )
    return await use_case.execute(request)


@router.get("/comments/{comment_id}/vote", response_model=VoteTallyResponse)
async def get_comment_vote_status(
    comment_id: UUID,
    use_case: FromDishka[GetVoteStatusUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> VoteTallyResponse:
    """Read a comment's counters. The caller's vote is included when authenticated."""
    user_id = jwt_service.get_user_id_from_token(extract_token(authorization, auth_token))
    request = GetVoteStatusRequest(
        votable_type=VotableType.COMMENT,
        votable_id=str(comment_id),
        user_id=str(user_id) if user_id else None,
    )
    return await use_case.execute(request)
