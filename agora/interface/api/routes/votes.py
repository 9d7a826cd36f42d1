"""Vote routes.

``POST /posts/{id}/{intent}`` and ``POST /comments/{id}/{intent}`` where
intent is one of ``upvote``, ``downvote``, ``removeUpvote`` and
``removeDownvote``.
"""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie

from agora.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
)
from agora.domain.service import JWTService
from agora.domain.value import VotableType, VoteIntent
from agora.interface.api.auth import require_user_id
from agora.interface.api.schema import Envelope

router = APIRouter(tags=["votes"], route_class=DishkaRoute)


@router.post("/posts/{post_id}/{intent}", response_model=Envelope[CastVoteResponse])
async def vote_on_post(
    post_id: UUID,
    intent: VoteIntent,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> Envelope[CastVoteResponse]:
    """Upvote, downvote or retract a vote on a post.

    Requires authentication.

    Args:
        post_id: Post UUID
        intent: Requested vote transition
        cast_vote_use_case: Cast vote use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        The post with updated counters
    """
    user_id = require_user_id(jwt_service, auth_token)
    result = await cast_vote_use_case.execute(
        CastVoteRequest(
            intent=intent,
            votable_type=VotableType.POST,
            votable_id=post_id,
            user_id=user_id,
        )
    )
    return Envelope(data=result)


@router.post(
    "/comments/{comment_id}/{intent}", response_model=Envelope[CastVoteResponse]
)
async def vote_on_comment(
    comment_id: UUID,
    intent: VoteIntent,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> Envelope[CastVoteResponse]:
    """Upvote, downvote or retract a vote on a comment.

    Requires authentication.
    """
    user_id = require_user_id(jwt_service, auth_token)
    result = await cast_vote_use_case.execute(
        CastVoteRequest(
            intent=intent,
            votable_type=VotableType.COMMENT,
            votable_id=comment_id,
            user_id=user_id,
        )
    )
    return Envelope(data=result)
