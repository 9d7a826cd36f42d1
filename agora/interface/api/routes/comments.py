"""Comment routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Response, status
from pydantic import BaseModel, Field

from agora.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    GetCommentRequest,
    GetCommentResponse,
    GetCommentUseCase,
)
from agora.domain.service import JWTService
from agora.interface.api.auth import require_user_id
from agora.interface.api.schema import Envelope

router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    post: UUID
    content: str = Field(min_length=1, max_length=10000)
    parent: UUID | None = None  # Comment being replied to


@router.post(
    "",
    response_model=Envelope[CreateCommentResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> Envelope[CreateCommentResponse]:
    """Comment on a post or reply to a comment.

    Requires authentication. Users banned from the post's community get 403.

    Args:
        request: Comment data
        create_comment_use_case: Create comment use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Created comment
    """
    user_id = require_user_id(jwt_service, auth_token)
    result = await create_comment_use_case.execute(
        CreateCommentRequest(
            post_id=request.post,
            content=request.content,
            parent_id=request.parent,
            creator_id=user_id,
        )
    )
    return Envelope(data=result)


@router.get("/{comment_id}", response_model=Envelope[GetCommentResponse])
async def get_comment(
    comment_id: UUID,
    get_comment_use_case: FromDishka[GetCommentUseCase],
) -> Envelope[GetCommentResponse]:
    """Get a comment by ID."""
    result = await get_comment_use_case.execute(
        GetCommentRequest(comment_id=comment_id)
    )
    return Envelope(data=result)


@router.delete("/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(
    comment_id: UUID,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> Response:
    """Delete a comment and its replies."""
    user_id = require_user_id(jwt_service, auth_token)
    await delete_comment_use_case.execute(
        DeleteCommentRequest(comment_id=comment_id, user_id=user_id)
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
