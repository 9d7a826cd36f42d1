"""Post routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Response, status
from pydantic import BaseModel, Field

from agora.application.usecase.comment import (
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
)
from agora.application.usecase.post import (
    CreatePostRequest,
    CreatePostResponse,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostUseCase,
    GetPostRequest,
    GetPostResponse,
    GetPostUseCase,
)
from agora.domain.service import JWTService
from agora.interface.api.auth import require_user_id
from agora.interface.api.schema import Envelope

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


class CreatePostAPIRequest(BaseModel):
    """API request for creating a post."""

    community: UUID  # Community the post is submitted to
    title: str = Field(min_length=1, max_length=300)
    description: str | None = Field(default=None, max_length=10000)
    content: str | None = Field(default=None, max_length=40000)
    media_urls: list[str] = Field(default_factory=list)


@router.post(
    "",
    response_model=Envelope[CreatePostResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_post(
    request: CreatePostAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> Envelope[CreatePostResponse]:
    """Create a new post.

    Requires authentication. Users banned from the community get 403.

    Args:
        request: Post creation data
        create_post_use_case: Create post use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Created post
    """
    user_id = require_user_id(jwt_service, auth_token)
    result = await create_post_use_case.execute(
        CreatePostRequest(
            community_id=request.community,
            title=request.title,
            description=request.description,
            content=request.content,
            media_urls=request.media_urls,
            creator_id=user_id,
        )
    )
    return Envelope(data=result)


@router.get("/{post_id}", response_model=Envelope[GetPostResponse])
async def get_post(
    post_id: UUID,
    get_post_use_case: FromDishka[GetPostUseCase],
) -> Envelope[GetPostResponse]:
    """Get a post by ID."""
    result = await get_post_use_case.execute(GetPostRequest(post_id=post_id))
    return Envelope(data=result)


@router.get("/{post_id}/comments", response_model=Envelope[GetCommentsResponse])
async def get_post_comments(
    post_id: UUID,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
) -> Envelope[GetCommentsResponse]:
    """List the comments on a post, oldest first."""
    result = await get_comments_use_case.execute(GetCommentsRequest(post_id=post_id))
    return Envelope(data=result)


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(
    post_id: UUID,
    delete_post_use_case: FromDishka[DeletePostUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> Response:
    """Delete a post.

    Allowed for the post's creator, admins and moderators of its community.
    """
    user_id = require_user_id(jwt_service, auth_token)
    await delete_post_use_case.execute(
        DeletePostRequest(post_id=post_id, user_id=user_id)
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
