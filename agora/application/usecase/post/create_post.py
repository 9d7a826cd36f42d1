"""Create post use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from agora.application.usecase.base import BaseUseCase
from agora.application.usecase.view import PostView
from agora.domain.service import PostService
from agora.domain.value import CommunityId, UserId


class CreatePostRequest(BaseModel):
    """Create post request."""

    community_id: UUID
    title: str = Field(min_length=1, max_length=300)
    description: str | None = None
    content: str | None = None
    media_urls: list[str] = Field(default_factory=list)
    creator_id: str  # User ID from authenticated user


class CreatePostResponse(BaseModel):
    """Create post response."""

    document: PostView


class CreatePostUseCase(BaseUseCase[CreatePostRequest, CreatePostResponse]):
    """Use case for creating a post in a community."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: CreatePostRequest) -> CreatePostResponse:
        """Execute create post flow.

        Raises:
            NotFoundError: If the community or creator does not exist
            BannedFromCommunityError: If the creator is banned from the community
        """
        post = await self.post_service.create_post(
            creator_id=UserId(UUID(request.creator_id)),
            community_id=CommunityId(request.community_id),
            title=request.title,
            description=request.description,
            content=request.content,
            media_urls=request.media_urls,
        )
        return CreatePostResponse(document=PostView.from_domain(post))
