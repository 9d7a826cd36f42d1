"""Get post use case."""

from uuid import UUID

from pydantic import BaseModel

from agora.application.usecase.base import BaseUseCase
from agora.application.usecase.view import PostView
from agora.domain.service import PostService
from agora.domain.value import PostId


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: UUID


class GetPostResponse(BaseModel):
    """Get post response."""

    document: PostView


class GetPostUseCase(BaseUseCase[GetPostRequest, GetPostResponse]):
    """Use case for retrieving a post by ID."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: GetPostRequest) -> GetPostResponse:
        """Raises NotFoundError if the post does not exist."""
        post = await self.post_service.get_post_by_id(PostId(request.post_id))
        return GetPostResponse(document=PostView.from_domain(post))
