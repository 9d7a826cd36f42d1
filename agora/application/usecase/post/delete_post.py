"""Delete post use case."""

from uuid import UUID

from pydantic import BaseModel

from agora.application.usecase.base import BaseUseCase
from agora.domain.service import PostService
from agora.domain.value import PostId, UserId


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: UUID
    user_id: str  # User ID from authenticated user


class DeletePostUseCase(BaseUseCase[DeletePostRequest, None]):
    """Use case for deleting a post.

    The post's creator, an admin, or a moderator of its community may delete
    it. Comments on the post are deleted with it.
    """

    def __init__(self, post_service: PostService) -> None:
        """Initialize delete post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: DeletePostRequest) -> None:
        """Execute delete post flow.

        Raises:
            NotFoundError: If the post or user does not exist
            NotAuthorizedError: If the user may not delete the post
        """
        await self.post_service.delete_post(
            UserId(UUID(request.user_id)), PostId(request.post_id)
        )
