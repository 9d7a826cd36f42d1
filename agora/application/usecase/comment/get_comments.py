"""Get comments for a post use case."""

from uuid import UUID

from pydantic import BaseModel

from agora.application.usecase.base import BaseUseCase
from agora.application.usecase.view import CommentView
from agora.domain.service import CommentService
from agora.domain.value import PostId


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    post_id: UUID


class GetCommentsResponse(BaseModel):
    """All comments on a post, oldest first."""

    comments: list[CommentView]


class GetCommentsUseCase(BaseUseCase[GetCommentsRequest, GetCommentsResponse]):
    """Use case for listing the comments on a post."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Raises NotFoundError if the post does not exist."""
        comments = await self.comment_service.get_comments_for_post(
            PostId(request.post_id)
        )
        return GetCommentsResponse(
            comments=[CommentView.from_domain(c) for c in comments]
        )
