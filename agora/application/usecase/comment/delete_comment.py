"""Delete comment use case."""

from uuid import UUID

from pydantic import BaseModel

from agora.application.usecase.base import BaseUseCase
from agora.domain.service import CommentService
from agora.domain.value import CommentId, UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: UUID
    user_id: str  # User ID from authenticated user


class DeleteCommentUseCase(BaseUseCase[DeleteCommentRequest, None]):
    """Use case for deleting a comment and its replies."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> None:
        """Execute delete comment flow.

        Raises:
            NotFoundError: If the comment or user does not exist
            NotAuthorizedError: If the user may not delete the comment
        """
        await self.comment_service.delete_comment(
            UserId(UUID(request.user_id)), CommentId(request.comment_id)
        )
