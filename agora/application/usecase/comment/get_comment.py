"""Get comment use case."""

from uuid import UUID

from pydantic import BaseModel

from agora.application.usecase.base import BaseUseCase
from agora.application.usecase.view import CommentView
from agora.domain.service import CommentService
from agora.domain.value import CommentId


class GetCommentRequest(BaseModel):
    """Get comment request."""

    comment_id: UUID


class GetCommentResponse(BaseModel):
    """Get comment response."""

    document: CommentView


class GetCommentUseCase(BaseUseCase[GetCommentRequest, GetCommentResponse]):
    """Use case for retrieving a comment by ID."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: GetCommentRequest) -> GetCommentResponse:
        comment = await self.comment_service.get_comment_by_id(
            CommentId(request.comment_id)
        )
        return GetCommentResponse(document=CommentView.from_domain(comment))
