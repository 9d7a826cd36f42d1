"""Create comment use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from agora.application.usecase.base import BaseUseCase
from agora.application.usecase.view import CommentView
from agora.domain.service import CommentService
from agora.domain.value import CommentId, PostId, UserId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: UUID
    content: str = Field(min_length=1, max_length=10000)
    parent_id: UUID | None = None  # Set when replying to another comment
    creator_id: str  # User ID from authenticated user


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    document: CommentView


class CreateCommentUseCase(BaseUseCase[CreateCommentRequest, CreateCommentResponse]):
    """Use case for commenting on a post."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Raises:
            NotFoundError: If the post, parent or creator does not exist
            ValidationError: If the parent comment is on another post
            BannedFromCommunityError: If the creator is banned from the community
        """
        comment = await self.comment_service.create_comment(
            creator_id=UserId(UUID(request.creator_id)),
            post_id=PostId(request.post_id),
            content=request.content,
            parent_id=CommentId(request.parent_id) if request.parent_id else None,
        )
        return CreateCommentResponse(document=CommentView.from_domain(comment))
