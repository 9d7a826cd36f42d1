"""Cast vote use case.

One use case serves all four vote intents on both posts and comments.
"""

from uuid import UUID

from pydantic import BaseModel

from agora.application.usecase.base import BaseUseCase
from agora.application.usecase.view import CommentView, PostView
from agora.domain.model import Comment, Post
from agora.domain.service import VoteService
from agora.domain.value import UserId, VotableType, VoteIntent


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    intent: VoteIntent
    votable_type: VotableType
    votable_id: UUID
    user_id: str  # User ID from authenticated user


class CastVoteResponse(BaseModel):
    """Cast vote response: the document after the vote."""

    document: PostView | CommentView


class CastVoteUseCase(BaseUseCase[CastVoteRequest, CastVoteResponse]):
    """Use case for upvoting, downvoting or retracting a vote."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute vote flow.

        Args:
            request: Cast vote request

        Returns:
            Response with the updated document

        Raises:
            NotFoundError: If the document or a user is missing
            AlreadyVotedError: If the vote is already cast
            NotVotedError: If there is no such vote to remove
            ConcurrentVoteError: If the vote changed concurrently
        """
        document = await self.vote_service.apply_vote(
            request.intent,
            UserId(UUID(request.user_id)),
            request.votable_type,
            request.votable_id,
        )

        if isinstance(document, Post):
            return CastVoteResponse(document=PostView.from_domain(document))
        assert isinstance(document, Comment)
        return CastVoteResponse(document=CommentView.from_domain(document))
