"""Create community use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from agora.application.usecase.base import BaseUseCase
from agora.application.usecase.view import CommunityView
from agora.domain.service import CommunityService
from agora.domain.value import UserId


class CreateCommunityRequest(BaseModel):
    """Create community request."""

    name: str
    creator_id: str  # User ID from authenticated user
    moderator_ids: list[UUID] = Field(default_factory=list)
    description: str | None = None
    rules: list[str] | None = None
    avatar: str | None = None
    cover: str | None = None
    welcome_message: str | None = None
    user_flairs: list[str] | None = None
    post_flairs: list[str] | None = None


class CreateCommunityResponse(BaseModel):
    """Create community response."""

    community: CommunityView


class CreateCommunityUseCase(
    BaseUseCase[CreateCommunityRequest, CreateCommunityResponse]
):
    """Use case for creating a community.

    The creator needs enough karma (see ``KarmaSettings``) and becomes a
    moderator of the new community.
    """

    def __init__(self, community_service: CommunityService) -> None:
        """Initialize create community use case.

        Args:
            community_service: Community domain service
        """
        self.community_service = community_service

    async def execute(self, request: CreateCommunityRequest) -> CreateCommunityResponse:
        """Execute create community flow.

        Args:
            request: Create community request

        Returns:
            Response with the created community

        Raises:
            InvalidCommunityNameError: If the name is malformed
            InsufficientKarmaError: If the creator lacks karma
            CommunityNameTakenError: If the name is in use
            NotFoundError: If the creator or a moderator does not exist
        """
        details = request.model_dump(
            exclude={"name", "creator_id", "moderator_ids"}, exclude_none=True
        )
        community = await self.community_service.create_community(
            creator_id=UserId(UUID(request.creator_id)),
            name=request.name,
            moderator_ids=[UserId(m) for m in request.moderator_ids],
            **details,
        )
        logfire.info(
            "Community created via API",
            community_id=str(community.id),
            name=community.name.root,
        )
        return CreateCommunityResponse(community=CommunityView.from_domain(community))
