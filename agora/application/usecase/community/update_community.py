"""Update community use case."""

from uuid import UUID

from pydantic import BaseModel

from agora.application.usecase.base import BaseUseCase
from agora.application.usecase.view import CommunityView
from agora.domain.service import CommunityService
from agora.domain.value import CommunityId, UserId


class UpdateCommunityRequest(BaseModel):
    """Update community request. Fields left as None are unchanged."""

    community_id: UUID
    user_id: str  # User ID from authenticated user
    name: str | None = None
    moderator_ids: list[UUID] | None = None
    description: str | None = None
    rules: list[str] | None = None
    avatar: str | None = None
    cover: str | None = None
    welcome_message: str | None = None
    user_flairs: list[str] | None = None
    post_flairs: list[str] | None = None


class UpdateCommunityResponse(BaseModel):
    """Update community response."""

    community: CommunityView


class UpdateCommunityUseCase(
    BaseUseCase[UpdateCommunityRequest, UpdateCommunityResponse]
):
    """Use case for editing a community. Only its creator may do this."""

    def __init__(self, community_service: CommunityService) -> None:
        """Initialize update community use case.

        Args:
            community_service: Community domain service
        """
        self.community_service = community_service

    async def execute(self, request: UpdateCommunityRequest) -> UpdateCommunityResponse:
        """Execute update community flow.

        Raises:
            NotFoundError: If the community or a moderator does not exist
            NotCommunityCreatorError: If the user is not the creator
            InvalidCommunityNameError: If the new name is malformed
            CommunityNameTakenError: If the new name is in use
        """
        details = request.model_dump(
            exclude={"community_id", "user_id", "name", "moderator_ids"},
            exclude_none=True,
        )
        moderator_ids = (
            [UserId(m) for m in request.moderator_ids]
            if request.moderator_ids is not None
            else None
        )
        community = await self.community_service.update_community(
            actor_id=UserId(UUID(request.user_id)),
            community_id=CommunityId(request.community_id),
            name=request.name,
            moderator_ids=moderator_ids,
            **details,
        )
        return UpdateCommunityResponse(community=CommunityView.from_domain(community))
