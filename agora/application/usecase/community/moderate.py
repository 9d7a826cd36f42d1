"""Ban and unban use cases."""

from uuid import UUID

from pydantic import BaseModel

from agora.application.usecase.base import BaseUseCase
from agora.application.usecase.view import CommunityView
from agora.domain.service import CommunityService
from agora.domain.value import CommunityId, UserId


class ModerateUserRequest(BaseModel):
    """Ban or unban request."""

    community_id: UUID
    target_id: UUID  # User being banned or unbanned
    user_id: str  # Moderator ID from authenticated user


class ModerateUserResponse(BaseModel):
    """The community after the change."""

    community: CommunityView


class BanUserUseCase(BaseUseCase[ModerateUserRequest, ModerateUserResponse]):
    """Use case for banning a user from a community."""

    def __init__(self, community_service: CommunityService) -> None:
        """Initialize ban user use case.

        Args:
            community_service: Community domain service
        """
        self.community_service = community_service

    async def execute(self, request: ModerateUserRequest) -> ModerateUserResponse:
        """Execute ban flow.

        Raises:
            NotFoundError: If the target or community does not exist
            NotModeratorError: If the acting user is not a moderator
            CannotBanCreatorError: If the target created the community
            AlreadyBannedError: If the target is already banned
        """
        community = await self.community_service.ban_user(
            actor_id=UserId(UUID(request.user_id)),
            community_id=CommunityId(request.community_id),
            target_id=UserId(request.target_id),
        )
        return ModerateUserResponse(community=CommunityView.from_domain(community))


class UnbanUserUseCase(BaseUseCase[ModerateUserRequest, ModerateUserResponse]):
    """Use case for lifting a ban."""

    def __init__(self, community_service: CommunityService) -> None:
        """Initialize unban user use case.

        Args:
            community_service: Community domain service
        """
        self.community_service = community_service

    async def execute(self, request: ModerateUserRequest) -> ModerateUserResponse:
        """Execute unban flow.

        Raises:
            NotFoundError: If the target or community does not exist
            NotModeratorError: If the acting user is not a moderator
            NotBannedError: If the target is not banned
        """
        community = await self.community_service.unban_user(
            actor_id=UserId(UUID(request.user_id)),
            community_id=CommunityId(request.community_id),
            target_id=UserId(request.target_id),
        )
        return ModerateUserResponse(community=CommunityView.from_domain(community))
