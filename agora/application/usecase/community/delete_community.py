"""Delete community use case."""

from uuid import UUID

from pydantic import BaseModel

from agora.application.usecase.base import BaseUseCase
from agora.domain.service import CommunityService
from agora.domain.value import CommunityId, UserId


class DeleteCommunityRequest(BaseModel):
    """Delete community request."""

    community_id: UUID
    user_id: str  # User ID from authenticated user


class DeleteCommunityUseCase(BaseUseCase[DeleteCommunityRequest, None]):
    """Use case for deleting a community as its creator or an admin."""

    def __init__(self, community_service: CommunityService) -> None:
        self.community_service = community_service

    async def execute(self, request: DeleteCommunityRequest) -> None:
        """Execute delete community flow.

        Raises:
            NotFoundError: If the community or user does not exist
            CommunityDeletionForbiddenError: If the user is neither creator nor admin
        """
        await self.community_service.delete_community(
            UserId(UUID(request.user_id)), CommunityId(request.community_id)
        )
