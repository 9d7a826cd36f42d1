"""Get community use case."""

from uuid import UUID

from pydantic import BaseModel

from agora.application.usecase.base import BaseUseCase
from agora.application.usecase.view import CommunityView
from agora.domain.service import CommunityService
from agora.domain.value import CommunityId


class GetCommunityRequest(BaseModel):
    """Get community request."""

    community_id: UUID


class GetCommunityResponse(BaseModel):
    """Get community response."""

    community: CommunityView


class GetCommunityUseCase(BaseUseCase[GetCommunityRequest, GetCommunityResponse]):
    """Use case for retrieving a community by ID."""

    def __init__(self, community_service: CommunityService) -> None:
        self.community_service = community_service

    async def execute(self, request: GetCommunityRequest) -> GetCommunityResponse:
        community = await self.community_service.get_by_id(
            CommunityId(request.community_id)
        )
        return GetCommunityResponse(community=CommunityView.from_domain(community))
