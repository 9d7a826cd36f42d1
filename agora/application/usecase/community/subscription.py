"""Subscribe and unsubscribe use cases."""

from uuid import UUID

from pydantic import BaseModel

from agora.application.usecase.base import BaseUseCase
from agora.application.usecase.view import UserView
from agora.domain.service import CommunityService
from agora.domain.value import CommunityId, UserId


class SubscriptionRequest(BaseModel):
    """Subscribe or unsubscribe request."""

    community_id: UUID
    user_id: str  # User ID from authenticated user


class SubscriptionResponse(BaseModel):
    """The user after the change."""

    user: UserView


class SubscribeUseCase(BaseUseCase[SubscriptionRequest, SubscriptionResponse]):
    """Use case for subscribing to a community."""

    def __init__(self, community_service: CommunityService) -> None:
        self.community_service = community_service

    async def execute(self, request: SubscriptionRequest) -> SubscriptionResponse:
        """Raises NotFoundError or AlreadySubscribedError."""
        user = await self.community_service.subscribe(
            UserId(UUID(request.user_id)), CommunityId(request.community_id)
        )
        return SubscriptionResponse(user=UserView.from_domain(user))


class UnsubscribeUseCase(BaseUseCase[SubscriptionRequest, SubscriptionResponse]):
    """Use case for unsubscribing from a community."""

    def __init__(self, community_service: CommunityService) -> None:
        self.community_service = community_service

    async def execute(self, request: SubscriptionRequest) -> SubscriptionResponse:
        """Raises NotFoundError or NotSubscribedError."""
        user = await self.community_service.unsubscribe(
            UserId(UUID(request.user_id)), CommunityId(request.community_id)
        )
        return SubscriptionResponse(user=UserView.from_domain(user))
