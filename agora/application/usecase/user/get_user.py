"""Get user use case."""

from uuid import UUID

from pydantic import BaseModel

from agora.application.usecase.base import BaseUseCase
from agora.application.usecase.view import UserView
from agora.domain.service import UserService
from agora.domain.value import UserId


class GetUserRequest(BaseModel):
    """Get user request."""

    user_id: UUID


class GetUserResponse(BaseModel):
    """Get user response."""

    user: UserView


class GetUserUseCase(BaseUseCase[GetUserRequest, GetUserResponse]):
    """Use case for reading a user's karma, votes and subscriptions."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: GetUserRequest) -> GetUserResponse:
        """Raises NotFoundError if the user does not exist."""
        user = await self.user_service.get_by_id(UserId(request.user_id))
        return GetUserResponse(user=UserView.from_domain(user))
