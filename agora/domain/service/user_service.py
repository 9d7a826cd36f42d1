"""User domain service."""

import logfire

from agora.domain.model import User
from agora.domain.repository import UserRepository
from agora.domain.value import UserId

from .base import Service


class UserService(Service):
    """Read access to users.

    Karma and vote sets are never written here; they change only as a side
    effect of ``VoteService.apply_vote``.
    """

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Load a user with karma, vote sets and subscriptions.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            return self.require(user, "User", user_id)
