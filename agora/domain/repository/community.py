"""Community repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from agora.domain.model.community import Community
from agora.domain.value import CommunityId, CommunityName, UserId


class CommunityRepository(ABC):
    """Repository for Community aggregate."""

    @abstractmethod
    async def find_by_id(self, community_id: CommunityId) -> Optional[Community]:
        """Find a community by ID.

        Returns:
            The community if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_name(self, name: CommunityName) -> Optional[Community]:
        """Find a community by its unique name."""
        pass

    @abstractmethod
    async def save(self, community: Community) -> Community:
        """Save a community (create or update), including its moderators."""
        pass

    @abstractmethod
    async def delete(self, community_id: CommunityId) -> bool:
        """Hard-delete a community.

        Returns:
            True if a community was deleted
        """
        pass

    @abstractmethod
    async def add_banned_user(
        self, community_id: CommunityId, user_id: UserId
    ) -> bool:
        """Add a user to the ban list.

        Returns:
            True if added, False if already banned
        """
        pass

    @abstractmethod
    async def remove_banned_user(
        self, community_id: CommunityId, user_id: UserId
    ) -> bool:
        """Remove a user from the ban list.

        Returns:
            True if removed, False if not banned
        """
        pass

    @abstractmethod
    async def adjust_subscribers(self, community_id: CommunityId, delta: int) -> None:
        """Atomically add ``delta`` to the subscriber counter (never below 0)."""
        pass
