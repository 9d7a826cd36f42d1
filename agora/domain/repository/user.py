"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from agora.domain.model.user import User
from agora.domain.value import CommunityId, UserId, VotableType, VoteType


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.

    Vote sets, subscriptions and karma have dedicated atomic operations so
    that concurrent requests touching the same user never overwrite each
    other's changes.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user's profile fields (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass

    @abstractmethod
    async def push_vote(
        self,
        user_id: UserId,
        kind: VotableType,
        vote_type: VoteType,
        votable_id: UUID,
    ) -> bool:
        """Add a document id to one of the user's vote sets.

        Conditional write: succeeds only if the id is in neither of the
        user's vote sets for ``kind``.

        Returns:
            True if the id was added, False if the condition failed
        """
        pass

    @abstractmethod
    async def pull_vote(
        self,
        user_id: UserId,
        kind: VotableType,
        vote_type: VoteType,
        votable_id: UUID,
    ) -> bool:
        """Remove a document id from one of the user's vote sets.

        Returns:
            True if the id was removed, False if it was not present
        """
        pass

    @abstractmethod
    async def adjust_karma(self, user_id: UserId, delta: int) -> None:
        """Atomically add ``delta`` (may be negative) to the user's karma.

        Args:
            user_id: The user's unique identifier
            delta: Signed karma change
        """
        pass

    @abstractmethod
    async def add_subscription(
        self, user_id: UserId, community_id: CommunityId
    ) -> bool:
        """Subscribe the user to a community.

        Returns:
            True if added, False if already subscribed
        """
        pass

    @abstractmethod
    async def remove_subscription(
        self, user_id: UserId, community_id: CommunityId
    ) -> bool:
        """Unsubscribe the user from a community.

        Returns:
            True if removed, False if not subscribed
        """
        pass
