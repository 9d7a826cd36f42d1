"""In-memory user repository for testing."""

from typing import Optional
from uuid import UUID

from agora.domain.model.user import User
from agora.domain.repository.user import UserRepository
from agora.domain.value import CommunityId, UserId, VotableType, VoteType

from .store import InMemoryStore


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._users = store.users

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def save(self, user: User) -> User:
        """Save or update a user."""
        self._users[user.id] = user
        return user

    async def push_vote(
        self,
        user_id: UserId,
        kind: VotableType,
        vote_type: VoteType,
        votable_id: UUID,
    ) -> bool:
        """Add to a vote set if the id is in neither set."""
        user = self._users.get(user_id)
        if not user:
            return False
        votes = user.votes_for(kind)
        if votable_id in votes.upvoted or votable_id in votes.downvoted:
            return False
        self._users[user_id] = user.with_votes(
            kind, votes.with_added(vote_type, votable_id)
        )
        return True

    async def pull_vote(
        self,
        user_id: UserId,
        kind: VotableType,
        vote_type: VoteType,
        votable_id: UUID,
    ) -> bool:
        """Remove from a vote set if present."""
        user = self._users.get(user_id)
        if not user:
            return False
        votes = user.votes_for(kind)
        if votable_id not in votes.of(vote_type):
            return False
        self._users[user_id] = user.with_votes(
            kind, votes.with_removed(vote_type, votable_id)
        )
        return True

    async def adjust_karma(self, user_id: UserId, delta: int) -> None:
        """Add delta to karma."""
        user = self._users.get(user_id)
        if user:
            self._users[user_id] = user.model_copy(
                update={"karma": user.karma + delta}
            )

    async def add_subscription(
        self, user_id: UserId, community_id: CommunityId
    ) -> bool:
        """Subscribe unless already subscribed."""
        user = self._users.get(user_id)
        if not user or community_id in user.subscribed_communities:
            return False
        self._users[user_id] = user.model_copy(
            update={
                "subscribed_communities": user.subscribed_communities | {community_id}
            }
        )
        return True

    async def remove_subscription(
        self, user_id: UserId, community_id: CommunityId
    ) -> bool:
        """Unsubscribe if subscribed."""
        user = self._users.get(user_id)
        if not user or community_id not in user.subscribed_communities:
            return False
        self._users[user_id] = user.model_copy(
            update={
                "subscribed_communities": user.subscribed_communities - {community_id}
            }
        )
        return True
