"""In-memory community repository for testing."""

from typing import Optional

from agora.domain.model.community import Community
from agora.domain.repository.community import CommunityRepository
from agora.domain.value import CommunityId, CommunityName, UserId

from .store import InMemoryStore


class InMemoryCommunityRepository(CommunityRepository):
    """In-memory implementation of CommunityRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._communities = store.communities

    async def find_by_id(self, community_id: CommunityId) -> Optional[Community]:
        """Find a community by ID."""
        return self._communities.get(community_id)

    async def find_by_name(self, name: CommunityName) -> Optional[Community]:
        """Find a community by name."""
        for community in self._communities.values():
            if community.name == name:
                return community
        return None

    async def save(self, community: Community) -> Community:
        """Save or update a community."""
        self._communities[community.id] = community
        return community

    async def delete(self, community_id: CommunityId) -> bool:
        """Delete a community by ID."""
        return self._communities.pop(community_id, None) is not None

    async def add_banned_user(
        self, community_id: CommunityId, user_id: UserId
    ) -> bool:
        """Ban unless already banned."""
        community = self._communities.get(community_id)
        if not community or user_id in community.banned_user_ids:
            return False
        self._communities[community_id] = community.model_copy(
            update={"banned_user_ids": community.banned_user_ids | {user_id}}
        )
        return True

    async def remove_banned_user(
        self, community_id: CommunityId, user_id: UserId
    ) -> bool:
        """Unban if banned."""
        community = self._communities.get(community_id)
        if not community or user_id not in community.banned_user_ids:
            return False
        self._communities[community_id] = community.model_copy(
            update={"banned_user_ids": community.banned_user_ids - {user_id}}
        )
        return True

    async def adjust_subscribers(self, community_id: CommunityId, delta: int) -> None:
        """Move the subscriber counter, never below zero."""
        community = self._communities.get(community_id)
        if community:
            self._communities[community_id] = community.model_copy(
                update={"subscribers": max(0, community.subscribers + delta)}
            )
