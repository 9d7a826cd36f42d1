"""PostgreSQL implementation of Community repository."""

from typing import Any, Optional

from sqlalchemy import and_, delete, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.model import Community
from agora.domain.repository import CommunityRepository
from agora.domain.value import CommunityId, CommunityName, UserId
from agora.persistence.mappers import community_to_dict, row_to_community
from agora.persistence.tables import (
    communities_table,
    community_bans_table,
    community_moderators_table,
)


class PostgresCommunityRepository(CommunityRepository):
    """PostgreSQL implementation of CommunityRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _load(self, row: Any) -> Community:
        community_id = row["id"]
        moderators = await self.session.execute(
            select(community_moderators_table.c.user_id).where(
                community_moderators_table.c.community_id == community_id
            )
        )
        bans = await self.session.execute(
            select(community_bans_table.c.user_id).where(
                community_bans_table.c.community_id == community_id
            )
        )
        return row_to_community(
            dict(row),
            moderator_ids=moderators.scalars().all(),
            banned_user_ids=bans.scalars().all(),
        )

    async def find_by_id(self, community_id: CommunityId) -> Optional[Community]:
        """Find a community by ID."""
        stmt = select(communities_table).where(communities_table.c.id == community_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return await self._load(row) if row else None

    async def find_by_name(self, name: CommunityName) -> Optional[Community]:
        """Find a community by name."""
        stmt = select(communities_table).where(communities_table.c.name == name.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return await self._load(row) if row else None

    async def save(self, community: Community) -> Community:
        """Save a community (create or update).

        The moderator list is replaced wholesale. Bans and the subscriber
        counter are left alone; they have their own atomic operations.
        """
        values = community_to_dict(community)
        stmt = insert(communities_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[communities_table.c.id],
            set_={
                key: stmt.excluded[key]
                for key in values
                if key not in ("id", "subscribers", "created_at")
            },
        )
        await self.session.execute(stmt)

        await self.session.execute(
            delete(community_moderators_table).where(
                community_moderators_table.c.community_id == community.id
            )
        )
        await self.session.execute(
            insert(community_moderators_table),
            [
                {"community_id": community.id, "user_id": moderator_id}
                for moderator_id in community.moderator_ids
            ],
        )
        await self.session.flush()
        return community

    async def delete(self, community_id: CommunityId) -> bool:
        """Delete a community with its moderators, bans and subscriptions."""
        stmt = delete(communities_table).where(communities_table.c.id == community_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def add_banned_user(
        self, community_id: CommunityId, user_id: UserId
    ) -> bool:
        """Ban unless already banned."""
        stmt = (
            insert(community_bans_table)
            .values(community_id=community_id, user_id=user_id)
            .on_conflict_do_nothing()
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def remove_banned_user(
        self, community_id: CommunityId, user_id: UserId
    ) -> bool:
        """Unban if banned."""
        stmt = delete(community_bans_table).where(
            and_(
                community_bans_table.c.community_id == community_id,
                community_bans_table.c.user_id == user_id,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def adjust_subscribers(self, community_id: CommunityId, delta: int) -> None:
        """Atomically move the subscriber counter, never below zero."""
        stmt = (
            communities_table.update()
            .where(communities_table.c.id == community_id)
            .values(
                subscribers=func.greatest(communities_table.c.subscribers + delta, 0)
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()
