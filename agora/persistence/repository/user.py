"""PostgreSQL implementation of User repository."""

from typing import Optional
from uuid import UUID

from sqlalchemy import and_, delete, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.model import User
from agora.domain.repository import UserRepository
from agora.domain.value import CommunityId, UserId, VotableType, VoteSets, VoteType
from agora.persistence.mappers import row_to_user, user_to_dict
from agora.persistence.tables import (
    user_subscriptions_table,
    users_table,
    votes_table,
)


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository.

    Vote sets are rows of the votes table. Its primary key covers
    (user, kind, document), so a document can never sit in both sets.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID, with vote sets and subscriptions.

        Args:
            user_id: User ID to look up

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        if not row:
            return None

        votes: dict[VotableType, dict[VoteType, set[UUID]]] = {
            kind: {VoteType.UP: set(), VoteType.DOWN: set()} for kind in VotableType
        }
        vote_rows = await self.session.execute(
            select(
                votes_table.c.votable_type,
                votes_table.c.votable_id,
                votes_table.c.vote_type,
            ).where(votes_table.c.user_id == user_id)
        )
        for votable_type, votable_id, vote_type in vote_rows.fetchall():
            votes[VotableType(votable_type)][VoteType(vote_type)].add(votable_id)

        subscriptions = await self.session.execute(
            select(user_subscriptions_table.c.community_id).where(
                user_subscriptions_table.c.user_id == user_id
            )
        )

        return row_to_user(
            dict(row),
            post_votes=self._vote_sets(votes[VotableType.POST]),
            comment_votes=self._vote_sets(votes[VotableType.COMMENT]),
            subscribed_communities=subscriptions.scalars().all(),
        )

    @staticmethod
    def _vote_sets(votes: dict[VoteType, set[UUID]]) -> VoteSets:
        return VoteSets(
            upvoted=frozenset(votes[VoteType.UP]),
            downvoted=frozenset(votes[VoteType.DOWN]),
        )

    async def save(self, user: User) -> User:
        """Save a user's profile row (create or update).

        Karma is only written on insert; afterwards it changes through
        ``adjust_karma``.

        Args:
            user: User to save

        Returns:
            Saved user
        """
        user_dict = user_to_dict(user)
        stmt = insert(users_table).values(**user_dict)
        stmt = stmt.on_conflict_do_update(
            index_elements=[users_table.c.id],
            set_={
                "handle": stmt.excluded.handle,
                "email": stmt.excluded.email,
                "role": stmt.excluded.role,
                "updated_at": stmt.excluded.updated_at,
            },
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return user

    async def push_vote(
        self,
        user_id: UserId,
        kind: VotableType,
        vote_type: VoteType,
        votable_id: UUID,
    ) -> bool:
        """Record a vote unless the user already has one on the document."""
        stmt = (
            insert(votes_table)
            .values(
                user_id=user_id,
                votable_type=kind.value,
                votable_id=votable_id,
                vote_type=vote_type.value,
            )
            .on_conflict_do_nothing(
                index_elements=[
                    votes_table.c.user_id,
                    votes_table.c.votable_type,
                    votes_table.c.votable_id,
                ]
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def pull_vote(
        self,
        user_id: UserId,
        kind: VotableType,
        vote_type: VoteType,
        votable_id: UUID,
    ) -> bool:
        """Delete a vote if it exists with the given direction."""
        stmt = delete(votes_table).where(
            and_(
                votes_table.c.user_id == user_id,
                votes_table.c.votable_type == kind.value,
                votes_table.c.votable_id == votable_id,
                votes_table.c.vote_type == vote_type.value,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def adjust_karma(self, user_id: UserId, delta: int) -> None:
        """Atomically add delta to the user's karma.

        Args:
            user_id: User ID to update
            delta: Signed amount, karma may go negative
        """
        stmt = (
            users_table.update()
            .where(users_table.c.id == user_id)
            .values(karma=users_table.c.karma + delta)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def add_subscription(
        self, user_id: UserId, community_id: CommunityId
    ) -> bool:
        """Subscribe unless already subscribed."""
        stmt = (
            insert(user_subscriptions_table)
            .values(user_id=user_id, community_id=community_id)
            .on_conflict_do_nothing()
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def remove_subscription(
        self, user_id: UserId, community_id: CommunityId
    ) -> bool:
        """Unsubscribe if subscribed."""
        stmt = delete(user_subscriptions_table).where(
            and_(
                user_subscriptions_table.c.user_id == user_id,
                user_subscriptions_table.c.community_id == community_id,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
