"""PostgreSQL implementations of the Post and Comment repositories."""

from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar
from uuid import UUID

from sqlalchemy import Table, and_, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.error import NegativeCounterError
from agora.domain.model import Comment, Post
from agora.domain.model.votable import VotableDocument
from agora.domain.repository import CommentRepository, PostRepository
from agora.domain.value import PostId, VoteType
from agora.persistence.mappers import (
    comment_to_dict,
    post_to_dict,
    row_to_comment,
    row_to_post,
)
from agora.persistence.tables import comments_table, posts_table

D = TypeVar("D", bound=VotableDocument)

# Counters are never rewritten by save(); they move through adjust_votes
COUNTER_COLUMNS = ("upvotes", "downvotes")


class _PostgresVotableRepository(Generic[D]):
    """Queries shared by posts and comments."""

    table: Table
    from_row: Callable[[Dict[str, Any]], D]
    to_dict: Callable[[D], Dict[str, Any]]

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, document_id: UUID) -> Optional[D]:
        """Find a document by ID."""
        stmt = select(self.table).where(self.table.c.id == document_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return self.from_row(dict(row)) if row else None

    async def save(self, document: D) -> D:
        """Save a document (create or update its content)."""
        values = self.to_dict(document)
        stmt = insert(self.table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[self.table.c.id],
            set_={
                key: stmt.excluded[key]
                for key in values
                if key not in COUNTER_COLUMNS and key != "id"
            },
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return document

    async def delete(self, document_id: UUID) -> bool:
        """Delete a document. Dependent rows go by ON DELETE CASCADE."""
        stmt = self.table.delete().where(self.table.c.id == document_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def adjust_votes(
        self, document_id: UUID, vote_type: VoteType, delta: int
    ) -> None:
        """Atomically move one vote counter by delta.

        Raises:
            NegativeCounterError: If the counter would drop below zero
        """
        column = (
            self.table.c.upvotes if vote_type is VoteType.UP else self.table.c.downvotes
        )
        stmt = (
            self.table.update()
            .where(and_(self.table.c.id == document_id, column + delta >= 0))
            .values({column: column + delta})
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        updated = result.rowcount > 0  # type: ignore[attr-defined]
        if not updated and await self.find_by_id(document_id):
            raise NegativeCounterError(str(document_id), column.name)


class PostgresPostRepository(_PostgresVotableRepository[Post], PostRepository):
    """PostgreSQL implementation of PostRepository."""

    table = posts_table
    from_row = staticmethod(row_to_post)
    to_dict = staticmethod(post_to_dict)


class PostgresCommentRepository(_PostgresVotableRepository[Comment], CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    table = comments_table
    from_row = staticmethod(row_to_comment)
    to_dict = staticmethod(comment_to_dict)

    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments on a post, oldest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.post_id == post_id)
            .order_by(comments_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(dict(row)) for row in result.mappings().all()]
