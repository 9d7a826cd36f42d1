"""In-memory votable document repositories for testing."""

from typing import Generic, Optional, TypeVar
from uuid import UUID

from agora.domain.model import Comment, Post
from agora.domain.model.votable import VotableDocument
from agora.domain.repository import CommentRepository, PostRepository
from agora.domain.value import PostId, VoteType

from .store import InMemoryStore

D = TypeVar("D", bound=VotableDocument)


class _InMemoryVotableRepository(Generic[D]):
    """Dict-backed storage shared by posts and comments."""

    def __init__(self, store: InMemoryStore, documents: dict) -> None:
        self._store = store
        self._documents: dict[UUID, D] = documents

    async def find_by_id(self, document_id: UUID) -> Optional[D]:
        """Find a document by ID."""
        return self._documents.get(document_id)

    async def save(self, document: D) -> D:
        """Save or update a document."""
        self._documents[document.id] = document
        return document

    async def adjust_votes(
        self, document_id: UUID, vote_type: VoteType, delta: int
    ) -> None:
        """Move one vote counter by delta."""
        document = self._documents.get(document_id)
        if document:
            self._documents[document_id] = document.with_vote_delta(vote_type, delta)

    def _delete_comments(self, doomed: set[UUID]) -> None:
        # Replies go with their parent, like the ON DELETE CASCADE in Postgres
        while doomed:
            for comment_id in doomed:
                self._store.comments.pop(comment_id, None)
            doomed = {
                c.id for c in self._store.comments.values() if c.parent_id in doomed
            }


class InMemoryPostRepository(_InMemoryVotableRepository[Post], PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        super().__init__(store, store.posts)

    async def delete(self, document_id: UUID) -> bool:
        """Delete a post and its comments."""
        if self._documents.pop(document_id, None) is None:
            return False
        self._delete_comments(
            {c.id for c in self._store.comments.values() if c.post_id == document_id}
        )
        return True


class InMemoryCommentRepository(_InMemoryVotableRepository[Comment], CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        super().__init__(store, store.comments)

    async def delete(self, document_id: UUID) -> bool:
        """Delete a comment and its replies."""
        if document_id not in self._documents:
            return False
        self._delete_comments({document_id})
        return True

    async def find_by_post(self, post_id: PostId) -> list[Comment]:
        """Find all comments on a post, oldest first."""
        comments = [c for c in self._documents.values() if c.post_id == post_id]
        return sorted(comments, key=lambda c: c.created_at)
