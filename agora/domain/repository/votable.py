"""Shared repository contract for votable documents."""

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar
from uuid import UUID

from agora.domain.model.votable import VotableDocument
from agora.domain.value import VoteType

D = TypeVar("D", bound=VotableDocument)


class VotableRepository(ABC, Generic[D]):
    """Persistence operations every votable document kind supports."""

    @abstractmethod
    async def find_by_id(self, document_id: UUID) -> Optional[D]:
        """Find a document by ID.

        Returns:
            The document if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, document: D) -> D:
        """Save a document (create or update)."""
        pass

    @abstractmethod
    async def delete(self, document_id: UUID) -> bool:
        """Hard-delete a document.

        Returns:
            True if a document was deleted
        """
        pass

    @abstractmethod
    async def adjust_votes(
        self, document_id: UUID, vote_type: VoteType, delta: int
    ) -> None:
        """Atomically add ``delta`` to the upvote or downvote counter.

        Args:
            document_id: Document ID
            vote_type: Which counter to change
            delta: Signed change (+1 or -1)
        """
        pass
