"""Votable document capability shared by posts and comments."""

from datetime import datetime
from typing import ClassVar
from uuid import UUID

from pydantic import Field

from agora.domain.error import NegativeCounterError
from agora.domain.model.common import DomainModel
from agora.domain.value import CommunityId, UserId, VotableType, VoteType


class VotableDocument(DomainModel):
    """Content that users can up- and downvote.

    ``kind`` is a class-level tag selecting which of a voter's vote sets
    tracks this document. ``upvotes`` and ``downvotes`` always equal the
    number of users whose corresponding set contains ``id``.
    """

    kind: ClassVar[VotableType]

    id: UUID
    creator_id: UserId
    community_id: CommunityId
    upvotes: int = Field(default=0, ge=0)
    downvotes: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def score(self) -> int:
        return self.upvotes - self.downvotes

    def count_of(self, vote_type: VoteType) -> int:
        return self.upvotes if vote_type is VoteType.UP else self.downvotes

    def with_vote_delta(self, vote_type: VoteType, delta: int):
        """Copy with one counter moved by ``delta``.

        Raises:
            NegativeCounterError: If the counter would drop below zero
        """
        field = "upvotes" if vote_type is VoteType.UP else "downvotes"
        value = self.count_of(vote_type) + delta
        if value < 0:
            raise NegativeCounterError(str(self.id), field)
        return self.model_copy(update={field: value})
