"""User aggregate root.

Users accumulate karma when other users vote on their posts and comments.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from agora.domain.model.common import DomainModel
from agora.domain.value import CommunityId, UserId, UserRole, VotableType, VoteSets
from agora.domain.value.types import Handle


class User(DomainModel):
    """User aggregate root.

    ``post_votes`` and ``comment_votes`` hold the ids of the documents this
    user has voted on, split by direction. ``karma`` is signed: downvotes on
    a user's content can push it below zero.
    """

    id: UserId
    handle: Handle
    email: Optional[str] = None
    role: UserRole = UserRole.USER
    karma: int = 0
    post_votes: VoteSets = Field(default_factory=VoteSets)
    comment_votes: VoteSets = Field(default_factory=VoteSets)
    subscribed_communities: frozenset[CommunityId] = Field(default_factory=frozenset)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_admin(self) -> bool:
        return self.role is UserRole.ADMIN

    def votes_for(self, kind: VotableType) -> VoteSets:
        """Vote sets for the given document kind."""
        if kind is VotableType.POST:
            return self.post_votes
        return self.comment_votes

    def with_votes(self, kind: VotableType, votes: VoteSets) -> "User":
        """Copy of this user with the vote sets of ``kind`` replaced."""
        if kind is VotableType.POST:
            return self.model_copy(update={"post_votes": votes})
        return self.model_copy(update={"comment_votes": votes})
