"""Domain value objects for Agora.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum
from uuid import UUID

from pydantic import Field, field_validator

from agora.domain.value.common import RootValueObject, ValueObject

# ASCII letters, digits and underscores, the whole string
COMMUNITY_NAME_PATTERN = re.compile(r"\w+", re.ASCII)


class VotableType(str, Enum):
    """Kind of document that can be voted on."""

    POST = "post"
    COMMENT = "comment"


class VoteType(str, Enum):
    """Direction of a vote."""

    UP = "up"
    DOWN = "down"

    @property
    def karma_delta(self) -> int:
        """Karma the document creator gains when this vote is cast."""
        return 1 if self is VoteType.UP else -1

    @property
    def verb(self) -> str:
        return "upvote" if self is VoteType.UP else "downvote"


class VoteState(str, Enum):
    """A user's current vote on one document."""

    NONE = "none"
    UPVOTED = "upvoted"
    DOWNVOTED = "downvoted"

    @property
    def vote_type(self) -> VoteType | None:
        if self is VoteState.UPVOTED:
            return VoteType.UP
        if self is VoteState.DOWNVOTED:
            return VoteType.DOWN
        return None


class VoteIntent(str, Enum):
    """Transition a caller asks the vote engine to apply."""

    UPVOTE = "upvote"
    DOWNVOTE = "downvote"
    REMOVE_UPVOTE = "removeUpvote"
    REMOVE_DOWNVOTE = "removeDownvote"

    @property
    def vote_type(self) -> VoteType:
        if self in (VoteIntent.UPVOTE, VoteIntent.REMOVE_UPVOTE):
            return VoteType.UP
        return VoteType.DOWN

    @property
    def is_removal(self) -> bool:
        return self in (VoteIntent.REMOVE_UPVOTE, VoteIntent.REMOVE_DOWNVOTE)


class UserRole(str, Enum):
    """Platform-wide role."""

    USER = "user"
    ADMIN = "admin"


class Handle(RootValueObject[str]):
    """Human-readable user handle."""

    @field_validator("root")
    @classmethod
    def validate_handle_format(cls, v: str) -> str:
        """Validate handle is not empty and within length limits."""
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Handle must be 1-255 characters")
        return v


class CommunityName(RootValueObject[str]):
    """Community name: letters, digits and underscores only."""

    @field_validator("root")
    @classmethod
    def validate_name_format(cls, v: str) -> str:
        if not COMMUNITY_NAME_PATTERN.fullmatch(v):
            raise ValueError(
                "Community name can only contain letters, numbers and underscores"
            )
        if len(v) > 100:
            raise ValueError("Community name must be at most 100 characters")
        return v

    @classmethod
    def is_valid(cls, v: str) -> bool:
        return bool(COMMUNITY_NAME_PATTERN.fullmatch(v)) and len(v) <= 100


class VoteSets(ValueObject):
    """A user's upvoted and downvoted document ids for one document kind.

    An id is in at most one of the two sets. The model does not enforce this
    on load so that corrupted records can be detected by the vote engine
    instead of failing deserialisation.
    """

    upvoted: frozenset[UUID] = Field(default_factory=frozenset)
    downvoted: frozenset[UUID] = Field(default_factory=frozenset)

    def of(self, vote_type: VoteType) -> frozenset[UUID]:
        return self.upvoted if vote_type is VoteType.UP else self.downvoted

    def with_added(self, vote_type: VoteType, votable_id: UUID) -> "VoteSets":
        if vote_type is VoteType.UP:
            return self.model_copy(update={"upvoted": self.upvoted | {votable_id}})
        return self.model_copy(update={"downvoted": self.downvoted | {votable_id}})

    def with_removed(self, vote_type: VoteType, votable_id: UUID) -> "VoteSets":
        if vote_type is VoteType.UP:
            return self.model_copy(update={"upvoted": self.upvoted - {votable_id}})
        return self.model_copy(update={"downvoted": self.downvoted - {votable_id}})
