"""Domain value objects for Agora."""

from agora.domain.value.identifiers import (
    CommentId,
    CommunityId,
    PostId,
    UserId,
)
from agora.domain.value.types import (
    CommunityName,
    Handle,
    UserRole,
    VotableType,
    VoteIntent,
    VoteSets,
    VoteState,
    VoteType,
)

__all__ = [
    # Identifiers
    "UserId",
    "CommunityId",
    "PostId",
    "CommentId",
    # Types
    "CommunityName",
    "Handle",
    "UserRole",
    "VotableType",
    "VoteIntent",
    "VoteSets",
    "VoteState",
    "VoteType",
]
