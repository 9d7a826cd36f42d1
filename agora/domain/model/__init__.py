"""Domain model entities for Agora."""

from agora.domain.model.comment import Comment
from agora.domain.model.community import Community
from agora.domain.model.post import Post
from agora.domain.model.user import User
from agora.domain.model.votable import VotableDocument

__all__ = [
    "User",
    "Community",
    "Post",
    "Comment",
    "VotableDocument",
]
