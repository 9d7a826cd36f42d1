"""Shared state behind the in-memory repositories.

One store lives for the lifetime of a DI container, so records written in
one request are visible in the next. Every repository method mutates the
store without awaiting, which makes each call atomic under asyncio.
"""

from dataclasses import dataclass, field

from agora.domain.model import Comment, Community, Post, User
from agora.domain.value import CommentId, CommunityId, PostId, UserId


@dataclass
class InMemoryStore:
    """Records keyed by id, one dict per aggregate."""

    users: dict[UserId, User] = field(default_factory=dict)
    communities: dict[CommunityId, Community] = field(default_factory=dict)
    posts: dict[PostId, Post] = field(default_factory=dict)
    comments: dict[CommentId, Comment] = field(default_factory=dict)
