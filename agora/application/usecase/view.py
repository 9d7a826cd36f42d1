"""Response models shared by use cases.

Domain models hold frozensets and value objects; these are their plain
JSON shapes as returned by the API.
"""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel

from agora.domain.model import Comment, Community, Post, User


def _ids(values) -> list[str]:
    return sorted(str(v) for v in values)


class UserView(BaseModel):
    """Public view of a user, including karma and votes cast."""

    id: str
    handle: str
    role: str
    karma: int
    upvoted_posts: list[str]
    downvoted_posts: list[str]
    upvoted_comments: list[str]
    downvoted_comments: list[str]
    subscribed_communities: list[str]
    created_at: datetime

    @classmethod
    def from_domain(cls, user: User) -> "UserView":
        return cls(
            id=str(user.id),
            handle=user.handle.root,
            role=user.role.value,
            karma=user.karma,
            upvoted_posts=_ids(user.post_votes.upvoted),
            downvoted_posts=_ids(user.post_votes.downvoted),
            upvoted_comments=_ids(user.comment_votes.upvoted),
            downvoted_comments=_ids(user.comment_votes.downvoted),
            subscribed_communities=_ids(user.subscribed_communities),
            created_at=user.created_at,
        )


class PostView(BaseModel):
    """A post with its vote counters."""

    kind: Literal["post"] = "post"
    id: str
    creator_id: str
    community_id: str
    title: str
    description: Optional[str]
    content: Optional[str]
    media_urls: list[str]
    upvotes: int
    downvotes: int
    score: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, post: Post) -> "PostView":
        return cls(
            id=str(post.id),
            creator_id=str(post.creator_id),
            community_id=str(post.community_id),
            title=post.title,
            description=post.description,
            content=post.content,
            media_urls=list(post.media_urls),
            upvotes=post.upvotes,
            downvotes=post.downvotes,
            score=post.score,
            created_at=post.created_at,
            updated_at=post.updated_at,
        )


class CommentView(BaseModel):
    """A comment with its vote counters."""

    kind: Literal["comment"] = "comment"
    id: str
    post_id: str
    parent_id: Optional[str]
    creator_id: str
    community_id: str
    content: str
    upvotes: int
    downvotes: int
    score: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, comment: Comment) -> "CommentView":
        return cls(
            id=str(comment.id),
            post_id=str(comment.post_id),
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            creator_id=str(comment.creator_id),
            community_id=str(comment.community_id),
            content=comment.content,
            upvotes=comment.upvotes,
            downvotes=comment.downvotes,
            score=comment.score,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )


class CommunityView(BaseModel):
    """A community with its moderators and bans."""

    id: str
    name: str
    creator_id: str
    moderator_ids: list[str]
    banned_user_ids: list[str]
    subscribers: int
    description: Optional[str]
    rules: list[str]
    avatar: Optional[str]
    cover: Optional[str]
    welcome_message: Optional[str]
    user_flairs: list[str]
    post_flairs: list[str]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, community: Community) -> "CommunityView":
        return cls(
            id=str(community.id),
            name=community.name.root,
            creator_id=str(community.creator_id),
            moderator_ids=_ids(community.moderator_ids),
            banned_user_ids=_ids(community.banned_user_ids),
            subscribers=community.subscribers,
            description=community.description,
            rules=list(community.rules),
            avatar=community.avatar,
            cover=community.cover,
            welcome_message=community.welcome_message,
            user_flairs=list(community.user_flairs),
            post_flairs=list(community.post_flairs),
            created_at=community.created_at,
            updated_at=community.updated_at,
        )
