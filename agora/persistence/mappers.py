"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping. Set-valued fields
(vote sets, moderators, bans, subscriptions) come from join tables and are
passed in by the repositories.
"""

from typing import Any, Dict, Iterable
from uuid import UUID

from agora.domain.model import Comment, Community, Post, User
from agora.domain.value import (
    CommentId,
    CommunityId,
    CommunityName,
    PostId,
    UserId,
    UserRole,
    VoteSets,
)
from agora.domain.value.types import Handle


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(
    row: Dict[str, Any],
    post_votes: VoteSets | None = None,
    comment_votes: VoteSets | None = None,
    subscribed_communities: Iterable[UUID] = (),
) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict
        post_votes: The user's post vote sets
        comment_votes: The user's comment vote sets
        subscribed_communities: IDs of the communities the user subscribes to

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        handle=Handle(row["handle"]),
        email=row.get("email"),
        role=UserRole(row.get("role", "user")),
        karma=row["karma"],
        post_votes=post_votes or VoteSets(),
        comment_votes=comment_votes or VoteSets(),
        subscribed_communities=frozenset(
            CommunityId(_uuid(c)) for c in subscribed_communities
        ),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to a users row.

    Vote sets and subscriptions are excluded; they live in join tables.
    """
    return {
        "id": user.id,
        "handle": user.handle.root,
        "email": user.email,
        "role": user.role.value,
        "karma": user.karma,
        "created_at": user.created_at,
        "updated_at": user.updated_at,
    }


def row_to_community(
    row: Dict[str, Any],
    moderator_ids: Iterable[UUID],
    banned_user_ids: Iterable[UUID] = (),
) -> Community:
    """Convert database row to Community domain model.

    Args:
        row: Database row as dict
        moderator_ids: Rows of community_moderators
        banned_user_ids: Rows of community_bans

    Returns:
        Community domain model
    """
    return Community(
        id=CommunityId(_uuid(row["id"])),
        name=CommunityName(row["name"]),
        creator_id=UserId(_uuid(row["creator_id"])),
        moderator_ids=frozenset(UserId(_uuid(m)) for m in moderator_ids),
        banned_user_ids=frozenset(UserId(_uuid(b)) for b in banned_user_ids),
        subscribers=row["subscribers"],
        description=row.get("description"),
        rules=list(row.get("rules") or []),
        avatar=row.get("avatar"),
        cover=row.get("cover"),
        welcome_message=row.get("welcome_message"),
        user_flairs=list(row.get("user_flairs") or []),
        post_flairs=list(row.get("post_flairs") or []),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def community_to_dict(community: Community) -> Dict[str, Any]:
    """Convert Community domain model to a communities row."""
    data = community.model_dump(exclude={"moderator_ids", "banned_user_ids"})
    data["name"] = community.name.root
    return data


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model."""
    return Post(
        id=PostId(_uuid(row["id"])),
        creator_id=UserId(_uuid(row["creator_id"])),
        community_id=CommunityId(_uuid(row["community_id"])),
        title=row["title"],
        description=row.get("description"),
        content=row.get("content"),
        media_urls=list(row.get("media_urls") or []),
        upvotes=row["upvotes"],
        downvotes=row["downvotes"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to a posts row."""
    return post.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    return Comment(
        id=CommentId(_uuid(row["id"])),
        post_id=PostId(_uuid(row["post_id"])),
        parent_id=CommentId(_uuid(row["parent_id"])) if row.get("parent_id") else None,
        creator_id=UserId(_uuid(row["creator_id"])),
        community_id=CommunityId(_uuid(row["community_id"])),
        content=row["content"],
        upvotes=row["upvotes"],
        downvotes=row["downvotes"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to a comments row."""
    return comment.model_dump()
