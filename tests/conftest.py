"""Test configuration and fixtures."""

from uuid import uuid4

import logfire
import pytest
from fastapi.testclient import TestClient

from agora.config import Settings
from agora.domain.model import Comment, Community, Post, User
from agora.domain.service import JWTService
from agora.domain.value import (
    CommentId,
    CommunityId,
    CommunityName,
    PostId,
    UserId,
    UserRole,
)
from agora.domain.value.types import Handle
from agora.interface.api.app import create_app
from agora.persistence.repository.inmemory import InMemoryStore
from tests.di import build_test_container

# Keep spans local during tests
logfire.configure(send_to_logfire=False, console=False)


def make_user(karma: int = 0, role: UserRole = UserRole.USER, **kwargs) -> User:
    """Build a user with a random id and handle."""
    user_id = UserId(uuid4())
    return User(
        id=user_id,
        handle=Handle(f"user-{str(user_id)[:8]}"),
        karma=karma,
        role=role,
        **kwargs,
    )


def make_community(creator: User, name: str | None = None, **kwargs) -> Community:
    """Build a community moderated by its creator."""
    moderators = kwargs.pop("moderator_ids", frozenset()) | {creator.id}
    return Community(
        id=CommunityId(uuid4()),
        name=CommunityName(name or f"community_{uuid4().hex[:8]}"),
        creator_id=creator.id,
        moderator_ids=moderators,
        **kwargs,
    )


def make_post(creator: User, community: Community, **kwargs) -> Post:
    """Build a post with no votes."""
    return Post(
        id=PostId(uuid4()),
        creator_id=creator.id,
        community_id=community.id,
        title=kwargs.pop("title", "Test Post"),
        **kwargs,
    )


def make_comment(creator: User, post: Post, **kwargs) -> Comment:
    """Build a comment on ``post`` with no votes."""
    return Comment(
        id=CommentId(uuid4()),
        post_id=post.id,
        creator_id=creator.id,
        community_id=post.community_id,
        content=kwargs.pop("content", "Test comment"),
        **kwargs,
    )


def auth_headers(user: User) -> dict[str, str]:
    """Headers sending the ``auth_token`` cookie for ``user``."""
    token = JWTService(Settings().auth).create_token(str(user.id), user.handle.root)
    return {"Cookie": f"auth_token={token}"}


@pytest.fixture
def store():
    """Empty in-memory store; seed it directly before making requests."""
    return InMemoryStore()


@pytest.fixture
def client(store):
    """Test client over the full app, backed by ``store``."""
    app = create_app(build_test_container(store=store))
    return TestClient(app, raise_server_exceptions=False)
