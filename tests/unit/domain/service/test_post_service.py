"""Unit tests for PostService."""

from uuid import uuid4

import pytest

from agora.domain.error import BannedFromCommunityError, NotAuthorizedError, NotFoundError
from agora.domain.repository import (
    CommentRepository,
    CommunityRepository,
    PostRepository,
    UserRepository,
)
from agora.domain.service import PostService
from agora.domain.value import CommunityId, PostId, UserRole
from agora.persistence.repository.inmemory import InMemoryStore
from tests.conftest import make_comment, make_community, make_post, make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestCreatePost:
    """Tests for create_post."""

    @pytest.mark.asyncio
    async def test_create_post(self, unit_env):
        # Arrange
        post_service = await unit_env.get(PostService)
        user_repo = await unit_env.get(UserRepository)
        community_repo = await unit_env.get(CommunityRepository)
        post_repo = await unit_env.get(PostRepository)
        author = await user_repo.save(make_user())
        community = await community_repo.save(make_community(author))

        # Act
        result = await post_service.create_post(
            author.id,
            community.id,
            "Hello",
            content="First!",
            media_urls=["https://example.com/a.png"],
        )

        # Assert
        assert result.title == "Hello"
        assert result.community_id == community.id
        assert (result.upvotes, result.downvotes) == (0, 0)
        assert await post_repo.find_by_id(result.id) == result

    @pytest.mark.asyncio
    async def test_banned_author_writes_nothing(self, unit_env):
        """A banned user is refused before the post is stored."""
        # Arrange
        post_service = await unit_env.get(PostService)
        user_repo = await unit_env.get(UserRepository)
        community_repo = await unit_env.get(CommunityRepository)
        store = await unit_env.get(InMemoryStore)
        creator = await user_repo.save(make_user())
        banned = await user_repo.save(make_user())
        community = await community_repo.save(
            make_community(creator, banned_user_ids=frozenset({banned.id}))
        )

        # Act / Assert
        with pytest.raises(BannedFromCommunityError):
            await post_service.create_post(banned.id, community.id, "Let me in")

        assert store.posts == {}

    @pytest.mark.asyncio
    async def test_missing_community(self, unit_env):
        post_service = await unit_env.get(PostService)
        user_repo = await unit_env.get(UserRepository)
        author = await user_repo.save(make_user())

        with pytest.raises(NotFoundError, match="Community not found"):
            await post_service.create_post(author.id, CommunityId(uuid4()), "Lost")


class TestDeletePost:
    """Tests for delete_post."""

    @pytest.mark.asyncio
    async def test_author_deletes_with_comments(self, unit_env):
        # Arrange
        post_service = await unit_env.get(PostService)
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        author = await user_repo.save(make_user())
        post = await post_repo.save(make_post(author, make_community(author)))
        comment = await comment_repo.save(make_comment(author, post))

        # Act
        await post_service.delete_post(author.id, post.id)

        # Assert
        assert await post_repo.find_by_id(post.id) is None
        assert await comment_repo.find_by_id(comment.id) is None

    @pytest.mark.asyncio
    async def test_moderator_deletes(self, unit_env):
        post_service = await unit_env.get(PostService)
        user_repo = await unit_env.get(UserRepository)
        community_repo = await unit_env.get(CommunityRepository)
        post_repo = await unit_env.get(PostRepository)
        creator = await user_repo.save(make_user())
        author = await user_repo.save(make_user())
        community = await community_repo.save(make_community(creator))
        post = await post_repo.save(make_post(author, community))

        await post_service.delete_post(creator.id, post.id)

        assert await post_repo.find_by_id(post.id) is None

    @pytest.mark.asyncio
    async def test_admin_deletes_after_community_is_gone(self, unit_env):
        post_service = await unit_env.get(PostService)
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)
        author = await user_repo.save(make_user())
        admin = await user_repo.save(make_user(role=UserRole.ADMIN))
        # Community never saved
        post = await post_repo.save(make_post(author, make_community(author)))

        await post_service.delete_post(admin.id, post.id)

        assert await post_repo.find_by_id(post.id) is None

    @pytest.mark.asyncio
    async def test_stranger_cannot_delete(self, unit_env):
        post_service = await unit_env.get(PostService)
        user_repo = await unit_env.get(UserRepository)
        community_repo = await unit_env.get(CommunityRepository)
        post_repo = await unit_env.get(PostRepository)
        author = await user_repo.save(make_user())
        stranger = await user_repo.save(make_user())
        community = await community_repo.save(make_community(author))
        post = await post_repo.save(make_post(author, community))

        with pytest.raises(NotAuthorizedError):
            await post_service.delete_post(stranger.id, post.id)

        assert await post_repo.find_by_id(post.id) is not None

    @pytest.mark.asyncio
    async def test_missing_post(self, unit_env):
        post_service = await unit_env.get(PostService)
        user_repo = await unit_env.get(UserRepository)
        author = await user_repo.save(make_user())

        with pytest.raises(NotFoundError, match="Post not found"):
            await post_service.delete_post(author.id, PostId(uuid4()))
