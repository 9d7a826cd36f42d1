"""Unit tests for CommentService."""

from uuid import uuid4

import pytest

from agora.domain.error import (
    BannedFromCommunityError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from agora.domain.repository import (
    CommentRepository,
    CommunityRepository,
    PostRepository,
    UserRepository,
)
from agora.domain.service import CommentService
from agora.domain.value import CommentId, PostId
from agora.persistence.repository.inmemory import InMemoryStore
from tests.conftest import make_comment, make_community, make_post, make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


async def seed_post(unit_env, **community_kwargs):
    """Save a community creator, their community and one post in it."""
    user_repo = await unit_env.get(UserRepository)
    community_repo = await unit_env.get(CommunityRepository)
    post_repo = await unit_env.get(PostRepository)

    creator = await user_repo.save(make_user())
    community = await community_repo.save(make_community(creator, **community_kwargs))
    post = await post_repo.save(make_post(creator, community))
    return creator, community, post


class TestCreateComment:
    """Tests for create_comment."""

    @pytest.mark.asyncio
    async def test_top_level_comment(self, unit_env):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        user_repo = await unit_env.get(UserRepository)
        _, community, post = await seed_post(unit_env)
        author = await user_repo.save(make_user())

        # Act
        result = await comment_service.create_comment(author.id, post.id, "Nice")

        # Assert
        assert result.post_id == post.id
        assert result.parent_id is None
        assert result.community_id == community.id
        assert result.content == "Nice"

    @pytest.mark.asyncio
    async def test_reply(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        creator, _, post = await seed_post(unit_env)
        parent = await comment_service.create_comment(creator.id, post.id, "Top")

        reply = await comment_service.create_comment(
            creator.id, post.id, "Reply", parent_id=parent.id
        )

        assert reply.parent_id == parent.id

    @pytest.mark.asyncio
    async def test_parent_on_other_post(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        post_repo = await unit_env.get(PostRepository)
        creator, community, post = await seed_post(unit_env)
        other_post = await post_repo.save(make_post(creator, community))
        parent = await comment_service.create_comment(creator.id, other_post.id, "Top")

        with pytest.raises(ValidationError):
            await comment_service.create_comment(
                creator.id, post.id, "Reply", parent_id=parent.id
            )

    @pytest.mark.asyncio
    async def test_missing_parent(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        creator, _, post = await seed_post(unit_env)

        with pytest.raises(NotFoundError, match="Comment not found"):
            await comment_service.create_comment(
                creator.id, post.id, "Reply", parent_id=CommentId(uuid4())
            )

    @pytest.mark.asyncio
    async def test_banned_author_writes_nothing(self, unit_env):
        """Bans apply to the community of the post being commented on."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        user_repo = await unit_env.get(UserRepository)
        store = await unit_env.get(InMemoryStore)
        banned = await user_repo.save(make_user())
        _, _, post = await seed_post(
            unit_env, banned_user_ids=frozenset({banned.id})
        )

        # Act / Assert
        with pytest.raises(BannedFromCommunityError):
            await comment_service.create_comment(banned.id, post.id, "Let me in")

        assert store.comments == {}

    @pytest.mark.asyncio
    async def test_missing_post(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        user_repo = await unit_env.get(UserRepository)
        author = await user_repo.save(make_user())

        with pytest.raises(NotFoundError, match="Post not found"):
            await comment_service.create_comment(author.id, PostId(uuid4()), "Hi")


class TestGetCommentsForPost:
    """Tests for get_comments_for_post."""

    @pytest.mark.asyncio
    async def test_lists_only_that_post(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        post_repo = await unit_env.get(PostRepository)
        creator, community, post = await seed_post(unit_env)
        other_post = await post_repo.save(make_post(creator, community))
        first = await comment_service.create_comment(creator.id, post.id, "One")
        second = await comment_service.create_comment(creator.id, post.id, "Two")
        await comment_service.create_comment(creator.id, other_post.id, "Elsewhere")

        result = await comment_service.get_comments_for_post(post.id)

        assert [c.id for c in result] == [first.id, second.id]

    @pytest.mark.asyncio
    async def test_missing_post(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await comment_service.get_comments_for_post(PostId(uuid4()))


class TestDeleteComment:
    """Tests for delete_comment."""

    @pytest.mark.asyncio
    async def test_delete_removes_replies(self, unit_env):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        creator, _, post = await seed_post(unit_env)
        parent = await comment_repo.save(make_comment(creator, post))
        reply = await comment_repo.save(
            make_comment(creator, post, parent_id=parent.id)
        )
        sibling = await comment_repo.save(make_comment(creator, post))

        # Act
        await comment_service.delete_comment(creator.id, parent.id)

        # Assert
        assert await comment_repo.find_by_id(parent.id) is None
        assert await comment_repo.find_by_id(reply.id) is None
        assert await comment_repo.find_by_id(sibling.id) is not None

    @pytest.mark.asyncio
    async def test_moderator_deletes_others_comment(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        user_repo = await unit_env.get(UserRepository)
        comment_repo = await unit_env.get(CommentRepository)
        creator, _, post = await seed_post(unit_env)
        author = await user_repo.save(make_user())
        comment = await comment_repo.save(make_comment(author, post))

        await comment_service.delete_comment(creator.id, comment.id)

        assert await comment_repo.find_by_id(comment.id) is None

    @pytest.mark.asyncio
    async def test_stranger_cannot_delete(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        user_repo = await unit_env.get(UserRepository)
        comment_repo = await unit_env.get(CommentRepository)
        creator, _, post = await seed_post(unit_env)
        stranger = await user_repo.save(make_user())
        comment = await comment_repo.save(make_comment(creator, post))

        with pytest.raises(NotAuthorizedError):
            await comment_service.delete_comment(stranger.id, comment.id)
