"""Unit tests for the in-memory post and comment repositories."""

import pytest

from agora.domain.error import NegativeCounterError
from agora.domain.value import VoteType
from agora.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryCommunityRepository,
    InMemoryPostRepository,
    InMemoryStore,
)
from tests.conftest import make_comment, make_community, make_post, make_user


@pytest.fixture
def store():
    return InMemoryStore()


class TestAdjustVotes:
    """Counter updates."""

    @pytest.mark.asyncio
    async def test_adjust_counters(self, store):
        posts = InMemoryPostRepository(store)
        author = make_user()
        post = await posts.save(make_post(author, make_community(author)))

        await posts.adjust_votes(post.id, VoteType.UP, 1)
        await posts.adjust_votes(post.id, VoteType.DOWN, 1)
        await posts.adjust_votes(post.id, VoteType.UP, 1)

        stored = await posts.find_by_id(post.id)
        assert (stored.upvotes, stored.downvotes, stored.score) == (2, 1, 1)

    @pytest.mark.asyncio
    async def test_counter_never_negative(self, store):
        comments = InMemoryCommentRepository(store)
        author = make_user()
        post = make_post(author, make_community(author))
        comment = await comments.save(make_comment(author, post))

        with pytest.raises(NegativeCounterError):
            await comments.adjust_votes(comment.id, VoteType.DOWN, -1)

        assert (await comments.find_by_id(comment.id)).downvotes == 0


class TestDeletes:
    """Deletes cascade from posts to comments and from comments to replies."""

    @pytest.mark.asyncio
    async def test_post_delete_cascades_to_replies(self, store):
        posts = InMemoryPostRepository(store)
        comments = InMemoryCommentRepository(store)
        author = make_user()
        post = await posts.save(make_post(author, make_community(author)))
        top = await comments.save(make_comment(author, post))
        await comments.save(make_comment(author, post, parent_id=top.id))

        assert await posts.delete(post.id)

        assert store.comments == {}
        assert not await posts.delete(post.id)

    @pytest.mark.asyncio
    async def test_community_delete_keeps_posts(self, store):
        posts = InMemoryPostRepository(store)
        communities = InMemoryCommunityRepository(store)
        author = make_user()
        community = await communities.save(make_community(author))
        post = await posts.save(make_post(author, community))

        assert await communities.delete(community.id)

        assert await posts.find_by_id(post.id) == post


class TestCommunitySubscribers:
    """Subscriber counter clamps at zero."""

    @pytest.mark.asyncio
    async def test_subscribers_clamped(self, store):
        communities = InMemoryCommunityRepository(store)
        community = await communities.save(make_community(make_user()))

        await communities.adjust_subscribers(community.id, 1)
        await communities.adjust_subscribers(community.id, -2)

        assert (await communities.find_by_id(community.id)).subscribers == 0
