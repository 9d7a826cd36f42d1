"""Unit tests for the conditional writes of InMemoryUserRepository."""

from uuid import uuid4

import pytest

from agora.domain.value import CommunityId, UserId, VotableType, VoteType
from agora.persistence.repository.inmemory import InMemoryStore, InMemoryUserRepository
from tests.conftest import make_user


@pytest.fixture
def user_repo():
    return InMemoryUserRepository(InMemoryStore())


class TestPushVote:
    """push_vote only succeeds when the id is in neither vote set."""

    @pytest.mark.asyncio
    async def test_push_into_empty(self, user_repo):
        user = await user_repo.save(make_user())
        post_id = uuid4()

        assert await user_repo.push_vote(user.id, VotableType.POST, VoteType.UP, post_id)

        stored = await user_repo.find_by_id(user.id)
        assert stored.post_votes.upvoted == frozenset({post_id})

    @pytest.mark.asyncio
    async def test_push_refused_when_opposite_vote_held(self, user_repo):
        user = await user_repo.save(make_user())
        post_id = uuid4()
        await user_repo.push_vote(user.id, VotableType.POST, VoteType.DOWN, post_id)

        assert not await user_repo.push_vote(
            user.id, VotableType.POST, VoteType.UP, post_id
        )

        stored = await user_repo.find_by_id(user.id)
        assert stored.post_votes.upvoted == frozenset()
        assert stored.post_votes.downvoted == frozenset({post_id})

    @pytest.mark.asyncio
    async def test_push_for_missing_user(self, user_repo):
        assert not await user_repo.push_vote(
            UserId(uuid4()), VotableType.POST, VoteType.UP, uuid4()
        )


class TestPullVote:
    """pull_vote only succeeds when the id is in the named set."""

    @pytest.mark.asyncio
    async def test_pull_held_vote(self, user_repo):
        user = await user_repo.save(make_user())
        comment_id = uuid4()
        await user_repo.push_vote(user.id, VotableType.COMMENT, VoteType.UP, comment_id)

        assert await user_repo.pull_vote(
            user.id, VotableType.COMMENT, VoteType.UP, comment_id
        )
        assert not await user_repo.pull_vote(
            user.id, VotableType.COMMENT, VoteType.UP, comment_id
        )

    @pytest.mark.asyncio
    async def test_pull_wrong_direction(self, user_repo):
        user = await user_repo.save(make_user())
        comment_id = uuid4()
        await user_repo.push_vote(user.id, VotableType.COMMENT, VoteType.UP, comment_id)

        assert not await user_repo.pull_vote(
            user.id, VotableType.COMMENT, VoteType.DOWN, comment_id
        )


class TestKarmaAndSubscriptions:
    """Karma is signed; subscriptions are idempotent-refusing."""

    @pytest.mark.asyncio
    async def test_karma_can_go_negative(self, user_repo):
        user = await user_repo.save(make_user(karma=1))

        await user_repo.adjust_karma(user.id, -3)

        assert (await user_repo.find_by_id(user.id)).karma == -2

    @pytest.mark.asyncio
    async def test_subscription_round(self, user_repo):
        user = await user_repo.save(make_user())
        community_id = CommunityId(uuid4())

        assert await user_repo.add_subscription(user.id, community_id)
        assert not await user_repo.add_subscription(user.id, community_id)
        assert await user_repo.remove_subscription(user.id, community_id)
        assert not await user_repo.remove_subscription(user.id, community_id)
