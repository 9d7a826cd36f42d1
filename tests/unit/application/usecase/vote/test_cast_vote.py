"""Unit tests for CastVoteUseCase."""

import pytest

from agora.application.usecase.vote import CastVoteRequest, CastVoteUseCase
from agora.domain.error import AlreadyVotedError
from agora.domain.repository import CommentRepository, PostRepository, UserRepository
from agora.domain.value import VotableType, VoteIntent
from tests.conftest import make_comment, make_community, make_post, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCastVoteUseCase:
    """Tests for CastVoteUseCase."""

    @pytest.mark.asyncio
    async def test_upvote_post_returns_post_view(self, unit_env):
        """Voting on a post returns the post with fresh counters."""
        # Arrange
        use_case = await unit_env.get(CastVoteUseCase)
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)
        author = await user_repo.save(make_user())
        voter = await user_repo.save(make_user())
        post = await post_repo.save(make_post(author, make_community(author)))

        request = CastVoteRequest(
            intent=VoteIntent.UPVOTE,
            votable_type=VotableType.POST,
            votable_id=post.id,
            user_id=str(voter.id),
        )

        # Act
        response = await use_case.execute(request)

        # Assert
        assert response.document.kind == "post"
        assert response.document.id == str(post.id)
        assert response.document.upvotes == 1
        assert response.document.score == 1

    @pytest.mark.asyncio
    async def test_downvote_comment_returns_comment_view(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CastVoteUseCase)
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        author = await user_repo.save(make_user())
        voter = await user_repo.save(make_user())
        post = await post_repo.save(make_post(author, make_community(author)))
        comment = await comment_repo.save(make_comment(author, post))

        # Act
        response = await use_case.execute(
            CastVoteRequest(
                intent=VoteIntent.DOWNVOTE,
                votable_type=VotableType.COMMENT,
                votable_id=comment.id,
                user_id=str(voter.id),
            )
        )

        # Assert
        assert response.document.kind == "comment"
        assert response.document.post_id == str(post.id)
        assert response.document.downvotes == 1
        assert response.document.score == -1

    @pytest.mark.asyncio
    async def test_domain_errors_propagate(self, unit_env):
        use_case = await unit_env.get(CastVoteUseCase)
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)
        author = await user_repo.save(make_user())
        post = await post_repo.save(make_post(author, make_community(author)))
        request = CastVoteRequest(
            intent=VoteIntent.UPVOTE,
            votable_type=VotableType.POST,
            votable_id=post.id,
            user_id=str(author.id),
        )
        await use_case.execute(request)

        with pytest.raises(AlreadyVotedError):
            await use_case.execute(request)
