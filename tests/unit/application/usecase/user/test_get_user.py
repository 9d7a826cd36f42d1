"""Unit tests for GetUserUseCase."""

from uuid import uuid4

import pytest

from agora.application.usecase.user import GetUserRequest, GetUserUseCase
from agora.domain.error import NotFoundError
from agora.domain.repository import UserRepository
from agora.domain.value import VoteSets
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetUserUseCase:
    """Tests for GetUserUseCase."""

    @pytest.mark.asyncio
    async def test_view_lists_votes_and_karma(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetUserUseCase)
        user_repo = await unit_env.get(UserRepository)
        post_id = uuid4()
        comment_id = uuid4()
        user = await user_repo.save(
            make_user(
                karma=-4,
                post_votes=VoteSets(upvoted=frozenset({post_id})),
                comment_votes=VoteSets(downvoted=frozenset({comment_id})),
            )
        )

        # Act
        response = await use_case.execute(GetUserRequest(user_id=user.id))

        # Assert
        assert response.user.karma == -4
        assert response.user.upvoted_posts == [str(post_id)]
        assert response.user.downvoted_posts == []
        assert response.user.downvoted_comments == [str(comment_id)]
        assert response.user.role == "user"

    @pytest.mark.asyncio
    async def test_missing_user(self, unit_env):
        use_case = await unit_env.get(GetUserUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetUserRequest(user_id=uuid4()))
