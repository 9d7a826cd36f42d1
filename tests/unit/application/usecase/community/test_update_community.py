"""Unit tests for UpdateCommunityUseCase and DeleteCommunityUseCase."""

import pytest

from agora.application.usecase.community import (
    DeleteCommunityRequest,
    DeleteCommunityUseCase,
    UpdateCommunityRequest,
    UpdateCommunityUseCase,
)
from agora.domain.error import CommunityDeletionForbiddenError
from agora.domain.repository import CommunityRepository, UserRepository
from tests.conftest import make_community, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestUpdateCommunityUseCase:
    """Tests for UpdateCommunityUseCase."""

    @pytest.mark.asyncio
    async def test_unset_fields_are_kept(self, unit_env):
        # Arrange
        use_case = await unit_env.get(UpdateCommunityUseCase)
        user_repo = await unit_env.get(UserRepository)
        community_repo = await unit_env.get(CommunityRepository)
        creator = await user_repo.save(make_user())
        community = await community_repo.save(
            make_community(creator, description="Keep me", rules=["One"])
        )

        # Act
        response = await use_case.execute(
            UpdateCommunityRequest(
                community_id=community.id,
                user_id=str(creator.id),
                welcome_message="Welcome!",
            )
        )

        # Assert
        assert response.community.welcome_message == "Welcome!"
        assert response.community.description == "Keep me"
        assert response.community.rules == ["One"]
        assert response.community.name == community.name.root


class TestDeleteCommunityUseCase:
    """Tests for DeleteCommunityUseCase."""

    @pytest.mark.asyncio
    async def test_stranger_forbidden(self, unit_env):
        use_case = await unit_env.get(DeleteCommunityUseCase)
        user_repo = await unit_env.get(UserRepository)
        community_repo = await unit_env.get(CommunityRepository)
        creator = await user_repo.save(make_user())
        stranger = await user_repo.save(make_user())
        community = await community_repo.save(make_community(creator))

        with pytest.raises(CommunityDeletionForbiddenError):
            await use_case.execute(
                DeleteCommunityRequest(
                    community_id=community.id, user_id=str(stranger.id)
                )
            )
