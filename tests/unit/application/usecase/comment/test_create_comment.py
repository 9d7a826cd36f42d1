"""Unit tests for the comment use cases."""

import pytest

from agora.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    GetCommentRequest,
    GetCommentUseCase,
    GetCommentsRequest,
    GetCommentsUseCase,
)
from agora.domain.error import NotFoundError
from agora.domain.repository import (
    CommunityRepository,
    PostRepository,
    UserRepository,
)
from tests.conftest import make_community, make_post, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCommentUseCases:
    """Create, read and delete comments through the use case layer."""

    @pytest.mark.asyncio
    async def test_reply_thread(self, unit_env):
        # Arrange
        create = await unit_env.get(CreateCommentUseCase)
        list_comments = await unit_env.get(GetCommentsUseCase)
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)
        community_repo = await unit_env.get(CommunityRepository)
        author = await user_repo.save(make_user())
        community = await community_repo.save(make_community(author))
        post = await post_repo.save(make_post(author, community))

        # Act
        top = await create.execute(
            CreateCommentRequest(
                post_id=post.id, content="Top", creator_id=str(author.id)
            )
        )
        reply = await create.execute(
            CreateCommentRequest(
                post_id=post.id,
                content="Reply",
                parent_id=top.document.id,
                creator_id=str(author.id),
            )
        )
        listed = await list_comments.execute(GetCommentsRequest(post_id=post.id))

        # Assert
        assert top.document.parent_id is None
        assert reply.document.parent_id == top.document.id
        assert [c.id for c in listed.comments] == [top.document.id, reply.document.id]

    @pytest.mark.asyncio
    async def test_delete_comment(self, unit_env):
        create = await unit_env.get(CreateCommentUseCase)
        delete = await unit_env.get(DeleteCommentUseCase)
        get = await unit_env.get(GetCommentUseCase)
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)
        community_repo = await unit_env.get(CommunityRepository)
        author = await user_repo.save(make_user())
        community = await community_repo.save(make_community(author))
        post = await post_repo.save(make_post(author, community))
        created = await create.execute(
            CreateCommentRequest(
                post_id=post.id, content="Bye", creator_id=str(author.id)
            )
        )

        await delete.execute(
            DeleteCommentRequest(
                comment_id=created.document.id, user_id=str(author.id)
            )
        )

        with pytest.raises(NotFoundError):
            await get.execute(GetCommentRequest(comment_id=created.document.id))
