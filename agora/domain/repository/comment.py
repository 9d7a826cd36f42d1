"""Comment repository interface."""

from abc import abstractmethod

from agora.domain.model.comment import Comment
from agora.domain.repository.votable import VotableRepository
from agora.domain.value import PostId


class CommentRepository(VotableRepository[Comment]):
    """Repository for Comment entities."""

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> list[Comment]:
        """Find all comments on a post, oldest first.

        Args:
            post_id: Post ID

        Returns:
            Comments on the post
        """
        pass
