"""Post repository interface."""

from agora.domain.model.post import Post
from agora.domain.repository.votable import VotableRepository


class PostRepository(VotableRepository[Post]):
    """Repository for Post aggregate."""
