"""Post domain service."""

from uuid import uuid4

import logfire

from agora.domain.model import Post
from agora.domain.repository import PostRepository, UserRepository
from agora.domain.value import CommunityId, PostId, UserId

from .base import Service
from .community_service import CommunityService


class PostService(Service):
    """Domain service for post operations."""

    def __init__(
        self,
        post_repository: PostRepository,
        user_repository: UserRepository,
        community_service: CommunityService,
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            user_repository: User repository
            community_service: Community service for ban/moderator guards
        """
        self.post_repository = post_repository
        self.user_repository = user_repository
        self.community_service = community_service

    async def get_post_by_id(self, post_id: PostId) -> Post:
        """Get a post by ID.

        Raises:
            NotFoundError: If post not found
        """
        with logfire.span("post_service.get_post_by_id", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)
            return self.require(post, "Post", post_id)

    async def create_post(
        self,
        creator_id: UserId,
        community_id: CommunityId,
        title: str,
        description: str | None = None,
        content: str | None = None,
        media_urls: list[str] | None = None,
    ) -> Post:
        """Create a post in a community.

        The ban check runs before anything is written.

        Raises:
            NotFoundError: If the community or creator does not exist
            BannedFromCommunityError: If the creator is banned there
        """
        with logfire.span(
            "post_service.create_post",
            creator_id=str(creator_id),
            community_id=str(community_id),
        ):
            await self.community_service.assert_not_banned(creator_id, community_id)
            self.require(
                await self.user_repository.find_by_id(creator_id), "User", creator_id
            )

            post = Post(
                id=PostId(uuid4()),
                creator_id=creator_id,
                community_id=community_id,
                title=title,
                description=description,
                content=content,
                media_urls=media_urls or [],
            )
            saved = await self.post_repository.save(post)
            logfire.info("Post created", post_id=str(saved.id))
            return saved

    async def delete_post(self, actor_id: UserId, post_id: PostId) -> None:
        """Delete a post as its creator, an admin or a community moderator.

        Raises:
            NotFoundError: If the post or actor does not exist
            NotAuthorizedError: If the actor may not delete it
        """
        with logfire.span(
            "post_service.delete_post", actor_id=str(actor_id), post_id=str(post_id)
        ):
            post = await self.get_post_by_id(post_id)
            actor = self.require(
                await self.user_repository.find_by_id(actor_id), "User", actor_id
            )

            community = await self.community_service.find_by_id(post.community_id)
            self.community_service.assert_can_moderate(
                actor, community, post.creator_id, "post", str(post_id)
            )

            await self.post_repository.delete(post_id)
            logfire.info("Post deleted", post_id=str(post_id))
