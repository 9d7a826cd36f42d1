"""Comment domain service."""

from uuid import uuid4

import logfire

from agora.domain.error import ValidationError
from agora.domain.model import Comment
from agora.domain.repository import CommentRepository, PostRepository, UserRepository
from agora.domain.value import CommentId, PostId, UserId

from .base import Service
from .community_service import CommunityService


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        post_repository: PostRepository,
        user_repository: UserRepository,
        community_service: CommunityService,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            post_repository: Post repository
            user_repository: User repository
            community_service: Community service for ban/moderator guards
        """
        self.comment_repository = comment_repository
        self.post_repository = post_repository
        self.user_repository = user_repository
        self.community_service = community_service

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment:
        """Get a comment by ID.

        Raises:
            NotFoundError: If comment not found
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            return self.require(comment, "Comment", comment_id)

    async def get_comments_for_post(self, post_id: PostId) -> list[Comment]:
        """Get all comments on a post.

        Raises:
            NotFoundError: If the post does not exist
        """
        self.require(await self.post_repository.find_by_id(post_id), "Post", post_id)
        return await self.comment_repository.find_by_post(post_id)

    async def create_comment(
        self,
        creator_id: UserId,
        post_id: PostId,
        content: str,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a comment on a post, optionally replying to another comment.

        The comment inherits the post's community; the ban check against that
        community runs before anything is written.

        Raises:
            NotFoundError: If the post, parent comment or creator does not exist
            ValidationError: If the parent comment belongs to another post
            BannedFromCommunityError: If the creator is banned in the community
        """
        with logfire.span(
            "comment_service.create_comment",
            creator_id=str(creator_id),
            post_id=str(post_id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            post = self.require(
                await self.post_repository.find_by_id(post_id), "Post", post_id
            )

            await self.community_service.assert_not_banned(
                creator_id, post.community_id
            )
            self.require(
                await self.user_repository.find_by_id(creator_id), "User", creator_id
            )

            if parent_id:
                parent = self.require(
                    await self.comment_repository.find_by_id(parent_id),
                    "Comment",
                    parent_id,
                )
                if parent.post_id != post_id:
                    raise ValidationError("Parent comment belongs to a different post")

            comment = Comment(
                id=CommentId(uuid4()),
                post_id=post_id,
                parent_id=parent_id,
                creator_id=creator_id,
                community_id=post.community_id,
                content=content,
            )
            saved = await self.comment_repository.save(comment)
            logfire.info("Comment created", comment_id=str(saved.id))
            return saved

    async def delete_comment(self, actor_id: UserId, comment_id: CommentId) -> None:
        """Delete a comment as its creator, an admin or a community moderator.

        Raises:
            NotFoundError: If the comment or actor does not exist
            NotAuthorizedError: If the actor may not delete it
        """
        with logfire.span(
            "comment_service.delete_comment",
            actor_id=str(actor_id),
            comment_id=str(comment_id),
        ):
            comment = await self.get_comment_by_id(comment_id)
            actor = self.require(
                await self.user_repository.find_by_id(actor_id), "User", actor_id
            )

            community = await self.community_service.find_by_id(comment.community_id)
            self.community_service.assert_can_moderate(
                actor, community, comment.creator_id, "comment", str(comment_id)
            )

            await self.comment_repository.delete(comment_id)
            logfire.info("Comment deleted", comment_id=str(comment_id))
