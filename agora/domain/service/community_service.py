"""Community domain service.

Covers community lifecycle, moderation (bans) and subscriptions, plus the
membership guards other services consult before letting a user author or
delete content.
"""

from datetime import datetime
from typing import Any, Iterable
from uuid import uuid4

import logfire

from agora.config import KarmaSettings
from agora.domain.error import (
    AlreadyBannedError,
    AlreadySubscribedError,
    BannedFromCommunityError,
    CannotBanCreatorError,
    CommunityDeletionForbiddenError,
    CommunityNameTakenError,
    InvalidCommunityNameError,
    NotAuthorizedError,
    NotBannedError,
    NotCommunityCreatorError,
    NotModeratorError,
    NotSubscribedError,
)
from agora.domain.model import Community, User
from agora.domain.repository import CommunityRepository, UserRepository
from agora.domain.value import CommunityId, CommunityName, UserId

from .base import Service
from .karma import assert_can_create_community

# Descriptive fields a creator may replace on update
EDITABLE_FIELDS = (
    "description",
    "rules",
    "avatar",
    "cover",
    "welcome_message",
    "user_flairs",
    "post_flairs",
)


class CommunityService(Service):
    """Domain service for community operations."""

    def __init__(
        self,
        community_repository: CommunityRepository,
        user_repository: UserRepository,
        karma_settings: KarmaSettings,
    ) -> None:
        """Initialize community service.

        Args:
            community_repository: Community repository
            user_repository: User repository
            karma_settings: Karma thresholds for privileged actions
        """
        self.community_repository = community_repository
        self.user_repository = user_repository
        self.karma_settings = karma_settings

    async def find_by_id(self, community_id: CommunityId) -> Community | None:
        """Find a community by ID, None if it does not exist."""
        return await self.community_repository.find_by_id(community_id)

    async def get_by_id(self, community_id: CommunityId) -> Community:
        """Get community by ID.

        Raises:
            NotFoundError: If community not found
        """
        community = await self.community_repository.find_by_id(community_id)
        return self.require(community, "Community", community_id)

    async def _get_user(self, user_id: UserId) -> User:
        user = await self.user_repository.find_by_id(user_id)
        return self.require(user, "User", user_id)

    # ------------------------------------------------------------------
    # Guards
    # ------------------------------------------------------------------

    async def assert_not_banned(
        self, user_id: UserId, community_id: CommunityId
    ) -> Community:
        """Ensure a user may author content in a community.

        Returns:
            The community, for callers that need it next

        Raises:
            NotFoundError: If community not found
            BannedFromCommunityError: If the user is banned there
        """
        community = await self.get_by_id(community_id)
        if community.is_banned(user_id):
            logfire.warn(
                "Banned user attempted to post",
                user_id=str(user_id),
                community_id=str(community_id),
            )
            raise BannedFromCommunityError(str(community_id))
        return community

    def assert_can_moderate(
        self,
        user: User,
        community: Community | None,
        owner_id: UserId,
        resource: str,
        resource_id: str,
    ) -> None:
        """Ensure a user may remove a resource owned by ``owner_id``.

        Allowed: the owner, admins, and moderators of the community. When the
        community no longer exists only the owner and admins qualify.

        Raises:
            NotAuthorizedError: Otherwise
        """
        if user.id == owner_id or user.is_admin:
            return
        if community and community.is_moderator(user.id):
            return
        logfire.warn(
            "Unauthorized removal attempt",
            user_id=str(user.id),
            resource=resource,
            resource_id=resource_id,
        )
        raise NotAuthorizedError(resource, resource_id, str(user.id))

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def create_community(
        self,
        creator_id: UserId,
        name: str,
        moderator_ids: Iterable[UserId] = (),
        **details: Any,
    ) -> Community:
        """Create a community owned by ``creator_id``.

        Steps:
        1. Validate the name format
        2. Check the creator's karma against the configured threshold
        3. Ensure the name is free and every requested moderator exists
        4. Save with the creator added to the moderators

        Args:
            creator_id: Creating user
            name: Community name (letters, digits, underscores)
            moderator_ids: Additional moderators
            **details: Descriptive fields (see ``EDITABLE_FIELDS``)

        Returns:
            The created community

        Raises:
            InvalidCommunityNameError: If the name is malformed
            NotFoundError: If the creator or a moderator does not exist
            InsufficientKarmaError: If the creator lacks karma
            CommunityNameTakenError: If the name is in use
        """
        with logfire.span(
            "community_service.create_community",
            creator_id=str(creator_id),
            name=name,
        ):
            if not CommunityName.is_valid(name):
                raise InvalidCommunityNameError()
            community_name = CommunityName(name)

            creator = await self._get_user(creator_id)
            assert_can_create_community(
                creator.karma, self.karma_settings.community_creation_threshold
            )

            if await self.community_repository.find_by_name(community_name):
                raise CommunityNameTakenError(name)

            moderators = await self._resolve_moderators(creator_id, moderator_ids)

            community = Community(
                id=CommunityId(uuid4()),
                name=community_name,
                creator_id=creator_id,
                moderator_ids=moderators,
                **{
                    k: v
                    for k, v in details.items()
                    if k in EDITABLE_FIELDS and v is not None
                },
            )
            saved = await self.community_repository.save(community)
            logfire.info(
                "Community created",
                community_id=str(saved.id),
                moderators=len(saved.moderator_ids),
            )
            return saved

    async def update_community(
        self,
        actor_id: UserId,
        community_id: CommunityId,
        name: str | None = None,
        moderator_ids: Iterable[UserId] | None = None,
        **details: Any,
    ) -> Community:
        """Update a community. Only its creator may do this.

        Fields left as None are kept. When moderators are given, the creator
        is always kept among them.

        Raises:
            NotFoundError: If community not found
            NotCommunityCreatorError: If the actor is not the creator
            InvalidCommunityNameError: If the new name is malformed
            CommunityNameTakenError: If the new name belongs to another community
        """
        with logfire.span(
            "community_service.update_community",
            actor_id=str(actor_id),
            community_id=str(community_id),
        ):
            community = await self.get_by_id(community_id)
            if community.creator_id != actor_id:
                raise NotCommunityCreatorError()

            update: dict[str, Any] = {
                k: v
                for k, v in details.items()
                if k in EDITABLE_FIELDS and v is not None
            }

            if name is not None and name != community.name.root:
                if not CommunityName.is_valid(name):
                    raise InvalidCommunityNameError()
                new_name = CommunityName(name)
                existing = await self.community_repository.find_by_name(new_name)
                if existing and existing.id != community.id:
                    raise CommunityNameTakenError(name)
                update["name"] = new_name

            if moderator_ids is not None:
                update["moderator_ids"] = await self._resolve_moderators(
                    community.creator_id, moderator_ids
                )

            update["updated_at"] = datetime.now()
            updated = community.model_copy(update=update)
            saved = await self.community_repository.save(updated)
            logfire.info("Community updated", community_id=str(community_id))
            return saved

    async def delete_community(
        self, actor_id: UserId, community_id: CommunityId
    ) -> None:
        """Delete a community. Only its creator or an admin may do this.

        Raises:
            NotFoundError: If community or actor not found
            CommunityDeletionForbiddenError: Otherwise
        """
        with logfire.span(
            "community_service.delete_community",
            actor_id=str(actor_id),
            community_id=str(community_id),
        ):
            community = await self.get_by_id(community_id)
            actor = await self._get_user(actor_id)
            if community.creator_id != actor.id and not actor.is_admin:
                raise CommunityDeletionForbiddenError()

            await self.community_repository.delete(community_id)
            logfire.info("Community deleted", community_id=str(community_id))

    async def _resolve_moderators(
        self, creator_id: UserId, moderator_ids: Iterable[UserId]
    ) -> frozenset[UserId]:
        """Deduplicated moderators including the creator; all must exist."""
        moderators = frozenset(moderator_ids) | {creator_id}
        for moderator_id in moderators - {creator_id}:
            await self._get_user(moderator_id)
        return moderators

    # ------------------------------------------------------------------
    # Moderation
    # ------------------------------------------------------------------

    async def ban_user(
        self, actor_id: UserId, community_id: CommunityId, target_id: UserId
    ) -> Community:
        """Ban a user from a community.

        Raises:
            NotFoundError: If the target user or the community does not exist
            NotModeratorError: If the actor is not a moderator
            CannotBanCreatorError: If the target is the community creator
            AlreadyBannedError: If the target is already banned
        """
        with logfire.span(
            "community_service.ban_user",
            actor_id=str(actor_id),
            community_id=str(community_id),
            target_id=str(target_id),
        ):
            await self._get_user(target_id)
            community = await self.get_by_id(community_id)

            if not community.is_moderator(actor_id):
                raise NotModeratorError()
            if community.creator_id == target_id:
                raise CannotBanCreatorError()
            if community.is_banned(target_id):
                raise AlreadyBannedError()

            if not await self.community_repository.add_banned_user(
                community_id, target_id
            ):
                raise AlreadyBannedError()

            logfire.info(
                "User banned", community_id=str(community_id), target_id=str(target_id)
            )
            return await self.get_by_id(community_id)

    async def unban_user(
        self, actor_id: UserId, community_id: CommunityId, target_id: UserId
    ) -> Community:
        """Lift a ban.

        Raises:
            NotFoundError: If the target user or the community does not exist
            NotModeratorError: If the actor is not a moderator
            NotBannedError: If the target is not banned
        """
        with logfire.span(
            "community_service.unban_user",
            actor_id=str(actor_id),
            community_id=str(community_id),
            target_id=str(target_id),
        ):
            await self._get_user(target_id)
            community = await self.get_by_id(community_id)

            if not community.is_moderator(actor_id):
                raise NotModeratorError()
            if not community.is_banned(target_id):
                raise NotBannedError()

            if not await self.community_repository.remove_banned_user(
                community_id, target_id
            ):
                raise NotBannedError()

            logfire.info(
                "User unbanned",
                community_id=str(community_id),
                target_id=str(target_id),
            )
            return await self.get_by_id(community_id)

    # ------------------------------------------------------------------
    # Subscriptions
    # ------------------------------------------------------------------

    async def subscribe(self, user_id: UserId, community_id: CommunityId) -> User:
        """Subscribe a user to a community.

        Returns:
            The updated user

        Raises:
            NotFoundError: If the community or user does not exist
            AlreadySubscribedError: If already subscribed
        """
        with logfire.span(
            "community_service.subscribe",
            user_id=str(user_id),
            community_id=str(community_id),
        ):
            await self.get_by_id(community_id)
            await self._get_user(user_id)

            if not await self.user_repository.add_subscription(user_id, community_id):
                raise AlreadySubscribedError()
            await self.community_repository.adjust_subscribers(community_id, 1)

            logfire.info(
                "User subscribed", user_id=str(user_id), community_id=str(community_id)
            )
            return await self._get_user(user_id)

    async def unsubscribe(self, user_id: UserId, community_id: CommunityId) -> User:
        """Unsubscribe a user from a community.

        Returns:
            The updated user

        Raises:
            NotFoundError: If the community or user does not exist
            NotSubscribedError: If not subscribed
        """
        with logfire.span(
            "community_service.unsubscribe",
            user_id=str(user_id),
            community_id=str(community_id),
        ):
            await self.get_by_id(community_id)
            await self._get_user(user_id)

            if not await self.user_repository.remove_subscription(
                user_id, community_id
            ):
                raise NotSubscribedError()
            await self.community_repository.adjust_subscribers(community_id, -1)

            logfire.info(
                "User unsubscribed",
                user_id=str(user_id),
                community_id=str(community_id),
            )
            return await self._get_user(user_id)
