"""Community aggregate root."""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from agora.domain.model.common import DomainModel
from agora.domain.value import CommunityId, CommunityName, UserId


class Community(DomainModel):
    """Community aggregate root.

    Business rules:
    - The creator is always one of the moderators
    - Banned users cannot author posts or comments in the community
    """

    id: CommunityId
    name: CommunityName
    creator_id: UserId
    moderator_ids: frozenset[UserId] = Field(default_factory=frozenset)
    banned_user_ids: frozenset[UserId] = Field(default_factory=frozenset)
    subscribers: int = Field(default=0, ge=0)
    description: Optional[str] = Field(default=None, max_length=10000)
    rules: list[str] = Field(default_factory=list)
    avatar: Optional[str] = None
    cover: Optional[str] = None
    welcome_message: Optional[str] = None
    user_flairs: list[str] = Field(default_factory=list)
    post_flairs: list[str] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def validate_creator_is_moderator(self) -> "Community":
        """Ensure the creator is among the moderators."""
        if self.creator_id not in self.moderator_ids:
            raise ValueError("Community creator must be a moderator")
        return self

    def is_moderator(self, user_id: UserId) -> bool:
        return user_id in self.moderator_ids

    def is_banned(self, user_id: UserId) -> bool:
        return user_id in self.banned_user_ids
