"""Post aggregate root."""

from typing import ClassVar, Optional

from pydantic import Field

from agora.domain.model.votable import VotableDocument
from agora.domain.value import PostId, VotableType


class Post(VotableDocument):
    """A top-level submission in a community."""

    kind: ClassVar[VotableType] = VotableType.POST

    id: PostId
    title: str = Field(min_length=1, max_length=300)
    description: Optional[str] = Field(default=None, max_length=10000)
    content: Optional[str] = Field(default=None, max_length=40000)
    media_urls: list[str] = Field(default_factory=list)
