"""Comment entity.

Comments belong to a post and may reply to another comment on the same post.
They live in the post's community, which is where bans apply.
"""

from typing import ClassVar, Optional

from pydantic import Field

from agora.domain.model.votable import VotableDocument
from agora.domain.value import CommentId, PostId, VotableType


class Comment(VotableDocument):
    """Comment on a post, or reply to another comment."""

    kind: ClassVar[VotableType] = VotableType.COMMENT

    id: CommentId
    post_id: PostId
    parent_id: Optional[CommentId] = None
    content: str = Field(min_length=1, max_length=10000)
