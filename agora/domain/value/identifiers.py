"""Entity identifiers.

All ids are UUIDs. The NewTypes keep a post id from being passed where a
user id is expected. Votes accept either document id, so vote code works
with plain ``UUID`` plus a ``VotableType``.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
CommunityId = NewType("CommunityId", UUID)
PostId = NewType("PostId", UUID)
CommentId = NewType("CommentId", UUID)
