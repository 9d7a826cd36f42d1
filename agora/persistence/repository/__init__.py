"""PostgreSQL repository implementations."""

from agora.persistence.repository.community import PostgresCommunityRepository
from agora.persistence.repository.user import PostgresUserRepository
from agora.persistence.repository.votable import (
    PostgresCommentRepository,
    PostgresPostRepository,
)

__all__ = [
    "PostgresUserRepository",
    "PostgresCommunityRepository",
    "PostgresPostRepository",
    "PostgresCommentRepository",
]
