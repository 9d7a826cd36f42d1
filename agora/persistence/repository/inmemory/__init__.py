"""In-memory repository implementations for testing."""

from .community import InMemoryCommunityRepository
from .store import InMemoryStore
from .user import InMemoryUserRepository
from .votable import InMemoryCommentRepository, InMemoryPostRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryCommunityRepository",
    "InMemoryPostRepository",
    "InMemoryStore",
    "InMemoryUserRepository",
]
