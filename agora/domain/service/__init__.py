"""Domain services for Agora."""

from .comment_service import CommentService
from .community_service import CommunityService
from .jwt_service import JWTService
from .karma import assert_can_create_community
from .post_service import PostService
from .user_service import UserService
from .vote_service import VoteService
from .vote_state import VoteStep, plan_vote_transition, resolve_vote_state

__all__ = [
    "CommentService",
    "CommunityService",
    "JWTService",
    "PostService",
    "UserService",
    "VoteService",
    "VoteStep",
    "assert_can_create_community",
    "plan_vote_transition",
    "resolve_vote_state",
]
