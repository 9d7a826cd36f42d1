"""Community use cases."""

from .create_community import (
    CreateCommunityRequest,
    CreateCommunityResponse,
    CreateCommunityUseCase,
)
from .delete_community import DeleteCommunityRequest, DeleteCommunityUseCase
from .get_community import (
    GetCommunityRequest,
    GetCommunityResponse,
    GetCommunityUseCase,
)
from .moderate import (
    BanUserUseCase,
    ModerateUserRequest,
    ModerateUserResponse,
    UnbanUserUseCase,
)
from .subscription import (
    SubscribeUseCase,
    SubscriptionRequest,
    SubscriptionResponse,
    UnsubscribeUseCase,
)
from .update_community import (
    UpdateCommunityRequest,
    UpdateCommunityResponse,
    UpdateCommunityUseCase,
)

__all__ = [
    "BanUserUseCase",
    "CreateCommunityRequest",
    "CreateCommunityResponse",
    "CreateCommunityUseCase",
    "DeleteCommunityRequest",
    "DeleteCommunityUseCase",
    "GetCommunityRequest",
    "GetCommunityResponse",
    "GetCommunityUseCase",
    "ModerateUserRequest",
    "ModerateUserResponse",
    "SubscribeUseCase",
    "SubscriptionRequest",
    "SubscriptionResponse",
    "UnbanUserUseCase",
    "UnsubscribeUseCase",
    "UpdateCommunityRequest",
    "UpdateCommunityResponse",
    "UpdateCommunityUseCase",
]
