"""Use case providers."""

from dishka import Scope, provide_all

from agora.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentsUseCase,
    GetCommentUseCase,
)
from agora.application.usecase.community import (
    BanUserUseCase,
    CreateCommunityUseCase,
    DeleteCommunityUseCase,
    GetCommunityUseCase,
    SubscribeUseCase,
    UnbanUserUseCase,
    UnsubscribeUseCase,
    UpdateCommunityUseCase,
)
from agora.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
)
from agora.application.usecase.user import GetUserUseCase
from agora.application.usecase.vote import CastVoteUseCase
from agora.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """One use case instance per request, for the routes to inject."""

    scope = Scope.REQUEST

    votes = provide_all(CastVoteUseCase)

    communities = provide_all(
        CreateCommunityUseCase,
        GetCommunityUseCase,
        UpdateCommunityUseCase,
        DeleteCommunityUseCase,
        BanUserUseCase,
        UnbanUserUseCase,
        SubscribeUseCase,
        UnsubscribeUseCase,
    )

    posts = provide_all(CreatePostUseCase, GetPostUseCase, DeletePostUseCase)

    comments = provide_all(
        CreateCommentUseCase,
        GetCommentUseCase,
        GetCommentsUseCase,
        DeleteCommentUseCase,
    )

    users = provide_all(GetUserUseCase)
