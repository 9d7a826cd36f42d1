"""Domain service providers."""

from dishka import Scope, provide_all

from agora.domain.service import (
    CommentService,
    CommunityService,
    JWTService,
    PostService,
    UserService,
    VoteService,
)
from agora.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Domain services, built per request from their constructor hints.

    They share the request's repositories, so every write a service makes
    lands in the same session as the rest of the request.
    """

    scope = Scope.REQUEST

    services = provide_all(
        JWTService,
        UserService,
        CommunityService,
        PostService,
        CommentService,
        VoteService,
    )
