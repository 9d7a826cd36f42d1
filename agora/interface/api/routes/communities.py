"""Community routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Response, status
from pydantic import BaseModel, Field

from agora.application.usecase.community import (
    BanUserUseCase,
    CreateCommunityRequest,
    CreateCommunityResponse,
    CreateCommunityUseCase,
    DeleteCommunityRequest,
    DeleteCommunityUseCase,
    GetCommunityRequest,
    GetCommunityResponse,
    GetCommunityUseCase,
    ModerateUserRequest,
    ModerateUserResponse,
    SubscribeUseCase,
    SubscriptionRequest,
    SubscriptionResponse,
    UnbanUserUseCase,
    UnsubscribeUseCase,
    UpdateCommunityRequest,
    UpdateCommunityResponse,
    UpdateCommunityUseCase,
)
from agora.domain.service import JWTService
from agora.interface.api.auth import require_user_id
from agora.interface.api.schema import Envelope

router = APIRouter(prefix="/communities", tags=["communities"], route_class=DishkaRoute)


class CommunityDetailsAPIRequest(BaseModel):
    """Descriptive community fields, all optional."""

    description: str | None = Field(default=None, max_length=10000)
    rules: list[str] | None = None
    avatar: str | None = None
    cover: str | None = None
    welcome_message: str | None = None
    user_flairs: list[str] | None = None
    post_flairs: list[str] | None = None


class CreateCommunityAPIRequest(CommunityDetailsAPIRequest):
    """API request for creating a community."""

    name: str
    moderators: list[UUID] = Field(default_factory=list)


class UpdateCommunityAPIRequest(CommunityDetailsAPIRequest):
    """API request for updating a community."""

    name: str | None = None
    moderators: list[UUID] | None = None


class ModerateUserAPIRequest(BaseModel):
    """API request naming the user to ban or unban."""

    user: UUID


@router.post(
    "",
    response_model=Envelope[CreateCommunityResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_community(
    request: CreateCommunityAPIRequest,
    create_community_use_case: FromDishka[CreateCommunityUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> Envelope[CreateCommunityResponse]:
    """Create a community.

    Requires authentication and enough karma. The creator becomes a
    moderator.

    Args:
        request: Community data
        create_community_use_case: Create community use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Created community
    """
    user_id = require_user_id(jwt_service, auth_token)
    result = await create_community_use_case.execute(
        CreateCommunityRequest(
            name=request.name,
            creator_id=user_id,
            moderator_ids=request.moderators,
            **request.model_dump(exclude={"name", "moderators"}),
        )
    )
    return Envelope(data=result)


@router.get("/{community_id}", response_model=Envelope[GetCommunityResponse])
async def get_community(
    community_id: UUID,
    get_community_use_case: FromDishka[GetCommunityUseCase],
) -> Envelope[GetCommunityResponse]:
    """Get a community by ID."""
    result = await get_community_use_case.execute(
        GetCommunityRequest(community_id=community_id)
    )
    return Envelope(data=result)


@router.patch("/{community_id}", response_model=Envelope[UpdateCommunityResponse])
async def update_community(
    community_id: UUID,
    request: UpdateCommunityAPIRequest,
    update_community_use_case: FromDishka[UpdateCommunityUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> Envelope[UpdateCommunityResponse]:
    """Update a community. Only its creator may do this."""
    user_id = require_user_id(jwt_service, auth_token)
    result = await update_community_use_case.execute(
        UpdateCommunityRequest(
            community_id=community_id,
            user_id=user_id,
            name=request.name,
            moderator_ids=request.moderators,
            **request.model_dump(exclude={"name", "moderators"}),
        )
    )
    return Envelope(data=result)


@router.delete("/{community_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_community(
    community_id: UUID,
    delete_community_use_case: FromDishka[DeleteCommunityUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> Response:
    """Delete a community as its creator or an admin."""
    user_id = require_user_id(jwt_service, auth_token)
    await delete_community_use_case.execute(
        DeleteCommunityRequest(community_id=community_id, user_id=user_id)
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{community_id}/ban", response_model=Envelope[ModerateUserResponse])
async def ban_user(
    community_id: UUID,
    request: ModerateUserAPIRequest,
    ban_user_use_case: FromDishka[BanUserUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> Envelope[ModerateUserResponse]:
    """Ban a user from the community. Moderators only."""
    user_id = require_user_id(jwt_service, auth_token)
    result = await ban_user_use_case.execute(
        ModerateUserRequest(
            community_id=community_id, target_id=request.user, user_id=user_id
        )
    )
    return Envelope(data=result)


@router.post("/{community_id}/unban", response_model=Envelope[ModerateUserResponse])
async def unban_user(
    community_id: UUID,
    request: ModerateUserAPIRequest,
    unban_user_use_case: FromDishka[UnbanUserUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> Envelope[ModerateUserResponse]:
    """Lift a ban. Moderators only."""
    user_id = require_user_id(jwt_service, auth_token)
    result = await unban_user_use_case.execute(
        ModerateUserRequest(
            community_id=community_id, target_id=request.user, user_id=user_id
        )
    )
    return Envelope(data=result)


@router.post(
    "/{community_id}/subscribe", response_model=Envelope[SubscriptionResponse]
)
async def subscribe(
    community_id: UUID,
    subscribe_use_case: FromDishka[SubscribeUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> Envelope[SubscriptionResponse]:
    """Subscribe the current user to the community."""
    user_id = require_user_id(jwt_service, auth_token)
    result = await subscribe_use_case.execute(
        SubscriptionRequest(community_id=community_id, user_id=user_id)
    )
    return Envelope(data=result)


@router.post(
    "/{community_id}/unsubscribe", response_model=Envelope[SubscriptionResponse]
)
async def unsubscribe(
    community_id: UUID,
    unsubscribe_use_case: FromDishka[UnsubscribeUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> Envelope[SubscriptionResponse]:
    """Unsubscribe the current user from the community."""
    user_id = require_user_id(jwt_service, auth_token)
    result = await unsubscribe_use_case.execute(
        SubscriptionRequest(community_id=community_id, user_id=user_id)
    )
    return Envelope(data=result)
