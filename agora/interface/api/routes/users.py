"""User routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from agora.application.usecase.user import (
    GetUserRequest,
    GetUserResponse,
    GetUserUseCase,
)
from agora.interface.api.schema import Envelope

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


@router.get("/{user_id}", response_model=Envelope[GetUserResponse])
async def get_user(
    user_id: UUID,
    get_user_use_case: FromDishka[GetUserUseCase],
) -> Envelope[GetUserResponse]:
    """Get a user's karma, votes and subscriptions."""
    result = await get_user_use_case.execute(GetUserRequest(user_id=user_id))
    return Envelope(data=result)
