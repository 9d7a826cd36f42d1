"""Resolve the acting user from the ``auth_token`` cookie."""

from uuid import UUID

from agora.domain.service import JWTService
from agora.interface.error import AuthenticationRequiredError


def require_user_id(jwt_service: JWTService, auth_token: str | None) -> str:
    """User id from a valid token.

    Raises:
        AuthenticationRequiredError: If the token is missing, invalid or expired
    """
    user_id = jwt_service.user_id_or_none(auth_token)
    if not user_id:
        raise AuthenticationRequiredError()
    try:
        UUID(user_id)
    except ValueError:
        raise AuthenticationRequiredError("Invalid authentication token")
    return user_id
