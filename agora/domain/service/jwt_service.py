"""Session token service."""

import logfire

from agora.config import AuthSettings
from agora.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Reads the acting user from session tokens."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def create_token(self, user_id: str, handle: str) -> str:
        """Sign a token. Production tokens come from the identity service."""
        return create_token(user_id, handle, self.auth_settings)

    def verify_token(self, token: str) -> TokenPayload:
        """Decode a token.

        Raises:
            JWTError: If the token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                return verify_token(token, self.auth_settings)
            except JWTError as e:
                logfire.warn("Token rejected", reason=str(e))
                raise

    def user_id_or_none(self, token: str | None) -> str | None:
        """User id carried by ``token``, None when absent or not trusted."""
        if not token:
            return None
        try:
            return self.verify_token(token).user_id
        except JWTError:
            return None
