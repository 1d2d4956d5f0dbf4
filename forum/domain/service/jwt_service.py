"""Caller identification from identity tokens."""

import logfire

from forum.config import AuthSettings
from forum.util.error import JWTError
from forum.util.jwt import TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Turns the ``auth_token`` cookie into a user ID."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def create_token(self, user_id: str, username: str) -> str:
        return create_token(user_id, username, self.auth_settings)

    def verify_token(self, token: str) -> TokenPayload:
        """Verify a token and return its claims.

        Raises:
            JWTError: If the token cannot be verified
        """
        return verify_token(token, self.auth_settings)

    def get_user_id_from_token(self, token: str | None) -> str | None:
        """Return the caller's user ID, or None for anonymous callers.

        A missing, expired or forged token all count as anonymous; routes
        that need a user answer 401 themselves.
        """
        if not token:
            return None

        try:
            return self.verify_token(token).user_id
        except JWTError as e:
            logfire.debug("Treating request as anonymous", reason=str(e))
            return None
