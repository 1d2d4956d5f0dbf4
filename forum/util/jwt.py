"""Identity tokens.

Users sign in through the identity service, which sets an HS256 token in
the ``auth_token`` cookie. The forum only needs to know who is calling,
so verification checks signature, expiry and the ``user_id`` claim.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel, ValidationError

from forum.config import AuthSettings
from forum.util.error import JWTError

_REQUIRED_CLAIMS = ["exp", "user_id"]


class TokenPayload(BaseModel):
    user_id: str
    username: str | None = None
    exp: datetime


def create_token(user_id: str, username: str, settings: AuthSettings) -> str:
    """Issue a token the way the identity service does.

    Used by tooling and tests that need to call the API as a user.
    """
    expires_at = datetime.now(timezone.utc) + timedelta(days=settings.jwt_expiry_days)
    claims = {"user_id": user_id, "username": username, "exp": expires_at}
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Decode a token and return its claims.

    Raises:
        JWTError: If the token is expired, malformed, badly signed or
            lacks a required claim
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            leeway=settings.jwt_leeway_seconds,
            options={"require": _REQUIRED_CLAIMS},
        )
    except jwt.ExpiredSignatureError as e:
        raise JWTError("Token has expired") from e
    except jwt.MissingRequiredClaimError as e:
        raise JWTError(f"Token is missing the {e.claim} claim") from e
    except jwt.InvalidTokenError as e:
        raise JWTError("Invalid token") from e

    try:
        return TokenPayload.model_validate(claims)
    except ValidationError as e:
        raise JWTError("Token claims are malformed") from e
