"""JWT token utilities.

Session tokens come from the hosted identity provider. Their ``sub`` claim is
the user's UUID and ``aud`` is the configured audience.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from campus.config import AuthSettings


class TokenPayload(BaseModel):
    """JWT token payload."""

    sub: str
    exp: datetime
    email: str | None = None
    role: str | None = None


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(
    user_id: str,
    settings: AuthSettings,
    email: str | None = None,
    role: str = "authenticated",
) -> str:
    """Create a session token shaped like the identity provider's.

    Args:
        user_id: User ID (becomes the ``sub`` claim)
        settings: Authentication settings
        email: Optional email claim
        role: Role claim

    Returns:
        Encoded JWT token
    """
    expiry = datetime.now(timezone.utc) + timedelta(
        minutes=settings.jwt_expiry_minutes
    )

    payload = {
        "sub": user_id,
        "aud": settings.jwt_audience,
        "role": role,
        "email": email,
        "exp": expiry,
    }

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a JWT token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            audience=settings.jwt_audience,
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")
