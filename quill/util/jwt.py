"""Signed ``auth_token`` cookies.

A token is an HS256 JWT whose ``sub`` claim is the user ID. It carries no
role: the role is looked up from the stored user on every request.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from quill.config import AuthSettings

REQUIRED_CLAIMS = ["sub", "iat", "exp"]


class TokenPayload(BaseModel):
    """Verified token claims."""

    sub: str
    iat: datetime
    exp: datetime

    @property
    def user_id(self) -> str:
        return self.sub


class JWTError(Exception):
    """Token could not be verified."""

    pass


def create_token(
    user_id: str, settings: AuthSettings, issued_at: datetime | None = None
) -> str:
    """Sign a token for a user.

    Args:
        user_id: User ID, stored as the ``sub`` claim
        settings: Authentication settings
        issued_at: Issue time (defaults to now); expiry follows from it

    Returns:
        Encoded JWT
    """
    issued_at = issued_at or datetime.now(timezone.utc)
    claims = {
        "sub": user_id,
        "iat": issued_at,
        "exp": issued_at + timedelta(days=settings.jwt_expiry_days),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Check signature, expiry and required claims.

    Raises:
        JWTError: If the token is expired, tampered with or incomplete
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": REQUIRED_CLAIMS},
        )
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError as e:
        raise JWTError(f"Invalid token: {e}")
    return TokenPayload(**claims)
