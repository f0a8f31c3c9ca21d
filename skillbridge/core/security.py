"""
Password hashing and bearer token helpers.

Passwords are stored as bcrypt hashes. Access tokens are HS256-signed JWTs
carrying the user id (``sub``), e-mail and role.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
import jwt

from skillbridge.server.core.config import settings


class InvalidTokenError(Exception):
    """Raised when a bearer token is malformed, tampered with or expired."""

    def __init__(self, reason: str = "Invalid or expired token") -> None:
        super().__init__(reason)
        self.reason = reason


@dataclass(frozen=True)
class TokenPayload:
    """Claims extracted from a verified access token."""

    user_id: str
    email: str
    role: str


def hash_password(password: str, rounds: Optional[int] = None) -> str:
    """Hash a plaintext password with a fresh bcrypt salt."""
    salt = bcrypt.gensalt(rounds=rounds or settings.bcrypt_rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    """Check a plaintext password against a stored bcrypt hash."""
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


def create_access_token(
    *,
    user_id: str,
    email: str,
    role: str,
    expires_delta: Optional[timedelta] = None,
) -> str:
    """
    Issue a signed access token for a user.

    Args:
        user_id: Identifier stored in the ``sub`` claim
        email: User e-mail, informational only
        role: User role at the time of issue
        expires_delta: Token lifetime; defaults to ``JWT_EXPIRES_MINUTES``

    Returns:
        Encoded JWT string
    """
    jwt_config = settings.jwt
    now = datetime.now(timezone.utc)
    lifetime = expires_delta if expires_delta is not None else timedelta(minutes=jwt_config.expires_minutes)
    claims = {
        "sub": user_id,
        "email": email,
        "role": role,
        "iat": now,
        "exp": now + lifetime,
    }
    return jwt.encode(claims, jwt_config.secret, algorithm=jwt_config.algorithm)


def decode_access_token(token: str) -> TokenPayload:
    """
    Verify a token's signature and expiry and return its claims.

    Raises:
        InvalidTokenError: if the token cannot be verified
    """
    jwt_config = settings.jwt
    try:
        claims = jwt.decode(
            token,
            jwt_config.secret,
            algorithms=[jwt_config.algorithm],
            options={"require": ["sub", "exp"]},
        )
    except jwt.ExpiredSignatureError as e:
        raise InvalidTokenError("Token has expired") from e
    except jwt.PyJWTError as e:
        raise InvalidTokenError() from e

    return TokenPayload(
        user_id=str(claims["sub"]),
        email=str(claims.get("email", "")),
        role=str(claims.get("role", "")),
    )
