from datetime import UTC, datetime, timedelta
from typing import Optional
from uuid import UUID

from jose import JWTError, jwt

from config import ApplicationConfig

REQUIRED_CLAIMS = ("userId", "email", "exp")


def generate_jwt(user_id: UUID, email: str) -> str:
    """
    Generate session token

    Args:
        user_id: User UUID
        email: Normalized user email

    Returns:
        JWT token string (HS256, JWT_EXPIRES_HOURS expiry, 24h by default)
    """
    return create_access_token(
        str(user_id), email, timedelta(hours=ApplicationConfig.JWT_EXPIRES_HOURS)
    )


def create_access_token(user_id: str, email: str, expires_delta: timedelta) -> str:
    """
    Create session token with custom expiry

    Args:
        user_id: User UUID as string
        email: Normalized user email
        expires_delta: Token expiration duration (negative values yield an
            already-expired token)

    Returns:
        JWT token string
    """
    now = datetime.now(UTC)
    payload = {
        "userId": user_id,
        "email": email,
        "exp": now + expires_delta,
        "iat": now,
    }
    return jwt.encode(
        payload, ApplicationConfig.JWT_SECRET, algorithm=ApplicationConfig.JWT_ALGORITHM
    )


def verify_jwt(token: str) -> Optional[dict]:
    """
    Verify and decode session token

    Args:
        token: JWT token string

    Returns:
        Decoded payload dict, or None if the signature is wrong, the token is
        malformed or expired, or an identity claim is missing
    """
    try:
        payload = jwt.decode(
            token,
            ApplicationConfig.JWT_SECRET,
            algorithms=[ApplicationConfig.JWT_ALGORITHM],
            options={"require_exp": True},
        )
    except JWTError:
        return None

    if any(not payload.get(claim) for claim in REQUIRED_CLAIMS):
        return None
    return payload
