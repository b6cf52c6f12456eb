"""Security utilities for authentication."""

import secrets
from datetime import datetime, timezone
from typing import Optional

import bcrypt
import jwt


def hash_password(password: str) -> str:
    """Hash password using bcrypt."""
    salt = bcrypt.gensalt()
    hashed = bcrypt.hashpw(password.encode('utf-8'), salt)
    return hashed.decode('utf-8')


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify password against hash."""
    try:
        return bcrypt.checkpw(
            plain_password.encode('utf-8'),
            hashed_password.encode('utf-8')
        )
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


def new_session_id() -> str:
    """Generate an opaque session identifier for the session cookie."""
    return secrets.token_urlsafe(32)


def token_expiry(token: str) -> Optional[datetime]:
    """
    Read the expiry of a bearer token issued by the remote backend.

    The signature is not verified: the remote backend owns the signing key
    and validates its own tokens. This is only used to decide when to
    exchange the refresh token.

    Returns:
        Expiry as an aware UTC datetime, or None if the token is not a JWT
        or carries no ``exp`` claim.
    """
    try:
        payload = jwt.decode(token, options={"verify_signature": False})
    except jwt.InvalidTokenError:
        return None

    exp = payload.get("exp")
    if not isinstance(exp, (int, float)):
        return None
    return datetime.fromtimestamp(exp, tz=timezone.utc)
