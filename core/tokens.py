# core/tokens.py

"""
Credential issuer.

Mints and verifies HS256 access tokens carrying an email claim. Tokens
assert identity only: any role claim inside is a snapshot from issue time
and must never be used for authorization decisions.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import ExpiredSignatureError, JWTError, jwt

from core.config import settings
from core.errors import InvalidCredential


def issue_token(claims: dict, expires_delta: Optional[timedelta] = None) -> str:
    """
    Sign `claims` into an access token.

    `claims` must contain a non-empty "email"; everything else is carried
    through unchanged. "iat" and "exp" are always set here.
    """
    email = (claims or {}).get("email")
    if not email or not isinstance(email, str):
        raise InvalidCredential("Token claims must include an email")

    now = datetime.now(timezone.utc)
    expires_delta = expires_delta or timedelta(days=settings.ACCESS_TOKEN_EXPIRE_DAYS)

    to_encode = dict(claims)
    to_encode["email"] = email.strip().lower()
    to_encode["iat"] = now
    to_encode["exp"] = now + expires_delta

    return jwt.encode(
        to_encode,
        settings.JWT_SECRET_KEY,
        algorithm=settings.JWT_ALGORITHM,
    )


def verify_token(token: str) -> dict:
    """Return the claims of a valid token or raise InvalidCredential."""
    if not token:
        raise InvalidCredential("Missing authentication token")

    try:
        payload = jwt.decode(
            token,
            settings.JWT_SECRET_KEY,
            algorithms=[settings.JWT_ALGORITHM],
        )
    except ExpiredSignatureError:
        raise InvalidCredential("Authentication token has expired")
    except JWTError:
        raise InvalidCredential()

    email = payload.get("email")
    if not email or not isinstance(email, str):
        raise InvalidCredential("Authentication token carries no email")

    return payload
