# faithguide/core/security.py
"""
Security module for authentication.
Handles password hashing, session token signing/verification, and the
session cookie that carries the token to the client.
"""
import datetime as dt
import jwt  # PyJWT
from fastapi import Response
from passlib.context import CryptContext

from faithguide.config import settings

# Password hashing context
# Argon2 is a salted, adaptive-cost hash; the salt is embedded in the digest
pwd_context = CryptContext(
    schemes=["argon2"],  # Use Argon2 for password hashing
    deprecated="auto",   # Automatically handle deprecated schemes
)

SESSION_CLAIM = "userId"  # Claim carrying the user identifier


def hash_password(plain: str) -> str:
    """
    Hash a plain text password using Argon2.

    A fresh salt is generated on every call, so hashing the same password
    twice yields two different digests. Errors propagate to the caller.
    """
    return pwd_context.hash(plain)


def verify_password(plain: str, hashed: str) -> bool:
    """
    Verify a plain text password against a stored digest.

    Returns:
        True if the password matches, False otherwise (including for a
        digest that cannot be parsed).
    """
    try:
        return pwd_context.verify(plain, hashed)
    except (ValueError, TypeError):
        return False


def create_session_token(user_id: str) -> str:
    """
    Create a signed session token for a user.

    Token payload:
        - userId: the user's id
        - iat: issued-at timestamp
        - exp: iat + SESSION_DAYS
    """
    now = dt.datetime.now(dt.timezone.utc)
    payload = {
        SESSION_CLAIM: str(user_id),
        "iat": now,
        "exp": now + dt.timedelta(days=settings.session_days),
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_session_token(token: str | None) -> str | None:
    """
    Verify a session token and return the user id it asserts.

    Expired, malformed and wrongly signed tokens are all rejected the same
    way: the return value is None.
    """
    if not token:
        return None
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp"]},
        )
    except jwt.PyJWTError:
        return None
    user_id = payload.get(SESSION_CLAIM)
    if not isinstance(user_id, str) or not user_id:
        return None
    return user_id


def set_session_cookie(response: Response, token: str) -> None:
    """Attach the session token as an HttpOnly cookie scoped to the whole site."""
    response.set_cookie(
        settings.session_cookie_name,
        token,
        max_age=settings.session_max_age,
        path="/",
        httponly=True,
        secure=settings.is_production,
        samesite="lax",
    )


def delete_session_cookie(response: Response) -> None:
    """
    Tell the client to drop the session cookie.

    There is no server-side revocation: a copied token stays valid until
    its exp claim passes.
    """
    response.delete_cookie(
        settings.session_cookie_name,
        path="/",
        httponly=True,
        secure=settings.is_production,
        samesite="lax",
    )
