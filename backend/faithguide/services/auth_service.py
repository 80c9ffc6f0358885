# faithguide/services/auth_service.py
"""
Auth service: signup, login, logout, current-user lookup, onboarding and
profile updates.

Every public function returns an AuthResult (or None for "no user") and
never raises; failures are logged here and reported to the caller as a
human-readable message that leaks no internal detail.
"""
import logging
from fastapi import Response
from tortoise.exceptions import IntegrityError
from tortoise.transactions import in_transaction

from faithguide.core.security import (
    create_session_token,
    decode_session_token,
    delete_session_cookie,
    hash_password,
    pwd_context,
    set_session_cookie,
    verify_password,
)
from faithguide.models.progress import UserProgress
from faithguide.models.user import User
from faithguide.schemas.auth import AuthResult, AuthUser, OnboardingRequest, ProfileUpdateRequest

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6

ERR_FIELDS_REQUIRED = "All fields are required"
ERR_PASSWORD_SHORT = f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
ERR_PASSWORD_MISMATCH = "Passwords don't match"
ERR_EMAIL_EXISTS = "An account with this email already exists"
ERR_SIGNUP_FAILED = "Failed to create account. Please try again."
ERR_LOGIN_REQUIRED = "Email and password are required"
ERR_INVALID_CREDENTIALS = "Invalid email or password"
ERR_LOGIN_FAILED = "Failed to log in. Please try again."
ERR_LOGOUT_FAILED = "Failed to log out"
ERR_ONBOARDING_FAILED = "Failed to complete onboarding"
ERR_PROFILE_FAILED = "Failed to update profile"


def normalize_email(email: str) -> str:
    return email.lower()


async def email_taken(email_norm: str) -> bool:
    return await User.filter(email=email_norm).exists()


def start_session(response: Response, user_id: str) -> str:
    """Issue a session token for the user and attach it to the response."""
    token = create_session_token(user_id)
    set_session_cookie(response, token)
    return token


async def signup(
    response: Response,
    email: str,
    password: str,
    username: str,
    confirm_password: str | None = None,
) -> AuthResult:
    """
    Create an account, its empty progress row, and a session.

    The pre-check gives the common duplicate case a cheap answer; the unique
    index on users.email settles races between concurrent signups, and both
    paths report the same conflict message.
    """
    if not email or not password or not username:
        return AuthResult.fail(ERR_FIELDS_REQUIRED)
    if confirm_password is not None and password != confirm_password:
        return AuthResult.fail(ERR_PASSWORD_MISMATCH)
    if len(password) < MIN_PASSWORD_LENGTH:
        return AuthResult.fail(ERR_PASSWORD_SHORT)

    email_norm = normalize_email(email)
    try:
        if await email_taken(email_norm):
            return AuthResult.fail(ERR_EMAIL_EXISTS)

        password_hash = hash_password(password)
        try:
            async with in_transaction() as conn:
                user = await User.create(
                    email=email_norm,
                    username=username,
                    password_hash=password_hash,
                    onboarding_completed=False,
                    using_db=conn,
                )
                await UserProgress.create(user=user, using_db=conn)
                # Signed before commit: a signing failure leaves no account behind
                token = create_session_token(str(user.id))
        except IntegrityError:
            logger.info("[auth] signup lost race for email=%s", email_norm)
            return AuthResult.fail(ERR_EMAIL_EXISTS)

        set_session_cookie(response, token)
    except Exception:
        logger.error("[auth] signup failed for email=%s", email_norm, exc_info=True)
        return AuthResult.fail(ERR_SIGNUP_FAILED)

    logger.info("[auth] created user id=%s", user.id)
    return AuthResult.ok(AuthUser(id=str(user.id), email=user.email, username=user.username))


async def login(response: Response, email: str, password: str) -> AuthResult:
    """
    Check credentials and start a session.
    An unknown email and a wrong password produce the same error.
    """
    if not email or not password:
        return AuthResult.fail(ERR_LOGIN_REQUIRED)

    try:
        user = await User.get_or_none(email=normalize_email(email))
        if user is None:
            # Spend the same hashing time as a real check
            pwd_context.dummy_verify()
            return AuthResult.fail(ERR_INVALID_CREDENTIALS)
        if not verify_password(password, user.password_hash):
            return AuthResult.fail(ERR_INVALID_CREDENTIALS)

        start_session(response, str(user.id))
    except Exception:
        logger.error("[auth] login failed", exc_info=True)
        return AuthResult.fail(ERR_LOGIN_FAILED)

    return AuthResult.ok(AuthUser(
        id=str(user.id),
        email=user.email,
        username=user.username,
        onboardingCompleted=user.onboarding_completed,
    ))


def logout(response: Response) -> AuthResult:
    """Drop the session cookie. Succeeds whether or not a session existed."""
    try:
        delete_session_cookie(response)
    except Exception:
        logger.error("[auth] logout failed", exc_info=True)
        return AuthResult.fail(ERR_LOGOUT_FAILED)
    return AuthResult.ok()


async def get_current_user(token: str | None) -> AuthUser | None:
    """
    Resolve a session token to its user.
    Missing, invalid or expired tokens and deleted users all give None.
    """
    user_id = decode_session_token(token)
    if user_id is None:
        return None
    try:
        user = await User.get_or_none(id=user_id)
    except Exception:
        logger.error("[auth] current user lookup failed for id=%s", user_id, exc_info=True)
        return None
    if user is None:
        return None
    return AuthUser.from_model(user)


async def complete_onboarding(user_id: str, data: OnboardingRequest) -> AuthResult:
    """Store the questionnaire answers and mark onboarding done. Repeat calls overwrite."""
    try:
        updated = await User.filter(id=user_id).update(
            faith_stage=data.faithStage,
            current_needs=data.currentNeeds,
            brings_here=data.bringsHere,
            onboarding_completed=True,
        )
    except Exception:
        logger.error("[auth] complete onboarding failed for id=%s", user_id, exc_info=True)
        return AuthResult.fail(ERR_ONBOARDING_FAILED)
    if not updated:
        logger.warning("[auth] complete onboarding: no user id=%s", user_id)
        return AuthResult.fail(ERR_ONBOARDING_FAILED)
    return AuthResult.ok()


async def update_user_profile(user_id: str, data: ProfileUpdateRequest) -> AuthResult:
    """Overwrite the editable profile fields. Email and onboarding state are untouched."""
    try:
        updated = await User.filter(id=user_id).update(
            username=data.username,
            faith_stage=data.faithStage,
            current_needs=data.currentNeeds,
            brings_here=data.bringsHere,
        )
    except Exception:
        logger.error("[auth] update profile failed for id=%s", user_id, exc_info=True)
        return AuthResult.fail(ERR_PROFILE_FAILED)
    if not updated:
        logger.warning("[auth] update profile: no user id=%s", user_id)
        return AuthResult.fail(ERR_PROFILE_FAILED)
    return AuthResult.ok()
