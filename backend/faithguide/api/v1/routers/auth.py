# faithguide/api/v1/routers/auth.py
from fastapi import APIRouter, Depends, Response
from faithguide.api.v1.deps import get_current_user, get_session_token
from faithguide.models.user import User
from faithguide.schemas.auth import (
    AuthResult,
    LoginRequest,
    OnboardingRequest,
    ProfileUpdateRequest,
    SignupRequest,
)
from faithguide.services import auth_service

router = APIRouter(prefix="/auth", tags=["auth"])


def _out(result: AuthResult) -> dict:
    return result.model_dump(exclude_none=True)


@router.post("/signup")
async def signup(body: SignupRequest, response: Response):
    """
    Register a new account and start a session.

    Returns:
        dict:
            - success: bool
            - user: {id, email, username, onboardingCompleted} (if success)
            - error: str (if failure)

    Note:
        On success the session token is set as the HttpOnly "session" cookie.
    """
    result = await auth_service.signup(
        response,
        body.email,
        body.password,
        body.username,
        confirm_password=body.confirmPassword,
    )
    return _out(result)


@router.post("/login")
async def login(body: LoginRequest, response: Response):
    """
    Authenticate with email and password.

    Unknown email and wrong password give the same error text, so the
    response does not reveal which accounts exist.
    """
    result = await auth_service.login(response, body.email, body.password)
    return _out(result)


@router.post("/logout")
async def logout(response: Response):
    """
    Log out by clearing the session cookie. Always succeeds.

    Note:
        Sessions are stateless; a copied token remains valid until it expires.
    """
    return _out(auth_service.logout(response))


@router.get("/me")
async def me(token: str | None = Depends(get_session_token)):
    """
    Get the current user, or null when there is no valid session.
    Absence of a session is not an error here.
    """
    user = await auth_service.get_current_user(token)
    return {"success": True, "data": user.model_dump() if user else None}


@router.post("/onboarding")
async def complete_onboarding(body: OnboardingRequest, user: User = Depends(get_current_user)):
    """Store onboarding answers for the session user and mark onboarding complete."""
    result = await auth_service.complete_onboarding(str(user.id), body)
    return _out(result)


@router.put("/profile")
async def update_profile(body: ProfileUpdateRequest, user: User = Depends(get_current_user)):
    """Overwrite username, faith stage, current needs and "brings here" for the session user."""
    result = await auth_service.update_user_profile(str(user.id), body)
    return _out(result)
