# faithguide/schemas/auth.py
"""
Pydantic schemas for authentication and profile endpoints.
"""
from pydantic import BaseModel


class SignupRequest(BaseModel):
    """Credentials for a new account."""
    email: str
    password: str
    username: str
    confirmPassword: str | None = None  # Checked only when the client sends it


class LoginRequest(BaseModel):
    email: str
    password: str


class OnboardingRequest(BaseModel):
    """
    Answers from the first-run questionnaire.
    The questionnaire does not ask about needs yet, so currentNeeds defaults to "general".
    """
    faithStage: str
    currentNeeds: str = "general"
    bringsHere: str


class ProfileUpdateRequest(BaseModel):
    username: str
    faithStage: str
    currentNeeds: str
    bringsHere: str


class AuthUser(BaseModel):
    """
    The authenticated user as seen outside the auth service.
    Never carries the password hash.
    """
    id: str
    email: str
    username: str
    onboardingCompleted: bool = False
    faithStage: str | None = None
    currentNeeds: str | None = None
    bringsHere: str | None = None

    @classmethod
    def from_model(cls, user) -> "AuthUser":
        return cls(
            id=str(user.id),
            email=user.email,
            username=user.username,
            onboardingCompleted=user.onboarding_completed,
            faithStage=user.faith_stage,
            currentNeeds=user.current_needs,
            bringsHere=user.brings_here,
        )


class AuthResult(BaseModel):
    """
    Outcome of an auth service operation.
    Exactly one of `user` / `error` is meaningful, depending on `success`.
    """
    success: bool
    user: AuthUser | None = None
    error: str | None = None

    @classmethod
    def ok(cls, user: AuthUser | None = None) -> "AuthResult":
        return cls(success=True, user=user)

    @classmethod
    def fail(cls, error: str) -> "AuthResult":
        return cls(success=False, error=error)
