# faithguide/config.py
"""
Application settings.
Values are read from the process environment (and an optional .env file)
once at import time and exposed through the module-level `settings` object.
"""
import os
import logging
from pydantic import BaseModel
from dotenv import load_dotenv

load_dotenv()  # Load environment variables from .env file

logger = logging.getLogger("uvicorn.error")

# Development-only signing secret; never accepted when ENV=production
DEV_JWT_SECRET = "dev-secret"


class ConfigError(RuntimeError):
    """Raised when the process cannot start with the current configuration."""


def _split_origins(raw: str | None) -> list[str]:
    if not raw:
        return ["http://localhost:3000", "http://127.0.0.1:3000"]
    return [o.strip() for o in raw.split(",") if o.strip()]


class Settings(BaseModel):
    # General app settings
    APP_NAME: str = "FaithGuide API"
    env: str = os.getenv("ENV", "dev")

    # Host & Port settings
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))

    # CORS origins for the web client (cookies are sent cross-origin)
    CORS_ORIGINS: list[str] = _split_origins(os.getenv("CORS_ORIGINS"))

    # Relational store; required, startup aborts without it
    database_url: str | None = os.getenv("DATABASE_URL")

    # Session signing
    jwt_secret: str = os.getenv("JWT_SECRET") or DEV_JWT_SECRET
    jwt_algorithm: str = "HS256"
    session_days: int = int(os.getenv("SESSION_DAYS", "30"))
    session_cookie_name: str = "session"

    @property
    def is_production(self) -> bool:
        return self.env.lower() in ("prod", "production")

    @property
    def session_max_age(self) -> int:
        """Cookie max-age in seconds; matches the token validity window."""
        return self.session_days * 24 * 60 * 60

    def validate_for_startup(self) -> None:
        """
        Fail fast on configuration the service must not run with.

        Raises:
            ConfigError: DATABASE_URL is unset, or a production process has
                no real JWT_SECRET.
        """
        if not self.database_url:
            raise ConfigError("DATABASE_URL environment variable is not set")
        if self.jwt_secret == DEV_JWT_SECRET:
            if self.is_production:
                raise ConfigError("JWT_SECRET must be set in production")
            logger.warning("[config] JWT_SECRET not set -> using development secret (env=%s)", self.env)


settings = Settings()  # Instantiate configuration
