"""
Unit tests for startup configuration validation.
"""
import pytest

from faithguide.config import DEV_JWT_SECRET, ConfigError, Settings


class TestStartupValidation:

    def test_missing_database_url_is_fatal(self):
        s = Settings(database_url=None, jwt_secret="real-secret")
        with pytest.raises(ConfigError):
            s.validate_for_startup()

    def test_missing_database_url_is_fatal_in_dev_too(self):
        s = Settings(env="dev", database_url="", jwt_secret=DEV_JWT_SECRET)
        with pytest.raises(ConfigError):
            s.validate_for_startup()

    def test_production_rejects_default_secret(self):
        s = Settings(env="production", database_url="sqlite://:memory:", jwt_secret=DEV_JWT_SECRET)
        with pytest.raises(ConfigError):
            s.validate_for_startup()

    def test_production_with_real_secret_starts(self):
        s = Settings(env="production", database_url="sqlite://:memory:", jwt_secret="a-long-random-secret")
        s.validate_for_startup()
        assert s.is_production is True

    def test_dev_allows_default_secret(self):
        s = Settings(env="dev", database_url="sqlite://:memory:", jwt_secret=DEV_JWT_SECRET)
        s.validate_for_startup()
        assert s.is_production is False


class TestSessionSettings:

    def test_session_max_age_matches_thirty_days(self):
        s = Settings(session_days=30)
        assert s.session_max_age == 2_592_000

    def test_session_cookie_defaults(self):
        s = Settings()
        assert s.session_cookie_name == "session"
        assert s.jwt_algorithm == "HS256"
