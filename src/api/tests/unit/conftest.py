"""Unit test fixtures shared across contexts."""

import pytest

from authorization.dependencies.authentication import get_jwt_validator
from infrastructure.settings import (
    get_auth_settings,
    get_database_settings,
    get_settings,
)

UNIT_TEST_JWT_SECRET = "unit-test-secret-with-at-least-32-chars"


@pytest.fixture(autouse=True)
def _jwt_secret_env(monkeypatch):
    """Provide the bearer secret that auth settings require."""
    monkeypatch.setenv("WARDEN_AUTH_JWT_SECRET", UNIT_TEST_JWT_SECRET)


@pytest.fixture(autouse=True)
def _isolate_settings_cache():
    """Drop cached settings so environment overrides never leak between tests."""
    yield
    get_settings.cache_clear()
    get_database_settings.cache_clear()
    get_auth_settings.cache_clear()
    get_jwt_validator.cache_clear()
