"""Fixtures for authorization route tests."""

from collections.abc import Callable
from unittest.mock import Mock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from authorization.dependencies.authentication import (
    get_current_subject_id,
    get_jwt_validator,
)
from authorization.dependencies.engine import get_authorization_store
from authorization.dependencies.records import get_record_repository
from authorization.domain.value_objects import SubjectId
from authorization.presentation import records_router
from authorization.presentation import router as authorization_router
from shared_kernel.auth import JWTValidator

TEST_SECRET = "test-secret"


@pytest.fixture
def app(store) -> FastAPI:
    """App with authorization and record routes reading from the in-memory store."""
    app = FastAPI()
    app.include_router(authorization_router)
    app.include_router(records_router)
    app.dependency_overrides[get_authorization_store] = lambda: store
    app.dependency_overrides[get_record_repository] = lambda: store
    app.dependency_overrides[get_jwt_validator] = lambda: JWTValidator(
        secret=TEST_SECRET, probe=Mock()
    )
    return app


@pytest.fixture
def login_as(app) -> Callable[[int], None]:
    """Authenticate subsequent requests as the given subject id."""

    def _login(subject_id: int) -> None:
        app.dependency_overrides[get_current_subject_id] = lambda: SubjectId(
            value=subject_id
        )

    return _login


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)
