"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
Services under test are the real implementations running on the in-memory
repositories from tests/fakes.py.
"""

import pytest
from fastapi.testclient import TestClient

from api import create_app
from api.dependencies import (
    get_catalog_service,
    get_rating_service,
    get_saved_list_service,
    get_session_service,
    get_user_service,
    reset_container,
)
from shared.config import get_settings
from shared.models import Identity, UserRole

from tests.fakes import InMemoryDatabase, Services, build_services


@pytest.fixture(autouse=True)
def reset_service_container():
    """Reset the service container before and after each test."""
    reset_container()
    yield
    reset_container()


@pytest.fixture
def database() -> InMemoryDatabase:
    """Provide an empty in-memory store."""
    return InMemoryDatabase()


@pytest.fixture
def services(database: InMemoryDatabase) -> Services:
    """Provide the real services wired onto the in-memory store."""
    return build_services(database)


@pytest.fixture
def user_identity() -> Identity:
    return Identity(user_id="00000000-0000-4000-8000-000000000001", role=UserRole.STANDARD)


@pytest.fixture
def admin_identity() -> Identity:
    return Identity(user_id="00000000-0000-4000-8000-0000000000aa", role=UserRole.PRIVILEGED)


@pytest.fixture
def app(services: Services):
    """Create a fresh app whose services run on the in-memory store."""
    app = create_app()
    app.dependency_overrides[get_session_service] = lambda: services.sessions
    app.dependency_overrides[get_user_service] = lambda: services.users
    app.dependency_overrides[get_catalog_service] = lambda: services.catalog
    app.dependency_overrides[get_rating_service] = lambda: services.ratings
    app.dependency_overrides[get_saved_list_service] = lambda: services.saved_list
    return app


@pytest.fixture
def client(app) -> TestClient:
    """Anonymous client."""
    return TestClient(app)


@pytest.fixture
def client_for(app, database: InMemoryDatabase):
    """
    Factory for clients that carry a valid session cookie.

    Usage:
        client, user = client_for(UserRole.PRIVILEGED)
    """
    cookie_name = get_settings().session_cookie_name

    def _client_for(role: UserRole = UserRole.STANDARD, email: str = None):
        user = database.add_user(email=email, role=role)
        client = TestClient(app)
        client.cookies.set(cookie_name, database.issue_session(user))
        return client, user

    return _client_for
