"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- Fast bcrypt settings for the whole session
- Test client with fresh in-memory stores
- Register/login helpers
"""

import os
from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

# Lowest bcrypt cost keeps hashing fast; must be set before settings are cached.
os.environ.setdefault("BCRYPT_COST", "4")
os.environ.setdefault("JWT_SECRET", "test-jwt-secret-key-for-the-test-suite")

from src.api.main import app  # noqa: E402
from src.config.settings import get_settings  # noqa: E402


@pytest.fixture(autouse=True, scope="session")
def fresh_settings() -> Generator[None, None, None]:
    """Drop any settings cached before the test environment was applied."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """Create test client; entering the context runs lifespan and resets the stores."""
    with TestClient(app) as test_client:
        yield test_client


def register(client: TestClient, username: str, password: str, role: str) -> dict:
    """Register a user and return the response body."""
    response = client.post(
        "/register",
        json={"username": username, "password": password, "role": role},
    )
    assert response.status_code == 201, response.text
    return response.json()


def login(client: TestClient, username: str, password: str) -> str:
    """Log in and return the bearer token."""
    response = client.post("/login", json={"username": username, "password": password})
    assert response.status_code == 200, response.text
    return response.json()["token"]


def auth_header(token: str) -> dict:
    """Create Bearer Authorization header for testing."""
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def register_user(client: TestClient):
    """Callable fixture: register_user(username, password, role) -> response body."""
    return lambda username, password, role: register(client, username, password, role)


@pytest.fixture
def headers_for(client: TestClient):
    """Callable fixture: register a user, log in and return its auth header."""

    def _headers_for(username: str, role: str, password: str = "secret123") -> dict:
        register(client, username, password, role)
        return auth_header(login(client, username, password))

    return _headers_for


@pytest.fixture
def admin_headers(client: TestClient) -> dict:
    """Authorization header for a freshly registered admin."""
    register(client, "admin1", "adminpass", "admin")
    return auth_header(login(client, "admin1", "adminpass"))


@pytest.fixture
def student_headers(client: TestClient) -> dict:
    """Authorization header for a freshly registered student."""
    register(client, "budi", "budipass", "mahasiswa")
    return auth_header(login(client, "budi", "budipass"))
