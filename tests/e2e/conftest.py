"""Shared fixtures for end-to-end tests."""

import pytest
from fastapi.testclient import TestClient

from ask.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def app():
    """Application wired to in-memory repositories; fresh per test."""
    return create_app(container=build_test_container())


@pytest.fixture
def client(app):
    """Anonymous client."""
    return TestClient(app)


@pytest.fixture
def login_as(app):
    """Register a user and return a client holding their session cookie."""

    def _login_as(username: str, password: str = "password123") -> TestClient:
        user_client = TestClient(app)
        email = f"{username}@example.com"
        registered = user_client.post(
            "/auth/register",
            json={"username": username, "email": email, "password": password},
        )
        assert registered.status_code == 201, registered.text
        logged_in = user_client.post(
            "/auth/login", json={"email": email, "password": password}
        )
        assert logged_in.status_code == 200, logged_in.text
        user_client.user = logged_in.json()["user"]
        return user_client

    return _login_as
