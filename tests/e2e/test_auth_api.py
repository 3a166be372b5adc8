"""End-to-end tests for registration, login and the session cookie."""

from uuid import uuid4


class TestRegister:
    """Tests for POST /auth/register."""

    def test_register_returns_user_without_password(self, client):
        # Act
        response = client.post(
            "/auth/register",
            json={
                "username": "alice",
                "email": "alice@example.com",
                "password": "password123",
                "first_name": "Alice",
            },
        )

        # Assert
        assert response.status_code == 201
        user = response.json()["user"]
        assert user["username"] == "alice"
        assert user["first_name"] == "Alice"
        assert "password" not in user
        assert "password_hash" not in user

    def test_duplicate_username_is_400(self, client):
        body = {"username": "alice", "email": "alice@example.com", "password": "password123"}
        client.post("/auth/register", json=body)

        response = client.post(
            "/auth/register", json={**body, "email": "other@example.com"}
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Username already taken"}

    def test_missing_field_is_400(self, client):
        response = client.post("/auth/register", json={"username": "alice"})

        assert response.status_code == 400
        assert "error" in response.json()


class TestLogin:
    """Tests for POST /auth/login and the cookie it sets."""

    def test_login_sets_http_only_cookie(self, client):
        client.post(
            "/auth/register",
            json={"username": "alice", "email": "alice@example.com", "password": "password123"},
        )

        response = client.post(
            "/auth/login", json={"email": "alice@example.com", "password": "password123"}
        )

        assert response.status_code == 200
        assert response.json()["user"]["username"] == "alice"
        assert "token" not in response.json()
        set_cookie = response.headers["set-cookie"]
        assert set_cookie.startswith("auth_token=")
        assert "HttpOnly" in set_cookie

    def test_wrong_password_is_401(self, client):
        client.post(
            "/auth/register",
            json={"username": "alice", "email": "alice@example.com", "password": "password123"},
        )

        response = client.post(
            "/auth/login", json={"email": "alice@example.com", "password": "wrong-password"}
        )

        assert response.status_code == 401
        assert response.json() == {"error": "Invalid credentials"}


class TestProfile:
    """Tests for GET /auth/profile and logout."""

    def test_profile_with_cookie(self, login_as):
        alice = login_as("alice")

        response = alice.get("/auth/profile")

        assert response.status_code == 200
        assert response.json()["id"] == alice.user["id"]
        assert response.json()["email"] == "alice@example.com"

    def test_profile_without_cookie_is_401(self, client):
        response = client.get("/auth/profile")

        assert response.status_code == 401
        assert response.json() == {"error": "Authentication required"}

    def test_forged_cookie_is_401(self, client):
        client.cookies.set("auth_token", "not.a.jwt")

        response = client.get("/auth/profile")

        assert response.status_code == 401

    def test_logout_clears_cookie(self, login_as):
        alice = login_as("alice")

        response = alice.post("/auth/logout")

        assert response.status_code == 200
        assert alice.get("/auth/profile").status_code == 401


class TestMisc:
    """Health and error envelope."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_unknown_route_uses_error_envelope(self, client):
        response = client.get(f"/nowhere/{uuid4()}")

        assert response.status_code == 404
        assert "error" in response.json()
