"""End-to-end tests for registration, login and sessions."""

import pytest

from tests.harness import create_app_fixture

# E2E fixture - in-memory persistence behind the real app
app_client = create_app_fixture()


def _register(client, email: str, role: str = "faculty", password: str = "secret-pw"):
    return client.post(
        "/api/auth/register",
        json={
            "full_name": "Dr. Test",
            "email": email,
            "password": password,
            "role": role,
        },
    )


class TestAuthFlow:
    """End-to-end tests for cookie sessions."""

    def test_health(self, app_client):
        response = app_client().get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_register_sets_session_cookie(self, app_client):
        """Registration logs the new profile in straight away."""
        client = app_client()

        # Act
        response = _register(client, "new@acadly.edu")

        # Assert
        assert response.status_code == 201
        body = response.json()
        assert body["points"] == 0
        assert "password_hash" not in body
        assert "auth_token" in response.cookies

        me = client.get("/api/auth/me")
        assert me.status_code == 200
        assert me.json()["email"] == "new@acadly.edu"

    def test_duplicate_registration_conflicts(self, app_client):
        client = app_client()
        _register(client, "dup@acadly.edu")

        response = _register(app_client(), "dup@acadly.edu")

        assert response.status_code == 409

    def test_short_password_is_rejected(self, app_client):
        response = _register(app_client(), "short@acadly.edu", password="123")

        assert response.status_code == 400
        assert response.json()["detail"].startswith("password:")

    def test_login_with_wrong_password(self, app_client):
        _register(app_client(), "login@acadly.edu")

        response = app_client().post(
            "/api/auth/login",
            json={"email": "login@acadly.edu", "password": "not-the-password"},
        )

        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid email or password"

    def test_login_then_logout(self, app_client):
        """Logging out clears the cookie, so /me stops working."""
        _register(app_client(), "cycle@acadly.edu")
        client = app_client()

        # Act
        login = client.post(
            "/api/auth/login",
            json={"email": "cycle@acadly.edu", "password": "secret-pw"},
        )
        logout = client.post("/api/auth/logout")

        # Assert
        assert login.status_code == 200
        assert logout.json() == {"message": "Logged out"}
        assert client.get("/api/auth/me").status_code == 401

    @pytest.mark.parametrize(
        ("method", "path"),
        [
            ("get", "/api/auth/me"),
            ("get", "/api/recommendations"),
            ("get", "/api/queries"),
            ("get", "/api/notifications"),
            ("get", "/api/dashboard/stats"),
            ("get", "/api/faculty-calendar"),
            ("get", "/api/ai/insights"),
        ],
    )
    def test_protected_routes_require_session(self, app_client, method, path):
        response = getattr(app_client(), method)(path)

        assert response.status_code == 401

    def test_session_cookie_name_ignores_auth_overrides(self, app_client, monkeypatch):
        """The cookie routes read is the cookie register issues, whatever AUTH__* says."""
        monkeypatch.setenv("AUTH__COOKIE_NAME", "acadly_session")
        client = app_client()

        # Act
        response = _register(client, "cookie@acadly.edu")
        me = client.get("/api/auth/me")

        # Assert
        assert response.status_code == 201
        assert list(response.cookies.keys()) == ["auth_token"]
        assert me.status_code == 200
        assert me.json()["email"] == "cookie@acadly.edu"

    def test_garbage_cookie_is_rejected(self, app_client):
        response = app_client().get(
            "/api/auth/me", headers={"Cookie": "auth_token=not-a-jwt"}
        )

        assert response.status_code == 401
