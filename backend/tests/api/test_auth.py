"""Tests for the auth endpoints and bearer-token dependency."""

import pytest
from datetime import datetime
from fastapi.testclient import TestClient

from api import app
from api.dependencies import get_auth_service
from modules.auth.service import AuthService
from modules.auth.store import InMemoryAccountStore


client = TestClient(app)


@pytest.fixture(autouse=True)
def override_auth(auth_service):
    """Route handlers get the in-memory auth service with a fake clock."""
    app.dependency_overrides[get_auth_service] = lambda: auth_service
    yield
    app.dependency_overrides.clear()


def signup(payload: dict) -> dict:
    response = client.post("/api/auth/signup", json=payload)
    assert response.status_code == 200, response.text
    return response.json()


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


class TestSignup:
    def test_signup_success(self, signup_payload, clock):
        """Signup returns the account, a token and a 7 day expiry."""
        data = signup(signup_payload)

        assert data["success"] is True
        assert data["token"]
        assert data["user"]["email"] == "a@x.com"
        assert data["user"]["firstName"] == "A"
        assert data["user"]["lastName"] == "B"
        assert "password" not in data["user"]
        assert "passwordHash" not in data["user"]
        expires_at = datetime.fromisoformat(data["expiresAt"].replace("Z", "+00:00"))
        assert (expires_at - clock.now).days == 7

    def test_signup_duplicate_email(self, signup_payload):
        """A second signup with the same email is a 409 conflict."""
        signup(signup_payload)

        response = client.post("/api/auth/signup", json=signup_payload)

        assert response.status_code == 409
        assert response.json() == {
            "success": False,
            "error": "Email already registered",
            "code": "EMAIL_TAKEN",
        }

    def test_signup_weak_password(self, signup_payload):
        response = client.post("/api/auth/signup", json={**signup_payload, "password": "short"})

        assert response.status_code == 400
        assert response.json()["error"] == "Password must be at least 8 characters"
        assert response.json()["code"] == "WEAK_PASSWORD"

    def test_signup_missing_fields(self):
        response = client.post("/api/auth/signup", json={"email": "a@x.com"})

        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "error": "All fields are required",
            "code": "MISSING_FIELD",
        }

    def test_signup_invalid_email(self, signup_payload):
        response = client.post("/api/auth/signup", json={**signup_payload, "email": "nope"})
        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_EMAIL"

    def test_signup_malformed_body(self):
        """Unparseable JSON gets the envelope with status 400."""
        response = client.post(
            "/api/auth/signup",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json()["success"] is False


class TestLogin:
    def test_login_success(self, signup_payload):
        """Login after signup returns the same account with a new token."""
        signed_up = signup(signup_payload)

        response = client.post("/api/auth/login", json={"email": "a@x.com", "password": "longenough1"})

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["user"]["id"] == signed_up["user"]["id"]
        assert data["token"] != signed_up["token"]

    def test_login_wrong_password(self, signup_payload):
        """Wrong password is a 401 with a generic message."""
        signup(signup_payload)

        response = client.post("/api/auth/login", json={"email": "a@x.com", "password": "wrong"})

        assert response.status_code == 401
        assert response.json() == {
            "success": False,
            "error": "Invalid email or password",
            "code": "INVALID_CREDENTIALS",
        }

    def test_login_unknown_email(self):
        response = client.post("/api/auth/login", json={"email": "who@x.com", "password": "longenough1"})
        assert response.status_code == 401
        assert response.json()["error"] == "Invalid email or password"

    def test_login_empty_fields(self):
        """Blank credentials are a 400, not a failed login."""
        response = client.post("/api/auth/login", json={"email": "", "password": ""})

        assert response.status_code == 400
        assert response.json() == {"success": False, "error": "All fields are required", "code": "MISSING_FIELD"}


class TestMe:
    def test_me_with_valid_token(self, signup_payload):
        token = signup(signup_payload)["token"]

        response = client.get("/api/auth/me", headers=bearer(token))

        assert response.status_code == 200
        assert response.json()["success"] is True
        assert response.json()["user"]["email"] == "a@x.com"

    def test_me_without_token(self):
        """No Authorization header is a 401 envelope."""
        response = client.get("/api/auth/me")

        assert response.status_code == 401
        assert response.json() == {"success": False, "error": "Not authenticated", "code": "NOT_AUTHENTICATED"}
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_me_with_unknown_token(self):
        response = client.get("/api/auth/me", headers=bearer("made-up"))
        assert response.status_code == 401
        assert response.json()["code"] == "NOT_AUTHENTICATED"

    def test_me_with_expired_token(self, signup_payload, clock):
        """After 7 days the token is expired, then forgotten."""
        token = signup(signup_payload)["token"]
        clock.advance(days=7)

        first = client.get("/api/auth/me", headers=bearer(token))
        second = client.get("/api/auth/me", headers=bearer(token))

        assert first.status_code == 401
        assert first.json()["error"] == "Session expired"
        assert second.json()["code"] == "NOT_AUTHENTICATED"

    def test_me_with_orphaned_session(self, signup_payload, session_store, passwords, clock):
        """A token whose account is gone reads as signed out."""
        token = signup(signup_payload)["token"]
        orphaned = AuthService(InMemoryAccountStore(), session_store, passwords=passwords, clock=clock)
        app.dependency_overrides[get_auth_service] = lambda: orphaned

        response = client.get("/api/auth/me", headers=bearer(token))

        assert response.status_code == 401
        assert response.json() == {"success": False, "error": "User not found", "code": "NOT_AUTHENTICATED"}


class TestLogout:
    def test_logout_with_body_token(self, signup_payload):
        """Token in the JSON body ends the session."""
        token = signup(signup_payload)["token"]

        response = client.post("/api/auth/logout", json={"token": token})

        assert response.status_code == 200
        assert response.json() == {"success": True, "message": "Logged out successfully"}
        assert client.get("/api/auth/me", headers=bearer(token)).status_code == 401

    def test_logout_with_bearer_header(self, signup_payload):
        token = signup(signup_payload)["token"]

        response = client.post("/api/auth/logout", headers=bearer(token))

        assert response.status_code == 200
        assert client.get("/api/auth/me", headers=bearer(token)).status_code == 401

    def test_logout_is_idempotent(self, signup_payload):
        """Logging out twice, or with no token at all, still succeeds."""
        token = signup(signup_payload)["token"]

        assert client.post("/api/auth/logout", json={"token": token}).status_code == 200
        assert client.post("/api/auth/logout", json={"token": token}).status_code == 200
        assert client.post("/api/auth/logout").status_code == 200


class TestScenario:
    def test_signup_then_wrong_password_login(self, signup_payload, clock):
        """Signup succeeds, wrong-password login fails, session stays valid."""
        data = signup(signup_payload)
        expires_at = datetime.fromisoformat(data["expiresAt"].replace("Z", "+00:00"))
        assert expires_at > clock.now

        bad = client.post("/api/auth/login", json={"email": "a@x.com", "password": "wrong"})
        assert bad.status_code == 401

        me = client.get("/api/auth/me", headers=bearer(data["token"]))
        assert me.status_code == 200
