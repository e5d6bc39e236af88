"""
Integration tests for the FastAPI surface.

Uses fastapi.testclient with a stub directory; no servers are started.
"""

from datetime import timedelta

import jwt
import pytest
from fastapi.testclient import TestClient
from structlog.testing import capture_logs

from directory_auth.api.app import create_app, LOGOUT_OK, MISSING_TOKEN_ID
from directory_auth.config import AuthSettings
from directory_auth.domain.errors import (
    ConfigurationError,
    INVALID_TOKEN,
    REVOKED_TOKEN,
    USER_INACTIVE,
    USER_NOT_FOUND,
)

U1 = "6f1c2a7e-3b4d-4e5f-8a9b-0c1d2e3f4a5b"


@pytest.fixture
def api(session_client):
    return TestClient(create_app(client=session_client))


def _login(api, identifier="admin@x.cl"):
    response = api.post("/auth/login", json={"identifier": identifier, "password": "pw"})
    assert response.status_code == 200
    return response.json()["token"]


def _bearer(token):
    return {"Authorization": f"Bearer {token}"}


class TestLogin:

    def test_login_returns_token(self, api):
        response = api.post("/auth/login", json={"identifier": "admin@x.cl", "password": "pw"})

        assert response.status_code == 200
        body = response.json()
        assert body["succeeded"] is True
        assert body["token"]
        assert body["error"] is None

    def test_unknown_user_is_unauthorized(self, api):
        response = api.post("/auth/login", json={"identifier": "ghost", "password": "pw"})

        assert response.status_code == 401
        assert response.json()["detail"] == USER_NOT_FOUND

    def test_inactive_user_is_unauthorized(self, api):
        response = api.post("/auth/login", json={"identifier": "dormant", "password": "pw"})

        assert response.status_code == 401
        assert response.json()["detail"] == USER_INACTIVE

    def test_unreachable_directory_is_unauthorized(self, api, directory):
        directory.unreachable = True

        response = api.post("/auth/login", json={"identifier": "admin", "password": "pw"})

        assert response.status_code == 401
        assert response.json()["detail"] == USER_NOT_FOUND

    @pytest.mark.parametrize("body", [{}, {"identifier": "admin"}, {"password": "pw"}, {"identifier": "", "password": "pw"}])
    def test_missing_fields_rejected(self, api, body):
        assert api.post("/auth/login", json=body).status_code == 422


class TestValidateToken:

    def test_valid_token(self, api):
        token = _login(api)

        response = api.get("/auth/validate-token", headers=_bearer(token))

        assert response.status_code == 200
        assert response.json() == {"subject": U1, "role": "1"}

    def test_missing_header(self, api):
        response = api.get("/auth/validate-token")

        assert response.status_code == 401
        assert response.json()["detail"] == INVALID_TOKEN

    def test_garbage_token(self, api):
        response = api.get("/auth/validate-token", headers=_bearer("garbage"))

        assert response.status_code == 401
        assert response.json()["detail"] == INVALID_TOKEN

    def test_expired_token(self, api, clock):
        token = _login(api)
        clock.advance(minutes=60)

        assert api.get("/auth/validate-token", headers=_bearer(token)).status_code == 401


class TestLogout:

    def test_logout_then_validate_is_revoked(self, api):
        token = _login(api)

        response = api.post("/auth/logout", headers=_bearer(token))
        assert response.status_code == 200
        assert response.json() == {"detail": LOGOUT_OK}

        response = api.get("/auth/validate-token", headers=_bearer(token))
        assert response.status_code == 401
        assert response.json()["detail"] == REVOKED_TOKEN

    def test_logout_twice_is_accepted(self, api):
        token = _login(api)

        assert api.post("/auth/logout", headers=_bearer(token)).status_code == 200
        assert api.post("/auth/logout", headers=_bearer(token)).status_code == 200

    def test_logout_token_without_id(self, api, clock, secret):
        exp = int((clock.now + timedelta(hours=1)).timestamp())
        token = jwt.encode({"sub": U1, "role": "1", "exp": exp}, secret, algorithm="HS256")

        response = api.post("/auth/logout", headers=_bearer(token))

        assert response.status_code == 400
        assert response.json()["detail"] == MISSING_TOKEN_ID

    def test_logout_invalid_token(self, api):
        assert api.post("/auth/logout", headers=_bearer("garbage")).status_code == 401
        assert api.post("/auth/logout").status_code == 401


def test_app_built_from_settings_closes_directory_on_shutdown():
    settings = AuthSettings(
        jwt_secret="settings-secret-long-enough-for-hs256",
        directory_url="http://directory.invalid",
    )
    app = create_app(settings=settings)
    client = app.state.session_client

    with capture_logs() as logs:
        with TestClient(app) as api:
            assert api.get("/auth/validate-token").status_code == 401

    assert client._directory._client.is_closed
    assert "directory_client_closed" in [entry["event"] for entry in logs]


def test_app_requires_configuration(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("JWT_SECRET", raising=False)
    monkeypatch.delenv("CLIENTS_SERVICE_URL", raising=False)

    with pytest.raises(ConfigurationError):
        create_app()
