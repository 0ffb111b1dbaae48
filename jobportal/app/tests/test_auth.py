"""Tests for the authentication entry endpoints."""
import pytest

from jobportal.app.tests.conftest import make_token


@pytest.mark.api
def test_sign_in(client):
    response = client.post(
        "/api/auth/sign-in",
        json={"email": "candidate@example.com", "password": "correct-password"}
    )
    assert response.status_code == 200
    body = response.json()
    assert body["token_type"] == "bearer"
    assert body["user"]["email"] == "candidate@example.com"

    session = client.get(
        "/api/auth/session",
        headers={"Authorization": f"Bearer {body['access_token']}"}
    )
    assert session.json() == {
        "authenticated": True,
        "user": {"id": "user-123", "email": "candidate@example.com"},
    }


@pytest.mark.api
def test_sign_in_wrong_password(client):
    response = client.post(
        "/api/auth/sign-in",
        json={"email": "candidate@example.com", "password": "nope"}
    )
    assert response.status_code == 401
    assert "Invalid login credentials" in response.json()["detail"]


@pytest.mark.api
def test_token_form(client):
    response = client.post(
        "/api/auth/token",
        data={"username": "candidate@example.com", "password": "correct-password"}
    )
    assert response.status_code == 200
    assert response.json()["access_token"]


@pytest.mark.api
def test_sign_up(client):
    response = client.post(
        "/api/auth/sign-up",
        json={"email": "new@example.com", "password": "secret-password"}
    )
    assert response.status_code == 201
    assert response.json()["user"]["email"] == "new@example.com"


@pytest.mark.api
def test_session_without_token(client):
    response = client.get("/api/auth/session")
    assert response.status_code == 200
    assert response.json() == {"authenticated": False, "user": None}


@pytest.mark.api
def test_expired_token_is_anonymous(client):
    token = make_token(exp=1)
    response = client.get("/api/auth/session", headers={"Authorization": f"Bearer {token}"})
    assert response.json()["authenticated"] is False


@pytest.mark.api
def test_sign_out(client, fake_backend, auth_headers):
    response = client.post("/api/auth/sign-out", headers=auth_headers)
    assert response.status_code == 204
    assert fake_backend.signed_out == [auth_headers["Authorization"].split(" ", 1)[1]]


@pytest.mark.api
def test_sign_out_requires_session(client):
    assert client.post("/api/auth/sign-out").status_code == 401


@pytest.mark.api
def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
