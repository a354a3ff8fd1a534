"""End-to-end tests for the invite HTTP API.

Runs the real FastAPI app over a test container with in-memory
persistence.
"""

from uuid import uuid4

import pytest
from dishka.integrations.fastapi import FastapiProvider
from fastapi.testclient import TestClient

from gate.interface.api.app import create_app
from tests.di import build_test_container
from tests.factories import ISSUER_KEY

ISSUER_HEADERS = {"X-Issuer-Key": ISSUER_KEY}


@pytest.fixture
def client():
    """Create test client over a fresh container."""
    container = build_test_container(None, FastapiProvider())
    with TestClient(create_app(container)) as test_client:
        yield test_client


def _issue(client: TestClient, **body) -> dict:
    response = client.post("/invites", json=body, headers=ISSUER_HEADERS)
    assert response.status_code == 201, response.text
    return response.json()


class TestHealth:
    """Tests for GET /health."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert response.json()["environment"] == "test"


class TestIssue:
    """Tests for POST /invites, GET /invites and GET /invites/{id}."""

    def test_issue_invite(self, client):
        data = _issue(client, email="a@x.com", ttl_days=7)

        assert len(data["code"]) == 14
        assert data["email"] == "a@x.com"
        assert data["expires_at"] is not None

    def test_issue_requires_key(self, client):
        response = client.post("/invites", json={})

        assert response.status_code == 401

    def test_issue_rejects_wrong_key(self, client):
        response = client.post(
            "/invites", json={}, headers={"X-Issuer-Key": "not-the-key"}
        )

        assert response.status_code == 401

    def test_duplicate_code(self, client):
        _issue(client, code="WELCOME-2026")

        response = client.post(
            "/invites", json={"code": "welcome-2026"}, headers=ISSUER_HEADERS
        )

        assert response.status_code == 409
        assert response.json()["error"] == "duplicate_code"

    def test_list_invites(self, client):
        _issue(client, code="LIST-0001")
        _issue(client, code="LIST-0002")

        response = client.get("/invites", headers=ISSUER_HEADERS)

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 2
        assert all("code_hash" not in invite for invite in data["invites"])

    def test_list_requires_key(self, client):
        assert client.get("/invites").status_code == 401

    def test_get_invite(self, client):
        issued = _issue(client, email="a@x.com")

        response = client.get(
            f"/invites/{issued['invite_id']}", headers=ISSUER_HEADERS
        )

        assert response.status_code == 200
        data = response.json()
        assert data["invite_id"] == issued["invite_id"]
        assert data["email"] == "a@x.com"
        assert "code" not in data
        assert "code_hash" not in data

    def test_get_unknown_invite(self, client):
        response = client.get(f"/invites/{uuid4()}", headers=ISSUER_HEADERS)

        assert response.status_code == 404

    def test_get_requires_key(self, client):
        issued = _issue(client)

        assert client.get(f"/invites/{issued['invite_id']}").status_code == 401

    def test_unusable_bound_email_rejected(self, client):
        response = client.post(
            "/invites",
            json={"meta": {"email": ["a@x.com"]}},
            headers=ISSUER_HEADERS,
        )

        assert response.status_code == 422
        assert response.json()["error"] == "validation_error"
        assert client.get("/invites", headers=ISSUER_HEADERS).json()["total"] == 0


class TestRedeem:
    """Tests for POST /invites/redeem."""

    def test_redeem_flow(self, client):
        """Issue, redeem once, then fail on reuse."""
        code = _issue(client, email="a@x.com")["code"]
        body = {"code": code.lower(), "email": "a@x.com", "password": "s3cret-pass"}

        first = client.post("/invites/redeem", json=body)
        second = client.post("/invites/redeem", json=body)

        assert first.status_code == 201
        assert "account_id" in first.json()
        assert second.status_code == 400
        assert second.json()["error"] == "invalid_code"

    def test_unknown_and_malformed_codes_look_alike(self, client):
        unknown = client.post(
            "/invites/redeem",
            json={"code": "NOPE-NOPE", "email": "a@x.com", "password": "s3cret-pass"},
        )
        malformed = client.post(
            "/invites/redeem",
            json={"code": "ab", "email": "a@x.com", "password": "s3cret-pass"},
        )

        assert unknown.status_code == malformed.status_code == 400
        assert unknown.json() == malformed.json()

    def test_email_mismatch(self, client):
        code = _issue(client, email="a@x.com")["code"]

        response = client.post(
            "/invites/redeem",
            json={"code": code, "email": "b@x.com", "password": "s3cret-pass"},
        )

        assert response.status_code == 403
        assert response.json()["error"] == "email_mismatch"

    def test_expired(self, client):
        code = _issue(client, code="OLD-CODE", expires_at="2000-01-01T00:00:00Z")[
            "code"
        ]

        response = client.post(
            "/invites/redeem",
            json={"code": code, "email": "a@x.com", "password": "s3cret-pass"},
        )

        assert response.status_code == 410
        assert response.json()["error"] == "invite_expired"

    def test_short_password_keeps_invite(self, client):
        """Request validation fails before the invite is touched."""
        code = _issue(client)["code"]

        rejected = client.post(
            "/invites/redeem",
            json={"code": code, "email": "a@x.com", "password": "short"},
        )
        accepted = client.post(
            "/invites/redeem",
            json={"code": code, "email": "a@x.com", "password": "long-enough"},
        )

        assert rejected.status_code == 422
        assert accepted.status_code == 201

    def test_blank_email_keeps_invite(self, client):
        code = _issue(client)["code"]

        rejected = client.post(
            "/invites/redeem",
            json={"code": code, "email": "     ", "password": "s3cret-pass"},
        )
        accepted = client.post(
            "/invites/redeem",
            json={"code": code, "email": "a@x.com", "password": "s3cret-pass"},
        )

        assert rejected.status_code == 422
        assert accepted.status_code == 201
