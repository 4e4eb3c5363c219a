"""E2E tests for the host-facing login event API."""

import pytest
from dishka.integrations.fastapi import FastapiProvider
from fastapi.testclient import TestClient

from nameguard.config import BindingSettings
from nameguard.interface.api.app import create_app
from tests.conftest import ALICE_KEY, MALLORY_KEY
from tests.di import build_test_container


@pytest.fixture
def client():
    """API client over an in-memory binding store."""
    app = create_app(build_test_container(None, FastapiProvider()))
    with TestClient(app) as test_client:
        yield test_client


def post_login(client: TestClient, name: str, identity_key: str, address=None):
    return client.post(
        "/login-events",
        json={"name": name, "identity_key": identity_key, "origin_address": address},
    )


class TestLoginEvents:
    """Tests for POST /login-events."""

    def test_first_login_is_allowed(self, client: TestClient):
        response = post_login(client, "Alice", ALICE_KEY, "1.1.1.1")

        assert response.status_code == 200
        body = response.json()
        assert body["decision"] == "allow"
        assert body["kick"] is False
        assert body["kick_message"] is None

    def test_impostor_is_kicked_silently(self, client: TestClient):
        """A different identity using a bound name is kicked, join hidden."""
        post_login(client, "Alice", ALICE_KEY, "1.1.1.1")

        response = post_login(client, "Alice", MALLORY_KEY, "6.6.6.6")

        assert response.status_code == 200
        body = response.json()
        assert body["decision"] == "deny"
        assert body["kick"] is True
        assert body["kick_message"] == BindingSettings().rejection_message
        assert body["suppress_join_message"] is True
        assert body["reason"] == "name already bound to a different identity"

    def test_returning_player_is_allowed(self, client: TestClient):
        post_login(client, "Alice", ALICE_KEY, "1.1.1.1")

        response = post_login(client, "Alice", ALICE_KEY.upper(), "2.2.2.2")

        assert response.json()["decision"] == "allow"

    def test_malformed_event_is_unresolved(self, client: TestClient):
        response = post_login(client, "", ALICE_KEY)

        assert response.status_code == 200
        body = response.json()
        assert body["decision"] == "unresolved"
        assert body["kick"] is False
        assert body["reason"]

    def test_missing_fields_are_rejected_by_schema(self, client: TestClient):
        response = client.post("/login-events", json={"name": "Alice"})

        assert response.status_code == 422


class TestHealth:
    """Tests for GET /health."""

    def test_health(self, client: TestClient):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
