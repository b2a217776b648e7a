"""Unit tests for the publication registry API routes.

Tests the HTTP framing of registry operations:
- Caller identity from the X-Principal-ID header
- Status codes and RFC 7807 bodies carrying registry codes
- End-to-end register / read / mutate / access flows
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from src.api.dependencies.publication import (
    reset_publication_dependencies,
    set_registry_config,
)
from src.api.main import app
from src.api.middleware.logging_middleware import CORRELATION_HEADER
from src.config.registry_config import TEST_REGISTRY_CONFIG

ALICE = {"X-Principal-ID": "alice"}
BOB = {"X-Principal-ID": "bob"}

VALID_BODY = {
    "title": "Field Notes",
    "byte_count": 2048,
    "description": "Survey notes, spring season",
    "tags": ["survey", "notes"],
}


@pytest.fixture
def client() -> Iterator[TestClient]:
    """Create a test client over a fresh registry."""
    reset_publication_dependencies()
    set_registry_config(TEST_REGISTRY_CONFIG)
    with TestClient(app) as test_client:
        yield test_client
    reset_publication_dependencies()


def _register(client: TestClient, headers: dict[str, str] = ALICE) -> int:
    response = client.post("/v1/publications", json=VALID_BODY, headers=headers)
    assert response.status_code == 201
    return response.json()["publication_id"]


class TestHealth:
    """Tests for GET /v1/health."""

    def test_healthy(self, client: TestClient) -> None:
        response = client.get("/v1/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "publication_count": 0}

    def test_reports_publication_count(self, client: TestClient) -> None:
        _register(client)
        _register(client)

        response = client.get("/v1/health")

        assert response.json()["publication_count"] == 2

    def test_correlation_id_echoed(self, client: TestClient) -> None:
        response = client.get("/v1/health", headers={CORRELATION_HEADER: "corr-123"})

        assert response.headers[CORRELATION_HEADER] == "corr-123"

    def test_correlation_id_generated_when_absent(self, client: TestClient) -> None:
        first = client.get("/v1/health").headers[CORRELATION_HEADER]
        second = client.get("/v1/health").headers[CORRELATION_HEADER]

        assert first
        assert first != second


class TestRegister:
    """Tests for POST /v1/publications."""

    def test_returns_sequential_ids(self, client: TestClient) -> None:
        assert _register(client) == 1
        assert _register(client) == 2

    def test_requires_identity(self, client: TestClient) -> None:
        response = client.post("/v1/publications", json=VALID_BODY)

        assert response.status_code == 401
        assert response.json()["detail"]["type"] == (
            "urn:publication-registry:identity-missing"
        )

    def test_invalid_title_returns_303(self, client: TestClient) -> None:
        body = {**VALID_BODY, "title": "a" * 64}

        response = client.post("/v1/publications", json=body, headers=ALICE)

        assert response.status_code == 400
        detail = response.json()["detail"]
        assert detail["code"] == 303
        assert detail["status"] == 400
        assert detail["field"] == "title"
        assert detail["instance"].endswith("/v1/publications")

    def test_invalid_size_returns_304(self, client: TestClient) -> None:
        body = {**VALID_BODY, "byte_count": 1_000_000_000}

        response = client.post("/v1/publications", json=body, headers=ALICE)

        assert response.status_code == 400
        assert response.json()["detail"]["code"] == 304

    @pytest.mark.parametrize("byte_count", [True, False, "12", 5.0])
    def test_non_integer_size_returns_304(
        self, client: TestClient, byte_count: object
    ) -> None:
        body = {**VALID_BODY, "byte_count": byte_count}

        response = client.post("/v1/publications", json=body, headers=ALICE)

        assert response.status_code == 400
        assert response.json()["detail"]["code"] == 304
        assert client.get("/v1/registry/stats").json() == {"publication_count": 0}

    def test_too_many_tags_returns_303(self, client: TestClient) -> None:
        body = {**VALID_BODY, "tags": ["t"] * 9}

        response = client.post("/v1/publications", json=body, headers=ALICE)

        assert response.json()["detail"]["code"] == 303

    def test_malformed_body_returns_422(self, client: TestClient) -> None:
        response = client.post(
            "/v1/publications", json={"title": "only"}, headers=ALICE
        )

        assert response.status_code == 422


class TestGetDetails:
    """Tests for GET /v1/publications/{id}."""

    def test_returns_details(self, client: TestClient) -> None:
        publication_id = _register(client)

        response = client.get(f"/v1/publications/{publication_id}")

        assert response.status_code == 200
        assert response.json() == {
            "publication_id": 1,
            "title": "Field Notes",
            "creator": "alice",
            "byte_count": 2048,
            "creation_block": 100,
            "description": "Survey notes, spring season",
            "tags": ["survey", "notes"],
            "access_count": 0,
        }

    def test_unknown_returns_404(self, client: TestClient) -> None:
        response = client.get("/v1/publications/99")

        assert response.status_code == 404
        assert response.json()["detail"]["code"] == 301


class TestOwnershipGate:
    """Tests for modify, remove and change-creator endpoints."""

    def test_non_creator_rejected_with_305(self, client: TestClient) -> None:
        publication_id = _register(client)

        responses = [
            client.put(f"/v1/publications/{publication_id}", json=VALID_BODY, headers=BOB),
            client.delete(f"/v1/publications/{publication_id}", headers=BOB),
            client.post(
                f"/v1/publications/{publication_id}/creator",
                json={"new_creator": "bob"},
                headers=BOB,
            ),
        ]

        for response in responses:
            assert response.status_code == 403
            assert response.json()["detail"]["code"] == 305

    def test_creator_modifies(self, client: TestClient) -> None:
        publication_id = _register(client)
        body = {**VALID_BODY, "title": "Renamed", "tags": ["one"]}

        response = client.put(
            f"/v1/publications/{publication_id}", json=body, headers=ALICE
        )

        assert response.status_code == 200
        assert response.json() == {"success": True}
        details = client.get(f"/v1/publications/{publication_id}").json()
        assert details["title"] == "Renamed"
        assert details["tags"] == ["one"]

    def test_modify_with_boolean_size_returns_304(self, client: TestClient) -> None:
        publication_id = _register(client)
        body = {**VALID_BODY, "byte_count": True}

        response = client.put(
            f"/v1/publications/{publication_id}", json=body, headers=ALICE
        )

        assert response.status_code == 400
        assert response.json()["detail"]["code"] == 304
        details = client.get(f"/v1/publications/{publication_id}").json()
        assert details["byte_count"] == 2048

    def test_creator_transfers(self, client: TestClient) -> None:
        publication_id = _register(client)

        response = client.post(
            f"/v1/publications/{publication_id}/creator",
            json={"new_creator": "bob"},
            headers=ALICE,
        )

        assert response.status_code == 200
        assert client.get(f"/v1/publications/{publication_id}").json()["creator"] == "bob"

    def test_creator_removes_and_id_not_reissued(self, client: TestClient) -> None:
        publication_id = _register(client)

        response = client.delete(f"/v1/publications/{publication_id}", headers=ALICE)

        assert response.status_code == 200
        assert client.get(f"/v1/publications/{publication_id}").status_code == 404
        assert _register(client) == 2
        assert client.get("/v1/registry/stats").json() == {"publication_count": 2}


class TestAccess:
    """Tests for POST /v1/publications/{id}/access."""

    def test_creator_access_counts(self, client: TestClient) -> None:
        publication_id = _register(client)

        response = client.post(
            f"/v1/publications/{publication_id}/access", headers=ALICE
        )

        assert response.status_code == 200
        details = client.get(f"/v1/publications/{publication_id}").json()
        assert details["access_count"] == 1

    def test_ungranted_user_denied_with_308(self, client: TestClient) -> None:
        publication_id = _register(client)

        response = client.post(f"/v1/publications/{publication_id}/access", headers=BOB)

        assert response.status_code == 403
        assert response.json()["detail"]["code"] == 308
        details = client.get(f"/v1/publications/{publication_id}").json()
        assert details["access_count"] == 0

    def test_unknown_returns_404(self, client: TestClient) -> None:
        response = client.post("/v1/publications/5/access", headers=ALICE)

        assert response.status_code == 404


class TestPermissionCheck:
    """Tests for GET /v1/publications/{id}/permissions/{user}."""

    def test_reports_grant(self, client: TestClient) -> None:
        publication_id = _register(client)

        alice = client.get(f"/v1/publications/{publication_id}/permissions/alice")
        bob = client.get(f"/v1/publications/{publication_id}/permissions/bob")

        assert alice.json() == {"publication_id": 1, "user": "alice", "permitted": True}
        assert bob.json()["permitted"] is False
