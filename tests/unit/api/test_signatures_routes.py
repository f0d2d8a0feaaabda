"""Unit tests for the contract signature endpoints."""

import pytest
from fastapi.testclient import TestClient

from src.api.main import app
from src.api.middleware.logging_middleware import CORRELATION_HEADER
from src.bootstrap.signature_state import (
    get_signature_state_service,
    init_signature_state_service,
    reset_signature_state_service,
)
from src.config.signature_cache_config import DEVELOPMENT_SIGNATURE_CACHE_CONFIG
from src.domain.models.signature import SignatureRole
from src.domain.services.edit_gate import SIGNED_CONTRACT_REASON
from src.infrastructure.adapters.persistence.http_signature_store import (
    HttpSignatureStore,
)
from src.infrastructure.stubs.signature_mirror_stub import SignatureMirrorStub
from src.infrastructure.stubs.signature_store_stub import SignatureStoreStub
from tests.helpers.fake_time_authority import FakeTimeAuthority

DESIGNER_PAYLOAD = {"signature": "data:image/png;base64,AAA", "name": "Dana"}


@pytest.fixture
def store() -> SignatureStoreStub:
    return SignatureStoreStub()


@pytest.fixture
def client(store: SignatureStoreStub):
    """TestClient with the service wired to stubs. Lifespan is not run."""
    init_signature_state_service(
        DEVELOPMENT_SIGNATURE_CACHE_CONFIG,
        store=store,
        mirror=SignatureMirrorStub(),
        time_authority=FakeTimeAuthority(),
    )
    yield TestClient(app)
    reset_signature_state_service()


class TestReadEndpoints:
    """GET endpoints."""

    def test_unsigned_contract_state(self, client: TestClient) -> None:
        response = client.get("/v1/contracts/abc123/signatures")

        assert response.status_code == 200
        assert response.json() == {
            "contract_id": "abc123",
            "has_designer_signature": False,
            "has_client_signature": False,
            "designer_signature": None,
            "client_signature": None,
            "last_checked": "2026-01-01T00:00:00Z",
        }

    def test_signed_contract_state(
        self, client: TestClient, store: SignatureStoreStub
    ) -> None:
        store.add_signature("abc123", SignatureRole.DESIGNER, DESIGNER_PAYLOAD)

        body = client.get("/v1/contracts/abc123/signatures").json()

        assert body["has_designer_signature"] is True
        assert body["designer_signature"] == DESIGNER_PAYLOAD

    def test_edit_gate_blocks_designer_signed_contract(
        self, client: TestClient, store: SignatureStoreStub
    ) -> None:
        store.add_signature("abc123", SignatureRole.DESIGNER, DESIGNER_PAYLOAD)

        body = client.get("/v1/contracts/abc123/edit-gate").json()

        assert body["can_edit"] is False
        assert body["reason"] == SIGNED_CONTRACT_REASON
        assert body["signature_state"]["has_designer_signature"] is True

    def test_reads_degrade_when_store_is_down(
        self, client: TestClient, store: SignatureStoreStub
    ) -> None:
        store.set_unavailable()

        response = client.get("/v1/contracts/abc123/edit-gate")

        assert response.status_code == 200
        assert response.json()["can_edit"] is True


class TestMutationEndpoints:
    """PUT and DELETE endpoints."""

    def test_save_then_gate_blocks(self, client: TestClient) -> None:
        saved = client.put(
            "/v1/contracts/abc123/signatures/designer",
            json={"payload": DESIGNER_PAYLOAD},
        )
        gate = client.get("/v1/contracts/abc123/edit-gate").json()

        assert saved.status_code == 200
        assert saved.json() == {"success": True, "error": None}
        assert gate["can_edit"] is False

    def test_remove_unblocks(
        self, client: TestClient, store: SignatureStoreStub
    ) -> None:
        store.add_signature("abc123", SignatureRole.DESIGNER, DESIGNER_PAYLOAD)

        removed = client.delete("/v1/contracts/abc123/signatures/designer")
        gate = client.get("/v1/contracts/abc123/edit-gate").json()

        assert removed.status_code == 200
        assert gate["can_edit"] is True

    def test_rejected_save_answers_502(
        self, client: TestClient, store: SignatureStoreStub
    ) -> None:
        store.fail_operation("write")

        response = client.put(
            "/v1/contracts/abc123/signatures/client",
            json={"payload": {"signature": "s"}},
        )

        assert response.status_code == 502
        detail = response.json()["detail"]
        assert detail["type"] == "urn:contract-signature:store:write-failed"
        assert detail["status"] == 502
        assert detail["detail"]
        assert detail["instance"].endswith("/v1/contracts/abc123/signatures/client")

    def test_rejected_remove_answers_502(
        self, client: TestClient, store: SignatureStoreStub
    ) -> None:
        store.set_unavailable()

        response = client.delete("/v1/contracts/abc123/signatures/designer")

        assert response.status_code == 502

    def test_unknown_role_answers_422(
        self, client: TestClient, store: SignatureStoreStub
    ) -> None:
        response = client.put(
            "/v1/contracts/abc123/signatures/notary",
            json={"payload": {"signature": "s"}},
        )

        assert response.status_code == 422
        assert store.write_calls == 0

    def test_empty_payload_answers_422(self, client: TestClient) -> None:
        response = client.put(
            "/v1/contracts/abc123/signatures/designer", json={"payload": {}}
        )

        assert response.status_code == 422


class TestCacheEndpoints:
    """Invalidation endpoints."""

    def test_invalidate_forces_fresh_read(
        self, client: TestClient, store: SignatureStoreStub
    ) -> None:
        client.get("/v1/contracts/abc123/signatures")
        store.add_signature("abc123", SignatureRole.DESIGNER, DESIGNER_PAYLOAD)

        masked = client.get("/v1/contracts/abc123/signatures").json()
        invalidated = client.post("/v1/contracts/abc123/signatures/invalidate")
        fresh = client.get("/v1/contracts/abc123/signatures").json()

        assert masked["has_designer_signature"] is False
        assert invalidated.status_code == 204
        assert fresh["has_designer_signature"] is True

    def test_clear_cache(self, client: TestClient, store: SignatureStoreStub) -> None:
        client.get("/v1/contracts/a/signatures")
        client.get("/v1/contracts/b/signatures")

        response = client.post("/v1/signatures/cache/clear")
        client.get("/v1/contracts/a/signatures")

        assert response.status_code == 204
        assert store.read_calls == 3


class TestCorrelationHeader:
    """LoggingMiddleware behavior on signature routes."""

    def test_incoming_correlation_id_is_echoed(self, client: TestClient) -> None:
        response = client.get(
            "/v1/contracts/abc123/signatures",
            headers={CORRELATION_HEADER: "req-42"},
        )

        assert response.headers[CORRELATION_HEADER] == "req-42"

    def test_correlation_id_generated_when_missing(self, client: TestClient) -> None:
        response = client.get("/v1/contracts/abc123/signatures")

        assert response.headers[CORRELATION_HEADER]


class TestLifespan:
    """Application startup and shutdown."""

    def test_shutdown_closes_remote_store_client(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("SIGNATURE_STORE_BASE_URL", "https://docs.example.com/v1")
        monkeypatch.setenv("ENVIRONMENT", "development")
        monkeypatch.delenv("SIGNATURE_MIRROR_DIR", raising=False)

        with TestClient(app):
            store = get_signature_state_service()._store
            assert isinstance(store, HttpSignatureStore)
            assert not store._client.is_closed

        assert store._client.is_closed
        with pytest.raises(RuntimeError):
            get_signature_state_service()
