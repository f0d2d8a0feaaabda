"""HTTP signature store adapter.

Implements SignatureStoreProtocol against the contract document service's
REST API using httpx.

Endpoints:
    GET    /contracts/{contract_id}/signatures
        -> {"designer": {...} | null, "client": {...} | null}
    PUT    /contracts/{contract_id}/signatures/{role}   body: payload
    DELETE /contracts/{contract_id}/signatures/{role}

A role counts as signed only when its document is a non-empty object whose
"signature" field, if present, is truthy. Cleared documents
({"signature": null}) therefore read as unsigned.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

import httpx
import structlog

from src.application.ports.signature_store import SignatureStoreProtocol
from src.domain.errors.signature import (
    SignatureStoreError,
    SignatureStoreUnavailableError,
)
from src.domain.models.signature import SignatureRecord, SignatureRole

log = structlog.get_logger()

DEFAULT_TIMEOUT_SECONDS = 10.0


class HttpSignatureStore(SignatureStoreProtocol):
    """Remote signature store reached over HTTP.

    Example:
        async with HttpSignatureStore("https://docs.example.com/v1") as store:
            records = await store.read_signatures("abc123")
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        api_key: str | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the store client.

        Args:
            base_url: API base URL.
            timeout: Request timeout in seconds.
            api_key: Optional bearer token for the document service.
            client: Pre-built AsyncClient (tests inject one with a
                MockTransport). When given, base_url, timeout and api_key
                are ignored.
        """
        self.base_url = base_url
        if client is None:
            headers = {"Authorization": f"Bearer {api_key}"} if api_key else {}
            client = httpx.AsyncClient(
                base_url=base_url,
                timeout=timeout,
                headers=headers,
            )
        self._client = client

    async def __aenter__(self) -> HttpSignatureStore:
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    async def read_signatures(
        self, contract_id: str
    ) -> dict[SignatureRole, SignatureRecord]:
        """Read all signature records for a contract."""
        response = await self._request(
            "GET", _signatures_path(contract_id), contract_id, "read"
        )
        try:
            body = response.json()
        except ValueError as exc:
            raise SignatureStoreError(
                "Signature store returned invalid JSON",
                contract_id=contract_id,
                operation="read",
            ) from exc
        if not isinstance(body, dict):
            raise SignatureStoreError(
                "Signature store returned unexpected document",
                contract_id=contract_id,
                operation="read",
            )

        records: dict[SignatureRole, SignatureRecord] = {}
        for role in SignatureRole:
            document = body.get(role.value)
            if _is_signed(document):
                records[role] = SignatureRecord(role=role, payload=document)
        return records

    async def write_signature(
        self,
        contract_id: str,
        role: SignatureRole,
        payload: Mapping[str, Any],
    ) -> None:
        """Write one party's signature."""
        await self._request(
            "PUT",
            f"{_signatures_path(contract_id)}/{role.value}",
            contract_id,
            "write",
            json=dict(payload),
        )

    async def delete_signature(self, contract_id: str, role: SignatureRole) -> None:
        """Delete one party's signature. A 404 means it is already gone."""
        await self._request(
            "DELETE",
            f"{_signatures_path(contract_id)}/{role.value}",
            contract_id,
            "delete",
            allow_not_found=True,
        )

    async def _request(
        self,
        method: str,
        path: str,
        contract_id: str,
        operation: str,
        *,
        json: dict[str, Any] | None = None,
        allow_not_found: bool = False,
    ) -> httpx.Response:
        try:
            response = await self._client.request(method, path, json=json)
        except httpx.TransportError as exc:
            log.warning(
                "signature_store_unreachable",
                contract_id=contract_id,
                operation=operation,
                error_type=type(exc).__name__,
            )
            raise SignatureStoreUnavailableError(
                f"Signature store unreachable: {type(exc).__name__}",
                contract_id=contract_id,
                operation=operation,
            ) from exc

        if allow_not_found and response.status_code == 404:
            return response

        if response.status_code >= 300:
            log.warning(
                "signature_store_error_response",
                contract_id=contract_id,
                operation=operation,
                status_code=response.status_code,
            )
            raise SignatureStoreError(
                f"Signature store {operation} failed with HTTP {response.status_code}",
                contract_id=contract_id,
                operation=operation,
            )
        return response


def _signatures_path(contract_id: str) -> str:
    return f"/contracts/{quote(contract_id, safe='')}/signatures"


def _is_signed(document: Any) -> bool:
    if not isinstance(document, dict) or not document:
        return False
    if "signature" in document:
        return bool(document["signature"])
    return True
