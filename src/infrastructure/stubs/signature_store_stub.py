"""Signature store stub.

In-memory implementation of SignatureStoreProtocol for testing and local
development. Supports failure injection so tests can simulate an
unreachable or erroring remote store.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from src.application.ports.signature_store import SignatureStoreProtocol
from src.domain.errors.signature import (
    SignatureStoreError,
    SignatureStoreUnavailableError,
)
from src.domain.models.signature import SignatureRecord, SignatureRole


class SignatureStoreStub(SignatureStoreProtocol):
    """Stub implementation of SignatureStoreProtocol.

    Stores payloads keyed by (contract_id, role) and counts calls so tests
    can assert on remote I/O.
    """

    def __init__(self) -> None:
        """Initialize the stub with empty storage."""
        self._signatures: dict[tuple[str, SignatureRole], dict[str, Any]] = {}
        self._unavailable = False
        self._failing_operations: set[str] = set()
        self.read_calls = 0
        self.write_calls = 0
        self.delete_calls = 0

    def clear(self) -> None:
        """Clear all stored data and failure settings."""
        self._signatures.clear()
        self._unavailable = False
        self._failing_operations.clear()
        self.read_calls = 0
        self.write_calls = 0
        self.delete_calls = 0

    def set_unavailable(self, unavailable: bool = True) -> None:
        """Make every operation fail as if the store were unreachable.

        Args:
            unavailable: Whether the store is unreachable.
        """
        self._unavailable = unavailable

    def fail_operation(self, operation: str, failing: bool = True) -> None:
        """Make one operation (read, write or delete) answer with an error.

        Args:
            operation: The operation name.
            failing: Whether the operation should fail.
        """
        if failing:
            self._failing_operations.add(operation)
        else:
            self._failing_operations.discard(operation)

    def add_signature(
        self, contract_id: str, role: SignatureRole, payload: Mapping[str, Any]
    ) -> None:
        """Add a signature directly to storage for testing.

        Args:
            contract_id: The signed contract.
            role: The signing party.
            payload: Signature data.
        """
        self._signatures[(contract_id, role)] = dict(payload)

    def has_signature(self, contract_id: str, role: SignatureRole) -> bool:
        """Check storage directly, without counting a read."""
        return (contract_id, role) in self._signatures

    def _check(self, contract_id: str, operation: str) -> None:
        if self._unavailable:
            raise SignatureStoreUnavailableError(
                "Signature store unreachable",
                contract_id=contract_id,
                operation=operation,
            )
        if operation in self._failing_operations:
            raise SignatureStoreError(
                f"Signature store {operation} rejected",
                contract_id=contract_id,
                operation=operation,
            )

    async def read_signatures(
        self, contract_id: str
    ) -> dict[SignatureRole, SignatureRecord]:
        """Read all signature records for a contract."""
        self.read_calls += 1
        self._check(contract_id, "read")
        return {
            role: SignatureRecord(role=role, payload=dict(payload))
            for (cid, role), payload in self._signatures.items()
            if cid == contract_id
        }

    async def write_signature(
        self,
        contract_id: str,
        role: SignatureRole,
        payload: Mapping[str, Any],
    ) -> None:
        """Write one party's signature."""
        self.write_calls += 1
        self._check(contract_id, "write")
        self._signatures[(contract_id, role)] = dict(payload)

    async def delete_signature(self, contract_id: str, role: SignatureRole) -> None:
        """Delete one party's signature."""
        self.delete_calls += 1
        self._check(contract_id, "delete")
        self._signatures.pop((contract_id, role), None)
