"""Signature store port.

Abstract interface for the durable remote store that holds the
authoritative signature records for each contract.

Rules:
- This store is the only source of truth when it is reachable
- Failures MUST raise SignatureStoreError, never return partial data
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol

from src.domain.models.signature import SignatureRecord, SignatureRole


class SignatureStoreProtocol(Protocol):
    """Protocol for the durable remote signature store.

    Implementations persist at most one signature record per
    (contract_id, role) pair. The internal document schema is the
    implementation's concern.
    """

    async def read_signatures(
        self, contract_id: str
    ) -> dict[SignatureRole, SignatureRecord]:
        """Read all signature records for a contract.

        Args:
            contract_id: The contract to read.

        Returns:
            Records keyed by role. Roles without a signature are absent.

        Raises:
            SignatureStoreError: If the store cannot answer.
        """
        ...

    async def write_signature(
        self,
        contract_id: str,
        role: SignatureRole,
        payload: Mapping[str, Any],
    ) -> None:
        """Write (or overwrite) one party's signature.

        Args:
            contract_id: The contract being signed.
            role: The signing party.
            payload: Opaque signature data.

        Raises:
            SignatureStoreError: If the write did not durably land.
        """
        ...

    async def delete_signature(self, contract_id: str, role: SignatureRole) -> None:
        """Delete one party's signature.

        Deleting an absent signature is not an error.

        Args:
            contract_id: The contract to unsign.
            role: The party whose signature is removed.

        Raises:
            SignatureStoreError: If the delete did not durably land.
        """
        ...
