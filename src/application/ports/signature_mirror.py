"""Signature mirror port.

Abstract interface for the device-local mirror: a synchronous,
string-keyed, string-valued store used only as a fallback hint when the
remote signature store is unreachable.

Key format: "contract-<role>-signature-<contract_id>"
"""

from __future__ import annotations

from typing import Protocol

from src.domain.models.signature import SignatureRole


def signature_mirror_key(contract_id: str, role: SignatureRole) -> str:
    """Build the mirror key for one party's signature on a contract.

    Args:
        contract_id: The contract identifier.
        role: The signing party.

    Returns:
        Namespaced mirror key.
    """
    return f"contract-{role.value}-signature-{contract_id}"


class SignatureMirrorProtocol(Protocol):
    """Protocol for device-local key/value persistence.

    Access is synchronous and local. Implementations raise
    SignatureMirrorError when the underlying medium is unusable.
    """

    def get(self, key: str) -> str | None:
        """Return the stored value, or None if absent."""
        ...

    def set(self, key: str, value: str) -> None:
        """Store a value, overwriting any previous one."""
        ...

    def remove(self, key: str) -> None:
        """Remove a value. Removing an absent key is a no-op."""
        ...
