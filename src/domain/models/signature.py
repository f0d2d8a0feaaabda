"""Contract signature domain models.

This module defines the domain models for contract signing:
- SignatureRole: The two parties who must sign a contract
- SignatureRecord: One party's signature on one contract
- SignatureState: The resolved signature view for one contract

Rules:
1. PRESENCE IS SIGNED - A record either exists (signed) or not (unsigned);
   there is no pending or partial signature.
2. PAYLOAD IS OPAQUE - Signature payloads (image data, signer metadata) are
   stored and forwarded, never interpreted.
3. FLAGS DERIVE FROM RECORDS - has_designer_signature is true iff a designer
   record is present, and likewise for the client.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

from src.domain.errors.signature import UnknownSignatureRoleError


class SignatureRole(str, Enum):
    """Party whose signature a record carries.

    Values:
        DESIGNER: The contract author. Only this signature locks editing.
        CLIENT: The counterparty.
    """

    DESIGNER = "designer"
    CLIENT = "client"

    @classmethod
    def parse(cls, value: str | SignatureRole) -> SignatureRole:
        """Parse a role from its string value.

        Args:
            value: Role string ("designer" or "client") or an existing role.

        Returns:
            The matching SignatureRole.

        Raises:
            UnknownSignatureRoleError: If the value names no role.
        """
        if isinstance(value, SignatureRole):
            return value
        try:
            return cls(value)
        except ValueError:
            raise UnknownSignatureRoleError(str(value)) from None


@dataclass(frozen=True)
class SignatureRecord:
    """One party's signature on one contract.

    Attributes:
        role: Which party signed.
        payload: Opaque signature data (image data URL, signer name, etc.).
    """

    role: SignatureRole
    payload: Mapping[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Return the payload as a plain dict for serialization."""
        return dict(self.payload)


@dataclass(frozen=True)
class SignatureState:
    """Resolved designer/client signature presence for one contract.

    Built from zero, one or two SignatureRecords. The has_* flags are
    derived from the records so they can never disagree with them.

    Attributes:
        last_checked: When this state was last confirmed against the remote
            store or the device-local mirror (UTC timezone-aware).
        designer_signature: The designer's record, if signed.
        client_signature: The client's record, if signed.
    """

    last_checked: datetime
    designer_signature: SignatureRecord | None = None
    client_signature: SignatureRecord | None = None

    def __post_init__(self) -> None:
        """Validate record slots and timestamp.

        Raises:
            ValueError: If a record sits in the wrong role slot or
                last_checked is timezone-naive.
        """
        if self.last_checked.tzinfo is None:
            raise ValueError("last_checked must be timezone-aware (UTC)")
        if (
            self.designer_signature is not None
            and self.designer_signature.role != SignatureRole.DESIGNER
        ):
            raise ValueError(
                f"designer_signature carries role {self.designer_signature.role.value}"
            )
        if (
            self.client_signature is not None
            and self.client_signature.role != SignatureRole.CLIENT
        ):
            raise ValueError(
                f"client_signature carries role {self.client_signature.role.value}"
            )

    @property
    def has_designer_signature(self) -> bool:
        """True iff a designer record is present."""
        return self.designer_signature is not None

    @property
    def has_client_signature(self) -> bool:
        """True iff a client record is present."""
        return self.client_signature is not None

    @property
    def is_fully_signed(self) -> bool:
        """True when both parties have signed."""
        return self.has_designer_signature and self.has_client_signature

    def signature_for(self, role: SignatureRole) -> SignatureRecord | None:
        """Return the record for a role, if present."""
        if role == SignatureRole.DESIGNER:
            return self.designer_signature
        return self.client_signature

    @classmethod
    def empty(cls, checked_at: datetime) -> SignatureState:
        """Build the safe default state with no signatures.

        Args:
            checked_at: Timestamp to stamp on the state.

        Returns:
            A SignatureState with both signatures absent.
        """
        return cls(last_checked=checked_at)

    @classmethod
    def from_records(
        cls,
        records: Mapping[SignatureRole, SignatureRecord],
        checked_at: datetime,
    ) -> SignatureState:
        """Build a state from records keyed by role.

        Roles missing from the mapping are unsigned.

        Args:
            records: Signature records keyed by role.
            checked_at: Timestamp to stamp on the state.

        Returns:
            The resolved SignatureState.
        """
        return cls(
            last_checked=checked_at,
            designer_signature=records.get(SignatureRole.DESIGNER),
            client_signature=records.get(SignatureRole.CLIENT),
        )
