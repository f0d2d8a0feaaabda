"""Signature state API models.

Request and response bodies for the contract signature endpoints used by
the contract editor and the signing flow.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from src.domain.models.signature import SignatureRecord, SignatureState


class SignatureStateResponse(BaseModel):
    """Resolved signature state of a contract.

    Attributes:
        contract_id: The contract.
        has_designer_signature: Whether the designer has signed.
        has_client_signature: Whether the client has signed.
        designer_signature: Designer payload, if signed.
        client_signature: Client payload, if signed.
        last_checked: When the state was last confirmed against a source.
    """

    contract_id: str = Field(description="Contract identifier")
    has_designer_signature: bool = Field(description="Designer has signed")
    has_client_signature: bool = Field(description="Client has signed")
    designer_signature: dict[str, Any] | None = Field(
        default=None, description="Designer signature payload"
    )
    client_signature: dict[str, Any] | None = Field(
        default=None, description="Client signature payload"
    )
    last_checked: datetime = Field(
        description="When this state was last confirmed (UTC)"
    )

    @classmethod
    def from_state(cls, contract_id: str, state: SignatureState) -> SignatureStateResponse:
        """Map a domain SignatureState to the response model."""
        return cls(
            contract_id=contract_id,
            has_designer_signature=state.has_designer_signature,
            has_client_signature=state.has_client_signature,
            designer_signature=_payload(state.designer_signature),
            client_signature=_payload(state.client_signature),
            last_checked=state.last_checked,
        )


class EditGateResponse(BaseModel):
    """Whether a contract's content may be edited."""

    can_edit: bool = Field(description="Whether editing is allowed")
    reason: str | None = Field(
        default=None, description="Why editing is blocked, if it is"
    )
    signature_state: SignatureStateResponse

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "can_edit": False,
                    "reason": "Contract is signed and cannot be edited without removing signature first",
                    "signature_state": {
                        "contract_id": "abc123",
                        "has_designer_signature": True,
                        "has_client_signature": False,
                        "designer_signature": {"signature": "data:image/png;base64,..."},
                        "client_signature": None,
                        "last_checked": "2026-01-08T12:00:00.000000Z",
                    },
                }
            ]
        }
    }


class SaveSignatureRequest(BaseModel):
    """Signature payload to record. Stored and returned verbatim."""

    payload: dict[str, Any] = Field(
        min_length=1, description="Opaque signature data (image, signer name, ...)"
    )


class SignatureMutationResponse(BaseModel):
    """Outcome of saving or removing a signature."""

    success: bool = Field(description="True if the change durably landed")
    error: str | None = Field(default=None, description="Failure description")


def _payload(record: SignatureRecord | None) -> dict[str, Any] | None:
    return record.to_dict() if record is not None else None
