"""Signature state DTOs for application layer.

These Pydantic models are returned by SignatureStateService to its callers
(the contract editor and the signing flow). The API layer maps them to
response models.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from src.domain.models.signature import SignatureState


class EditCheckResult(BaseModel):
    """Result of asking whether a contract may be edited."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    can_edit: Annotated[
        bool,
        Field(description="Whether the contract content may be edited"),
    ]
    reason: Annotated[
        str | None,
        Field(default=None, description="Why editing is blocked, if it is"),
    ] = None
    signature_state: Annotated[
        SignatureState,
        Field(description="The signature state the decision was based on"),
    ]


class SignatureMutationResult(BaseModel):
    """Result of saving or removing a signature."""

    model_config = ConfigDict(frozen=True)

    success: Annotated[
        bool,
        Field(description="True only if the remote store durably applied the change"),
    ]
    error: Annotated[
        str | None,
        Field(default=None, description="Failure description when success is False"),
    ] = None

    @classmethod
    def ok(cls) -> SignatureMutationResult:
        """Build a successful result."""
        return cls(success=True)

    @classmethod
    def failed(cls, error: str) -> SignatureMutationResult:
        """Build a failed result.

        Args:
            error: Non-empty failure description.
        """
        return cls(success=False, error=error or "Unknown error")
