"""Edit gate domain service.

Decides whether a contract's content may still be edited given its
resolved signature state.

Rule:
- Only the designer's signature locks the document. A client-only
  signature does not block editing.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.domain.models.signature import SignatureState

SIGNED_CONTRACT_REASON = (
    "Contract is signed and cannot be edited without removing signature first"
)


@dataclass(frozen=True)
class EditGateDecision:
    """Outcome of an edit gate check.

    Attributes:
        allowed: Whether the contract content may be edited.
        reason: Explanation when editing is blocked, None when allowed.
    """

    allowed: bool
    reason: str | None = None


def evaluate_edit_gate(state: SignatureState) -> EditGateDecision:
    """Decide whether a contract with this signature state may be edited.

    Pure and total: never raises, has no side effects.

    Args:
        state: The resolved signature state.

    Returns:
        EditGateDecision, blocked with a reason iff the designer has signed.
    """
    if state.has_designer_signature:
        return EditGateDecision(allowed=False, reason=SIGNED_CONTRACT_REASON)
    return EditGateDecision(allowed=True)
