"""Domain services for contract signature state."""

from src.domain.services.edit_gate import (
    SIGNED_CONTRACT_REASON,
    EditGateDecision,
    evaluate_edit_gate,
)

__all__: list[str] = [
    "SIGNED_CONTRACT_REASON",
    "EditGateDecision",
    "evaluate_edit_gate",
]
