"""
API models (Pydantic DTOs) for contract signature state.
"""

from src.api.models.signatures import (
    EditGateResponse,
    SaveSignatureRequest,
    SignatureMutationResponse,
    SignatureStateResponse,
)

__all__: list[str] = [
    "EditGateResponse",
    "SaveSignatureRequest",
    "SignatureMutationResponse",
    "SignatureStateResponse",
]
