"""Domain errors for contract signature state.

Provides specific exception classes for different failure scenarios.
All exceptions inherit from ContractSignatureError.
"""

from src.domain.errors.signature import (
    SignatureMirrorError,
    SignatureStoreError,
    SignatureStoreUnavailableError,
    UnknownSignatureRoleError,
)

__all__: list[str] = [
    "SignatureMirrorError",
    "SignatureStoreError",
    "SignatureStoreUnavailableError",
    "UnknownSignatureRoleError",
]
