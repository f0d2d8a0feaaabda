"""
Domain layer - Pure business rules for contract signature state.

This layer contains:
- Domain models (SignatureRecord, SignatureState)
- Domain services (edit gate)
- Domain exceptions

CRITICAL: This layer must NOT import from application, infrastructure, or api.
"""

from src.domain.exceptions import ContractSignatureError
from src.domain.models import SignatureRecord, SignatureRole, SignatureState

__all__: list[str] = [
    "ContractSignatureError",
    "SignatureRecord",
    "SignatureRole",
    "SignatureState",
]
