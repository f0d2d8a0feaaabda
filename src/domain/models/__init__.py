"""Domain models for contract signature state.

Contains value objects and domain models that represent
core business concepts. These models are immutable and
contain no infrastructure dependencies.
"""

from src.domain.models.signature import (
    SignatureRecord,
    SignatureRole,
    SignatureState,
)

__all__: list[str] = ["SignatureRecord", "SignatureRole", "SignatureState"]
