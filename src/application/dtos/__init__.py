"""Application DTOs for signature state results."""

from src.application.dtos.signature import EditCheckResult, SignatureMutationResult

__all__: list[str] = ["EditCheckResult", "SignatureMutationResult"]
