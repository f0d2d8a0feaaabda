"""API dependencies for dependency injection."""

from src.api.dependencies.signatures import get_signature_service

__all__: list[str] = ["get_signature_service"]
