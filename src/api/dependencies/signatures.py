"""Signature state API dependencies.

Dependency injection for the signature endpoints. The service singleton
is wired in src/bootstrap/signature_state.py at startup; tests initialize
it with stubs and reset it afterwards.
"""

from src.application.services.signature_state_service import SignatureStateService
from src.bootstrap.signature_state import get_signature_state_service


def get_signature_service() -> SignatureStateService:
    """FastAPI dependency returning the signature state service."""
    return get_signature_state_service()
