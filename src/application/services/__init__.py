"""Application services - Use case orchestration.

Available services:
- SignatureStateService: Reconciles signature state across cache, remote
  store and device-local mirror; answers edit-gate checks
- SignatureStateCache: TTL-bounded in-memory signature state cache
- SystemTimeAuthority: Host clock implementation of TimeAuthorityProtocol
"""

from src.application.services.signature_state_cache import (
    DEFAULT_SIGNATURE_CACHE_TTL_SECONDS,
    CacheEntry,
    SignatureStateCache,
)
from src.application.services.signature_state_service import SignatureStateService
from src.application.services.time_authority_service import SystemTimeAuthority

__all__: list[str] = [
    "DEFAULT_SIGNATURE_CACHE_TTL_SECONDS",
    "CacheEntry",
    "SignatureStateCache",
    "SignatureStateService",
    "SystemTimeAuthority",
]
