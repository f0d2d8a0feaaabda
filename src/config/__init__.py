"""Configuration module for contract signature state.

Available Configurations:
- SignatureCacheConfig: Cache TTL, remote store and mirror settings
"""

from src.config.signature_cache_config import (
    DEFAULT_SIGNATURE_CACHE_CONFIG,
    DEVELOPMENT_SIGNATURE_CACHE_CONFIG,
    SignatureCacheConfig,
)

__all__ = [
    "SignatureCacheConfig",
    "DEFAULT_SIGNATURE_CACHE_CONFIG",
    "DEVELOPMENT_SIGNATURE_CACHE_CONFIG",
]
