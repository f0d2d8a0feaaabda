"""Signature cache and store configuration.

This module defines configuration for the signature state service with
environment variable overrides for deployment tuning.

Environment Variables:
- SIGNATURE_CACHE_TTL_SECONDS: Cache freshness window (default: 5, min: 0.1, max: 300)
- SIGNATURE_STORE_BASE_URL: Remote signature store API base URL (default: unset -> in-memory stub)
- SIGNATURE_STORE_TIMEOUT_SECONDS: Remote request timeout (default: 10, min: 0.5, max: 120)
- SIGNATURE_STORE_API_KEY: Bearer token for the remote store (default: unset)
- SIGNATURE_MIRROR_DIR: Directory for the device-local mirror (default: unset -> in-memory)
- ENVIRONMENT: 'production' for JSON logs, anything else for console logs
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


def _get_float_env(key: str, default: float) -> float:
    """Get float environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or invalid.

    Returns:
        Parsed float value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


def _get_str_env(key: str) -> str | None:
    """Get string environment variable, treating blank as unset."""
    value = os.environ.get(key, "").strip()
    return value or None


# =============================================================================
# Cache Configuration
# =============================================================================

# Default freshness window for cached signature state (5 seconds)
DEFAULT_CACHE_TTL_SECONDS = 5.0

# Floor keeps the cache meaningful as a hot path
MIN_CACHE_TTL_SECONDS = 0.1

# Ceiling bounds how long a stale cache can mask a signature change
MAX_CACHE_TTL_SECONDS = 300.0

# =============================================================================
# Remote Store Configuration
# =============================================================================

DEFAULT_STORE_TIMEOUT_SECONDS = 10.0

MIN_STORE_TIMEOUT_SECONDS = 0.5

MAX_STORE_TIMEOUT_SECONDS = 120.0


@dataclass(frozen=True)
class SignatureCacheConfig:
    """Configuration for the signature state service.

    Attributes:
        cache_ttl_seconds: Freshness window for cached signature state.
            Default: 5 seconds. Range: 0.1 - 300.
        store_base_url: Remote signature store base URL. None selects the
            in-memory store stub.
        store_timeout_seconds: Remote request timeout.
            Default: 10 seconds. Range: 0.5 - 120.
        store_api_key: Optional bearer token for the remote store.
        mirror_dir: Directory for the file-backed mirror. None selects the
            in-memory mirror.
        environment: Deployment environment name.
    """

    cache_ttl_seconds: float = DEFAULT_CACHE_TTL_SECONDS
    store_base_url: str | None = None
    store_timeout_seconds: float = DEFAULT_STORE_TIMEOUT_SECONDS
    store_api_key: str | None = None
    mirror_dir: Path | None = None
    environment: str = "production"

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if not MIN_CACHE_TTL_SECONDS <= self.cache_ttl_seconds <= MAX_CACHE_TTL_SECONDS:
            raise ValueError(
                f"cache_ttl_seconds must be between {MIN_CACHE_TTL_SECONDS} "
                f"and {MAX_CACHE_TTL_SECONDS}, got {self.cache_ttl_seconds}"
            )
        if (
            not MIN_STORE_TIMEOUT_SECONDS
            <= self.store_timeout_seconds
            <= MAX_STORE_TIMEOUT_SECONDS
        ):
            raise ValueError(
                f"store_timeout_seconds must be between {MIN_STORE_TIMEOUT_SECONDS} "
                f"and {MAX_STORE_TIMEOUT_SECONDS}, got {self.store_timeout_seconds}"
            )

    @property
    def uses_remote_store(self) -> bool:
        """True when an HTTP signature store is configured."""
        return self.store_base_url is not None

    @classmethod
    def from_environment(cls) -> SignatureCacheConfig:
        """Create config from environment variables with defaults.

        Out-of-range numeric values are clamped rather than rejected.

        Returns:
            SignatureCacheConfig with values from environment or defaults.
        """
        ttl = _get_float_env("SIGNATURE_CACHE_TTL_SECONDS", DEFAULT_CACHE_TTL_SECONDS)
        # Clamp to valid range
        ttl = max(MIN_CACHE_TTL_SECONDS, min(ttl, MAX_CACHE_TTL_SECONDS))

        timeout = _get_float_env(
            "SIGNATURE_STORE_TIMEOUT_SECONDS",
            DEFAULT_STORE_TIMEOUT_SECONDS,
        )
        # Clamp to valid range
        timeout = max(MIN_STORE_TIMEOUT_SECONDS, min(timeout, MAX_STORE_TIMEOUT_SECONDS))

        mirror_dir = _get_str_env("SIGNATURE_MIRROR_DIR")

        return cls(
            cache_ttl_seconds=ttl,
            store_base_url=_get_str_env("SIGNATURE_STORE_BASE_URL"),
            store_timeout_seconds=timeout,
            store_api_key=_get_str_env("SIGNATURE_STORE_API_KEY"),
            mirror_dir=Path(mirror_dir) if mirror_dir else None,
            environment=_get_str_env("ENVIRONMENT") or "production",
        )


# Default production config
DEFAULT_SIGNATURE_CACHE_CONFIG = SignatureCacheConfig()

# Development config with console logging and in-memory collaborators
DEVELOPMENT_SIGNATURE_CACHE_CONFIG = SignatureCacheConfig(environment="development")
