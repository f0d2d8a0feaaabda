"""In-memory signature state cache.

Process-local cache of the last resolved SignatureState per contract,
valid only within a short TTL window (5 seconds by default). This is the
hot path for repeated edit-gate checks during one editing session.

Rules:
- An entry is fresh iff now - inserted_at < ttl
- Stale entries are never returned; they are dropped on access
- No background expiry sweep
- invalidate() and clear() advance a per-contract generation so a read
  that began before them can tell its result is out of date
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from src.application.ports.time_authority import TimeAuthorityProtocol
from src.domain.models.signature import SignatureState

logger = structlog.get_logger(__name__)

DEFAULT_SIGNATURE_CACHE_TTL_SECONDS = 5.0


@dataclass
class CacheEntry:
    """Cache entry with insertion time on the monotonic clock."""

    state: SignatureState
    inserted_at: float

    def is_expired(self, now: float, ttl_seconds: float) -> bool:
        """Check if the entry has reached its TTL."""
        return now - self.inserted_at >= ttl_seconds


class SignatureStateCache:
    """TTL-bounded in-memory cache of SignatureState keyed by contract id.

    Cache key format: "signature-state:{contract_id}"

    Not durable across restarts and not shared across processes.
    """

    def __init__(
        self,
        time_authority: TimeAuthorityProtocol,
        ttl_seconds: float = DEFAULT_SIGNATURE_CACHE_TTL_SECONDS,
    ) -> None:
        """Initialize the cache.

        Args:
            time_authority: Clock used for TTL bookkeeping.
            ttl_seconds: Freshness window in seconds (default: 5).
        """
        if ttl_seconds <= 0:
            raise ValueError(f"ttl_seconds must be positive, got {ttl_seconds}")
        self._time = time_authority
        self._cache: dict[str, CacheEntry] = {}
        self._generations: dict[str, int] = {}
        self._epoch = 0
        self._ttl_seconds = ttl_seconds
        self._log = logger.bind(component="signature_state_cache")

    @property
    def ttl_seconds(self) -> float:
        """The freshness window in seconds."""
        return self._ttl_seconds

    def __len__(self) -> int:
        return len(self._cache)

    def generation(self, contract_id: str) -> tuple[int, int]:
        """Return a token that changes whenever the contract is invalidated.

        Capture it before a slow read and compare afterwards; a different
        token means invalidate() or clear() ran in between.
        """
        return (self._epoch, self._generations.get(contract_id, 0))

    def get(self, contract_id: str) -> SignatureState | None:
        """Get the cached state for a contract.

        Args:
            contract_id: Contract identifier.

        Returns:
            Cached state if fresh, None if not found or expired.
        """
        cache_key = f"signature-state:{contract_id}"

        entry = self._cache.get(cache_key)
        if entry is None:
            self._log.debug("cache_miss", contract_id=contract_id)
            return None

        if entry.is_expired(self._time.monotonic(), self._ttl_seconds):
            self._log.debug("cache_expired", contract_id=contract_id)
            del self._cache[cache_key]
            return None

        self._log.debug("cache_hit", contract_id=contract_id)
        return entry.state

    def put(self, contract_id: str, state: SignatureState) -> None:
        """Cache a state for a contract, stamping it with the current time.

        Args:
            contract_id: Contract identifier.
            state: Resolved signature state.
        """
        cache_key = f"signature-state:{contract_id}"
        self._cache[cache_key] = CacheEntry(
            state=state,
            inserted_at=self._time.monotonic(),
        )
        self._log.debug(
            "cache_set",
            contract_id=contract_id,
            ttl_seconds=self._ttl_seconds,
        )

    def invalidate(self, contract_id: str) -> None:
        """Remove the entry for a contract unconditionally.

        Args:
            contract_id: Contract identifier.
        """
        cache_key = f"signature-state:{contract_id}"
        self._generations[contract_id] = self._generations.get(contract_id, 0) + 1
        if self._cache.pop(cache_key, None) is not None:
            self._log.debug("cache_entry_invalidated", contract_id=contract_id)

    def clear(self) -> None:
        """Clear all cache entries."""
        count = len(self._cache)
        self._cache.clear()
        self._generations.clear()
        self._epoch += 1
        self._log.info("cache_cleared", entries_cleared=count)
