"""System time authority.

Production implementation of TimeAuthorityProtocol backed by the host
clock.
"""

import time
from datetime import datetime, timezone

from src.application.ports.time_authority import TimeAuthorityProtocol


class SystemTimeAuthority(TimeAuthorityProtocol):
    """Time authority reading the system wall clock and monotonic clock."""

    def utcnow(self) -> datetime:
        """Return the current UTC time."""
        return datetime.now(timezone.utc)

    def monotonic(self) -> float:
        """Return the system monotonic clock in seconds."""
        return time.monotonic()
