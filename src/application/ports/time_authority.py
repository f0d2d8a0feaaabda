"""Time Authority Protocol - interface for consistent timestamp provisioning.

Services that need timestamps or elapsed-time checks inject a
TimeAuthorityProtocol implementation instead of calling datetime.now()
or time.monotonic() directly.

Benefits:
1. **Testability**: Tests inject FakeTimeAuthority to expire cache entries
   deterministically
2. **Consistency**: Wall-clock stamps and TTL checks come from one source

For production:
    Use SystemTimeAuthority from src/application/services/time_authority_service.py

For testing:
    Use FakeTimeAuthority from tests/helpers/fake_time_authority.py
"""

from abc import ABC, abstractmethod
from datetime import datetime


class TimeAuthorityProtocol(ABC):
    """Abstract interface for time authority."""

    @abstractmethod
    def utcnow(self) -> datetime:
        """Return current UTC time.

        Returns:
            Current datetime in UTC timezone (timezone-aware).
        """
        ...

    @abstractmethod
    def monotonic(self) -> float:
        """Return monotonic clock value for measuring elapsed time.

        Returns:
            Monotonically increasing float value (in seconds).

        Note:
            Use this for TTL checks, not for timestamps. Only differences
            between values are meaningful.
        """
        ...
