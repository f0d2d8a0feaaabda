"""Signature event publisher stub.

Records published SignatureChangedEvents for assertions in tests.
"""

from __future__ import annotations

from src.application.ports.signature_events import (
    SignatureChangedEvent,
    SignatureEventPublisherProtocol,
)


class SignatureEventPublisherStub(SignatureEventPublisherProtocol):
    """Stub publisher that keeps every event it receives."""

    def __init__(self) -> None:
        """Initialize with no recorded events."""
        self.events: list[SignatureChangedEvent] = []

    def clear(self) -> None:
        """Forget recorded events."""
        self.events.clear()

    async def publish(self, event: SignatureChangedEvent) -> None:
        """Record the event."""
        self.events.append(event)
