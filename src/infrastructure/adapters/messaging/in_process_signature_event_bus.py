"""In-process signature event bus.

Delivers SignatureChangedEvents to async handlers registered in the same
process, replacing the browser window events the web editor used to keep
open components in sync.

Publishing is fire-and-forget from the publisher's perspective: a failing
handler is logged and does not stop delivery to the others.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable

import structlog

from src.application.ports.signature_events import (
    SignatureChangedEvent,
    SignatureEventPublisherProtocol,
)

log = structlog.get_logger()

SignatureEventHandler = Callable[[SignatureChangedEvent], Awaitable[None]]


class InProcessSignatureEventBus(SignatureEventPublisherProtocol):
    """Publish/subscribe bus for signature change events."""

    def __init__(self) -> None:
        """Initialize with no subscribers."""
        self._handlers: list[SignatureEventHandler] = []

    @property
    def subscriber_count(self) -> int:
        """Number of registered handlers."""
        return len(self._handlers)

    def subscribe(self, handler: SignatureEventHandler) -> Callable[[], None]:
        """Register a handler.

        Args:
            handler: Async callable receiving each event.

        Returns:
            A callable that unsubscribes the handler.
        """
        self._handlers.append(handler)

        def unsubscribe() -> None:
            if handler in self._handlers:
                self._handlers.remove(handler)

        return unsubscribe

    async def publish(self, event: SignatureChangedEvent) -> None:
        """Deliver an event to every handler in registration order."""
        log.info(
            "signature_state_changed",
            contract_id=event.contract_id,
            role=event.role.value,
            action=event.action.value,
            source=event.source,
        )
        for handler in list(self._handlers):
            try:
                await handler(event)
            except Exception:
                log.exception(
                    "signature_event_handler_failed",
                    contract_id=event.contract_id,
                    handler=getattr(handler, "__qualname__", repr(handler)),
                )
