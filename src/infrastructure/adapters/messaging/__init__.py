"""Messaging adapters for signature change events."""

from src.infrastructure.adapters.messaging.in_process_signature_event_bus import (
    InProcessSignatureEventBus,
    SignatureEventHandler,
)

__all__: list[str] = ["InProcessSignatureEventBus", "SignatureEventHandler"]
