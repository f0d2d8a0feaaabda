"""Signature event publisher port.

Notifies interested components (open editors, signing flows) that a
contract's signature state changed, so they can refresh instead of
waiting out the cache TTL.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Protocol

from src.domain.models.signature import SignatureRole


class SignatureChangeAction(str, Enum):
    """What happened to a signature."""

    SIGNED = "signed"
    REMOVED = "removed"


@dataclass(frozen=True)
class SignatureChangedEvent:
    """A signature was saved or removed for a contract.

    Attributes:
        contract_id: The affected contract.
        role: The party whose signature changed.
        action: Whether the signature was saved or removed.
        occurred_at: When the change was confirmed (UTC).
        source: Which component performed the change.
    """

    contract_id: str
    role: SignatureRole
    action: SignatureChangeAction
    occurred_at: datetime
    source: str = "signature_state_service"


class SignatureEventPublisherProtocol(Protocol):
    """Protocol for publishing signature change events."""

    async def publish(self, event: SignatureChangedEvent) -> None:
        """Publish a signature change event.

        Implementations MUST NOT raise for subscriber failures.

        Args:
            event: The event to deliver.
        """
        ...
