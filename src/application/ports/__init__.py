"""Application ports - Abstract interfaces for infrastructure adapters.

This module defines the contracts that infrastructure adapters must implement.
Ports enable dependency inversion and make the application layer testable.

Available ports:
- SignatureStoreProtocol: Durable remote store for signature records
- SignatureMirrorProtocol: Device-local key/value fallback mirror
- SignatureEventPublisherProtocol: Signature change notifications
- TimeAuthorityProtocol: Wall clock and monotonic time
"""

from src.application.ports.signature_events import (
    SignatureChangeAction,
    SignatureChangedEvent,
    SignatureEventPublisherProtocol,
)
from src.application.ports.signature_mirror import (
    SignatureMirrorProtocol,
    signature_mirror_key,
)
from src.application.ports.signature_store import SignatureStoreProtocol
from src.application.ports.time_authority import TimeAuthorityProtocol

__all__: list[str] = [
    "SignatureChangeAction",
    "SignatureChangedEvent",
    "SignatureEventPublisherProtocol",
    "SignatureMirrorProtocol",
    "SignatureStoreProtocol",
    "TimeAuthorityProtocol",
    "signature_mirror_key",
]
