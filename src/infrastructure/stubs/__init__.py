"""Infrastructure stubs for development and testing.

This module provides stub implementations of infrastructure ports
for use in development and testing environments.

Available stubs:
- SignatureStoreStub: In-memory remote store with failure injection
- SignatureMirrorStub: In-memory device-local mirror
- SignatureEventPublisherStub: Records published signature events

WARNING: These stubs are NOT for production use.
Production implementations are in src/infrastructure/adapters/.
"""

from src.infrastructure.stubs.signature_event_publisher_stub import (
    SignatureEventPublisherStub,
)
from src.infrastructure.stubs.signature_mirror_stub import SignatureMirrorStub
from src.infrastructure.stubs.signature_store_stub import SignatureStoreStub

__all__: list[str] = [
    "SignatureEventPublisherStub",
    "SignatureMirrorStub",
    "SignatureStoreStub",
]
