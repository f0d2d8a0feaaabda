"""
Pytest configuration and shared fixtures for contract signature state tests.

Testing Standards:
- All async tests use pytest.mark.asyncio (auto mode enabled in pyproject.toml)
- Use AsyncMock for async function mocking
- Time-dependent tests use FakeTimeAuthority, never sleep
- Unit tests go in tests/unit/
- Integration tests go in tests/integration/
"""

import pytest

from src.application.services.signature_state_cache import SignatureStateCache
from src.application.services.signature_state_service import SignatureStateService
from src.infrastructure.stubs.signature_event_publisher_stub import (
    SignatureEventPublisherStub,
)
from src.infrastructure.stubs.signature_mirror_stub import SignatureMirrorStub
from src.infrastructure.stubs.signature_store_stub import SignatureStoreStub
from tests.helpers.fake_time_authority import FakeTimeAuthority


@pytest.fixture
def fake_time() -> FakeTimeAuthority:
    """Controllable clock starting at 2026-01-01T00:00:00Z."""
    return FakeTimeAuthority()


@pytest.fixture
def signature_store() -> SignatureStoreStub:
    """In-memory remote signature store."""
    return SignatureStoreStub()


@pytest.fixture
def signature_mirror() -> SignatureMirrorStub:
    """In-memory device-local mirror."""
    return SignatureMirrorStub()


@pytest.fixture
def event_publisher() -> SignatureEventPublisherStub:
    """Publisher recording signature change events."""
    return SignatureEventPublisherStub()


@pytest.fixture
def signature_cache(fake_time: FakeTimeAuthority) -> SignatureStateCache:
    """Signature state cache with the default 5 second TTL."""
    return SignatureStateCache(fake_time)


@pytest.fixture
def signature_service(
    signature_store: SignatureStoreStub,
    signature_mirror: SignatureMirrorStub,
    signature_cache: SignatureStateCache,
    fake_time: FakeTimeAuthority,
    event_publisher: SignatureEventPublisherStub,
) -> SignatureStateService:
    """SignatureStateService wired with stubs and a fake clock."""
    return SignatureStateService(
        store=signature_store,
        mirror=signature_mirror,
        cache=signature_cache,
        time_authority=fake_time,
        event_publisher=event_publisher,
    )
