"""Bootstrap wiring for the signature state service.

Builds the one SignatureStateService a process uses, choosing collaborators
from SignatureCacheConfig:

- SIGNATURE_STORE_BASE_URL set -> HttpSignatureStore, else SignatureStoreStub
- SIGNATURE_MIRROR_DIR set -> FileSignatureMirror, else SignatureMirrorStub

The service subscribes itself to the in-process event bus so changes made
by any component in the process invalidate its cache.
"""

from __future__ import annotations

import structlog

from src.application.ports.signature_mirror import SignatureMirrorProtocol
from src.application.ports.signature_store import SignatureStoreProtocol
from src.application.ports.time_authority import TimeAuthorityProtocol
from src.application.services.signature_state_cache import SignatureStateCache
from src.application.services.signature_state_service import SignatureStateService
from src.application.services.time_authority_service import SystemTimeAuthority
from src.config.signature_cache_config import SignatureCacheConfig
from src.infrastructure.adapters.messaging.in_process_signature_event_bus import (
    InProcessSignatureEventBus,
)
from src.infrastructure.adapters.persistence.file_signature_mirror import (
    FileSignatureMirror,
)
from src.infrastructure.adapters.persistence.http_signature_store import (
    HttpSignatureStore,
)
from src.infrastructure.stubs.signature_mirror_stub import SignatureMirrorStub
from src.infrastructure.stubs.signature_store_stub import SignatureStoreStub

logger = structlog.get_logger()

_signature_state_service: SignatureStateService | None = None
_signature_event_bus: InProcessSignatureEventBus | None = None
_signature_store: SignatureStoreProtocol | None = None


def build_signature_store(config: SignatureCacheConfig) -> SignatureStoreProtocol:
    """Select the remote signature store for a config."""
    if config.store_base_url is None:
        logger.warning("signature_store_stub_in_use")
        return SignatureStoreStub()
    return HttpSignatureStore(
        config.store_base_url,
        timeout=config.store_timeout_seconds,
        api_key=config.store_api_key,
    )


def build_signature_mirror(config: SignatureCacheConfig) -> SignatureMirrorProtocol:
    """Select the device-local mirror for a config."""
    if config.mirror_dir is None:
        return SignatureMirrorStub()
    return FileSignatureMirror(config.mirror_dir)


def build_signature_state_service(
    config: SignatureCacheConfig,
    *,
    store: SignatureStoreProtocol | None = None,
    mirror: SignatureMirrorProtocol | None = None,
    time_authority: TimeAuthorityProtocol | None = None,
    event_bus: InProcessSignatureEventBus | None = None,
) -> SignatureStateService:
    """Build a fully wired SignatureStateService.

    Args:
        config: Service configuration.
        store: Override for the remote store.
        mirror: Override for the mirror.
        time_authority: Override for the clock.
        event_bus: Bus to publish on and subscribe to. A new one is created
            if omitted.

    Returns:
        The wired service.
    """
    time_authority = time_authority or SystemTimeAuthority()
    event_bus = event_bus or InProcessSignatureEventBus()
    service = SignatureStateService(
        store=store or build_signature_store(config),
        mirror=mirror or build_signature_mirror(config),
        cache=SignatureStateCache(time_authority, ttl_seconds=config.cache_ttl_seconds),
        time_authority=time_authority,
        event_publisher=event_bus,
    )
    event_bus.subscribe(service.handle_signature_changed)
    return service


def get_signature_state_service() -> SignatureStateService:
    """Get the singleton SignatureStateService.

    Raises:
        RuntimeError: If the service has not been initialized.
    """
    if _signature_state_service is None:
        raise RuntimeError(
            "SignatureStateService not initialized. "
            "Call init_signature_state_service() at startup."
        )
    return _signature_state_service


def get_signature_event_bus() -> InProcessSignatureEventBus:
    """Get the event bus the singleton service publishes on.

    Raises:
        RuntimeError: If the service has not been initialized.
    """
    if _signature_event_bus is None:
        raise RuntimeError(
            "Signature event bus not initialized. "
            "Call init_signature_state_service() at startup."
        )
    return _signature_event_bus


def init_signature_state_service(
    config: SignatureCacheConfig | None = None,
    **overrides: object,
) -> SignatureStateService:
    """Initialize the singleton SignatureStateService.

    Should be called once at application startup.

    Args:
        config: Service configuration (default: from environment).
        **overrides: Collaborator overrides passed to
            build_signature_state_service (store, mirror, time_authority).

    Returns:
        The initialized service.
    """
    global _signature_state_service, _signature_event_bus, _signature_store
    config = config or SignatureCacheConfig.from_environment()
    store = overrides.pop("store", None)
    if store is None:
        store = build_signature_store(config)
    _signature_store = store  # type: ignore[assignment]
    _signature_event_bus = InProcessSignatureEventBus()
    _signature_state_service = build_signature_state_service(
        config,
        store=_signature_store,
        event_bus=_signature_event_bus,
        **overrides,  # type: ignore[arg-type]
    )
    logger.info(
        "signature_state_service_initialized",
        cache_ttl_seconds=config.cache_ttl_seconds,
        remote_store=config.uses_remote_store,
        file_mirror=config.mirror_dir is not None,
    )
    return _signature_state_service


async def shutdown_signature_state_service() -> None:
    """Release the singleton's resources and reset it.

    Closes the HTTP client of an HttpSignatureStore. Should be called once
    at application shutdown.
    """
    store = _signature_store
    reset_signature_state_service()
    if isinstance(store, HttpSignatureStore):
        await store.close()
        logger.info("signature_store_closed")


def reset_signature_state_service() -> None:
    """Reset the singleton for testing."""
    global _signature_state_service, _signature_event_bus, _signature_store
    _signature_state_service = None
    _signature_event_bus = None
    _signature_store = None


__all__ = [
    "build_signature_mirror",
    "build_signature_state_service",
    "build_signature_store",
    "get_signature_event_bus",
    "get_signature_state_service",
    "init_signature_state_service",
    "reset_signature_state_service",
    "shutdown_signature_state_service",
]
