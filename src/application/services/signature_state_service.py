"""Signature state service.

Produces an up-to-date SignatureState for a contract and safely mutates
signatures, keeping three tiers consistent:

1. SignatureStateCache - in-memory, TTL-bounded (hot path)
2. SignatureStoreProtocol - durable remote store (source of truth)
3. SignatureMirrorProtocol - device-local mirror (fallback hint)

Rules:
- REMOTE WINS - When the remote store answers, its records replace any
  conflicting mirror data
- READS NEVER RAISE - Remote failure falls back to the mirror, then to the
  empty (unsigned) state
- NO PARTIAL WRITES - A mutation the remote store rejected leaves the cache
  and mirror untouched and is reported as failed
- INVALIDATE ON MUTATION - A successful save/remove drops the cache entry
  before returning, so the next resolve in this process reads fresh truth
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from src.application.dtos.signature import EditCheckResult, SignatureMutationResult
from src.application.ports.signature_events import (
    SignatureChangeAction,
    SignatureChangedEvent,
)
from src.application.ports.signature_mirror import signature_mirror_key
from src.application.services.base import LoggingMixin
from src.domain.errors.signature import SignatureMirrorError, SignatureStoreError
from src.domain.models.signature import SignatureRecord, SignatureRole, SignatureState
from src.domain.services.edit_gate import evaluate_edit_gate

if TYPE_CHECKING:
    from src.application.ports.signature_events import SignatureEventPublisherProtocol
    from src.application.ports.signature_mirror import SignatureMirrorProtocol
    from src.application.ports.signature_store import SignatureStoreProtocol
    from src.application.ports.time_authority import TimeAuthorityProtocol
    from src.application.services.signature_state_cache import SignatureStateCache


class SignatureStateService(LoggingMixin):
    """Reconciles contract signature state across cache, remote store and mirror.

    Owns the cache entries it is given; callers only request reads or
    mutations through this service.

    Usage:
        service = SignatureStateService(
            store=store,
            mirror=mirror,
            cache=SignatureStateCache(time_authority),
            time_authority=time_authority,
        )
        result = await service.can_edit_contract("abc123")
        if not result.can_edit:
            print(result.reason)
    """

    def __init__(
        self,
        *,
        store: SignatureStoreProtocol,
        mirror: SignatureMirrorProtocol,
        cache: SignatureStateCache,
        time_authority: TimeAuthorityProtocol,
        event_publisher: SignatureEventPublisherProtocol | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            store: Durable remote signature store.
            mirror: Device-local mirror.
            cache: In-memory state cache owned by this service.
            time_authority: Clock for last_checked stamps.
            event_publisher: Optional publisher notified after mutations.
        """
        self._store = store
        self._mirror = mirror
        self._cache = cache
        self._time = time_authority
        self._events = event_publisher
        self._init_logger()

    # =========================================================================
    # Reads
    # =========================================================================

    async def resolve(self, contract_id: str) -> SignatureState:
        """Resolve the current signature state for a contract.

        Returns the cached state if fresh. Otherwise reads the remote store
        and repopulates mirror and cache. If the remote store fails, the
        mirror's candidate state is returned (and cached, so repeated
        failures inside the TTL window do not hammer the store). If the
        mirror is unusable too, the empty state is returned.

        If the contract is invalidated while the remote read is in flight
        (a save, remove or explicit invalidation), the result is returned
        but neither cached nor synced to the mirror.

        Args:
            contract_id: The contract to resolve.

        Returns:
            The resolved SignatureState. Never raises.
        """
        cached = self._cache.get(contract_id)
        if cached is not None:
            return cached

        log = self._log_operation("resolve", contract_id=contract_id)
        generation = self._cache.generation(contract_id)
        candidate = self._read_mirror(contract_id)

        try:
            records = await self._store.read_signatures(contract_id)
            state = SignatureState.from_records(records, self._time.utcnow())
        except SignatureStoreError as exc:
            log.warning(
                "signature_store_read_failed",
                error=str(exc),
                fallback="mirror" if candidate is not None else "empty",
            )
            return self._cache_fallback(contract_id, candidate, generation)
        except Exception:
            log.exception(
                "signature_store_read_crashed",
                fallback="mirror" if candidate is not None else "empty",
            )
            return self._cache_fallback(contract_id, candidate, generation)

        if self._cache.generation(contract_id) != generation:
            log.info("signature_state_superseded")
            return state

        self._sync_mirror(contract_id, state)
        self._cache.put(contract_id, state)
        log.debug(
            "signature_state_resolved",
            has_designer_signature=state.has_designer_signature,
            has_client_signature=state.has_client_signature,
        )
        return state

    async def get_signature_state(self, contract_id: str) -> SignatureState:
        """Return the current signature state for a contract.

        Same as resolve().
        """
        return await self.resolve(contract_id)

    async def can_edit_contract(self, contract_id: str) -> EditCheckResult:
        """Decide whether a contract's content may be edited.

        Args:
            contract_id: The contract to check.

        Returns:
            EditCheckResult with the decision, its reason and the state it
            was based on.
        """
        state = await self.resolve(contract_id)
        decision = evaluate_edit_gate(state)
        return EditCheckResult(
            can_edit=decision.allowed,
            reason=decision.reason,
            signature_state=state,
        )

    # =========================================================================
    # Mutations
    # =========================================================================

    async def save_signature(
        self,
        contract_id: str,
        role: SignatureRole | str,
        payload: Mapping[str, Any],
    ) -> SignatureMutationResult:
        """Record one party's signature.

        Writes to the remote store first. Only if that succeeds is the cache
        entry invalidated and the payload mirrored locally.

        Args:
            contract_id: The contract being signed.
            role: The signing party.
            payload: Opaque signature data.

        Returns:
            SignatureMutationResult; success only if the remote write landed.

        Raises:
            UnknownSignatureRoleError: If role is not designer or client.
        """
        role = SignatureRole.parse(role)
        log = self._log_operation(
            "save_signature", contract_id=contract_id, role=role.value
        )

        try:
            await self._store.write_signature(contract_id, role, payload)
        except SignatureStoreError as exc:
            log.warning("signature_save_failed", error=str(exc))
            return SignatureMutationResult.failed(str(exc))
        except Exception as exc:
            log.exception("signature_save_crashed")
            return SignatureMutationResult.failed(str(exc) or type(exc).__name__)

        self._cache.invalidate(contract_id)
        self._mirror_set(contract_id, SignatureRecord(role=role, payload=payload))
        log.info("signature_saved")
        await self._publish(contract_id, role, SignatureChangeAction.SIGNED)
        return SignatureMutationResult.ok()

    async def remove_signature(
        self,
        contract_id: str,
        role: SignatureRole | str,
    ) -> SignatureMutationResult:
        """Remove one party's signature.

        Deletes from the remote store first, then invalidates the cache entry
        and removes the mirrored copy.

        Args:
            contract_id: The contract to unsign.
            role: The party whose signature is removed.

        Returns:
            SignatureMutationResult; success only if the remote delete landed.

        Raises:
            UnknownSignatureRoleError: If role is not designer or client.
        """
        role = SignatureRole.parse(role)
        log = self._log_operation(
            "remove_signature", contract_id=contract_id, role=role.value
        )

        try:
            await self._store.delete_signature(contract_id, role)
        except SignatureStoreError as exc:
            log.warning("signature_remove_failed", error=str(exc))
            return SignatureMutationResult.failed(str(exc))
        except Exception as exc:
            log.exception("signature_remove_crashed")
            return SignatureMutationResult.failed(str(exc) or type(exc).__name__)

        self._cache.invalidate(contract_id)
        self._mirror_remove(contract_id, role)
        log.info("signature_removed")
        await self._publish(contract_id, role, SignatureChangeAction.REMOVED)
        return SignatureMutationResult.ok()

    # =========================================================================
    # Invalidation
    # =========================================================================

    def invalidate(self, contract_id: str) -> None:
        """Force the next resolve of a contract to bypass the TTL.

        For callers that learn about signature changes through another path,
        such as a push from the remote store.
        """
        self._cache.invalidate(contract_id)

    def clear_all(self) -> None:
        """Drop every cached state."""
        self._cache.clear()

    # Caller-facing names used by the editor and signing flow.
    invalidate_cache = invalidate
    clear_cache = clear_all

    async def handle_signature_changed(self, event: SignatureChangedEvent) -> None:
        """Event handler invalidating the cache for a changed contract.

        Subscribe this to a signature event bus so that changes made through
        another service instance are not masked by this one's cache.
        """
        self._log_operation(
            "handle_signature_changed",
            contract_id=event.contract_id,
            source=event.source,
        ).debug("signature_change_received", action=event.action.value)
        self._cache.invalidate(event.contract_id)

    # =========================================================================
    # Mirror helpers
    # =========================================================================

    def _cache_fallback(
        self,
        contract_id: str,
        candidate: SignatureState | None,
        generation: tuple[int, int],
    ) -> SignatureState:
        state = candidate if candidate is not None else SignatureState.empty(self._time.utcnow())
        if self._cache.generation(contract_id) == generation:
            self._cache.put(contract_id, state)
        return state

    def _read_mirror(self, contract_id: str) -> SignatureState | None:
        """Build a candidate state from the mirror.

        Returns:
            Candidate state, or None if the mirror itself is unusable.
            Malformed entries count as unsigned.
        """
        records: dict[SignatureRole, SignatureRecord] = {}
        for role in SignatureRole:
            key = signature_mirror_key(contract_id, role)
            try:
                raw = self._mirror.get(key)
            except SignatureMirrorError as exc:
                self._log.warning(
                    "signature_mirror_unavailable",
                    contract_id=contract_id,
                    error=str(exc),
                )
                return None
            if raw is None:
                continue

            payload = _decode_payload(raw)
            if payload is None:
                self._log.warning(
                    "mirror_payload_malformed",
                    contract_id=contract_id,
                    role=role.value,
                )
                continue
            records[role] = SignatureRecord(role=role, payload=payload)

        return SignatureState.from_records(records, self._time.utcnow())

    def _sync_mirror(self, contract_id: str, state: SignatureState) -> None:
        """Make the mirror match an authoritative state."""
        for role in SignatureRole:
            record = state.signature_for(role)
            if record is not None:
                self._mirror_set(contract_id, record)
            else:
                self._mirror_remove(contract_id, role)

    def _mirror_set(self, contract_id: str, record: SignatureRecord) -> None:
        key = signature_mirror_key(contract_id, record.role)
        try:
            self._mirror.set(key, json.dumps(record.to_dict()))
        except (SignatureMirrorError, TypeError, ValueError) as exc:
            self._log.warning(
                "signature_mirror_write_failed",
                contract_id=contract_id,
                role=record.role.value,
                error=str(exc),
            )

    def _mirror_remove(self, contract_id: str, role: SignatureRole) -> None:
        key = signature_mirror_key(contract_id, role)
        try:
            self._mirror.remove(key)
        except SignatureMirrorError as exc:
            self._log.warning(
                "signature_mirror_remove_failed",
                contract_id=contract_id,
                role=role.value,
                error=str(exc),
            )

    async def _publish(
        self,
        contract_id: str,
        role: SignatureRole,
        action: SignatureChangeAction,
    ) -> None:
        if self._events is None:
            return
        try:
            await self._events.publish(
                SignatureChangedEvent(
                    contract_id=contract_id,
                    role=role,
                    action=action,
                    occurred_at=self._time.utcnow(),
                )
            )
        except Exception:
            self._log.exception(
                "signature_event_publish_failed",
                contract_id=contract_id,
                role=role.value,
                action=action.value,
            )


def _decode_payload(raw: str) -> dict[str, Any] | None:
    """Decode a mirrored payload, returning None if it is not a JSON object."""
    try:
        payload = json.loads(raw)
    except (TypeError, ValueError):
        return None
    if not isinstance(payload, dict):
        return None
    return payload
