"""Signature mirror stub.

In-memory implementation of SignatureMirrorProtocol, standing in for
device-local storage in tests and in processes without a mirror directory.
"""

from __future__ import annotations

from src.application.ports.signature_mirror import SignatureMirrorProtocol
from src.domain.errors.signature import SignatureMirrorError


class SignatureMirrorStub(SignatureMirrorProtocol):
    """Dict-backed mirror with an unavailability switch."""

    def __init__(self) -> None:
        """Initialize the stub with empty storage."""
        self._values: dict[str, str] = {}
        self._unavailable = False

    def clear(self) -> None:
        """Clear all stored data."""
        self._values.clear()
        self._unavailable = False

    def set_unavailable(self, unavailable: bool = True) -> None:
        """Make every operation raise SignatureMirrorError.

        Args:
            unavailable: Whether the mirror is unusable.
        """
        self._unavailable = unavailable

    def snapshot(self) -> dict[str, str]:
        """Return a copy of the stored values."""
        return dict(self._values)

    def _check(self) -> None:
        if self._unavailable:
            raise SignatureMirrorError("Signature mirror unavailable")

    def get(self, key: str) -> str | None:
        """Return the stored value, or None if absent."""
        self._check()
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        """Store a value."""
        self._check()
        self._values[key] = value

    def remove(self, key: str) -> None:
        """Remove a value if present."""
        self._check()
        self._values.pop(key, None)
