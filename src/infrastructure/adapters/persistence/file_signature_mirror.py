"""File-backed signature mirror.

Implements SignatureMirrorProtocol as a single JSON document on local disk,
playing the role browser local storage plays for the web editor: larger
and slower than the in-memory cache, survives restarts, and is consulted
only when the remote signature store is unreachable.

Writes replace the document atomically (temp file + os.replace) so a crash
mid-write never leaves a half-written mirror.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path

import structlog

from src.application.ports.signature_mirror import SignatureMirrorProtocol
from src.domain.errors.signature import SignatureMirrorError

logger = structlog.get_logger(__name__)

MIRROR_FILENAME = "signature-mirror.json"


class FileSignatureMirror(SignatureMirrorProtocol):
    """Mirror persisted as one JSON object of string keys to string values."""

    def __init__(self, directory: Path | str) -> None:
        """Initialize the mirror.

        Args:
            directory: Directory holding the mirror document. Created if
                missing.

        Raises:
            SignatureMirrorError: If the directory cannot be created.
        """
        self._directory = Path(directory)
        self._path = self._directory / MIRROR_FILENAME
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise SignatureMirrorError(
                f"Cannot create mirror directory {self._directory}: {exc}"
            ) from exc

    @property
    def path(self) -> Path:
        """Location of the mirror document."""
        return self._path

    def get(self, key: str) -> str | None:
        """Return the stored value, or None if absent."""
        return self._load().get(key)

    def set(self, key: str, value: str) -> None:
        """Store a value."""
        values = self._load()
        values[key] = value
        self._save(values)

    def remove(self, key: str) -> None:
        """Remove a value if present."""
        values = self._load()
        if values.pop(key, None) is not None:
            self._save(values)

    def _load(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            document = json.loads(self._path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise SignatureMirrorError(f"Cannot read mirror: {exc}") from exc
        except ValueError as exc:
            logger.warning("signature_mirror_corrupt", path=str(self._path))
            raise SignatureMirrorError(f"Mirror document is not valid JSON: {exc}") from exc

        if not isinstance(document, dict):
            logger.warning("signature_mirror_corrupt", path=str(self._path))
            raise SignatureMirrorError("Mirror document is not a JSON object")
        return {str(k): v for k, v in document.items() if isinstance(v, str)}

    def _save(self, values: dict[str, str]) -> None:
        try:
            fd, tmp_name = tempfile.mkstemp(
                dir=self._directory, prefix=".signature-mirror-", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    json.dump(values, handle, sort_keys=True)
                os.replace(tmp_name, self._path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            raise SignatureMirrorError(f"Cannot write mirror: {exc}") from exc
