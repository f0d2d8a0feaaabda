"""Persistence adapters for signature records."""

from src.infrastructure.adapters.persistence.file_signature_mirror import (
    FileSignatureMirror,
)
from src.infrastructure.adapters.persistence.http_signature_store import (
    HttpSignatureStore,
)

__all__: list[str] = ["FileSignatureMirror", "HttpSignatureStore"]
