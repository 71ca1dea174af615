"""Port for the per-user document store."""

from typing import Any, Protocol


class PersistenceError(RuntimeError):
    """Raised when a remote read or write of the user document fails."""


class UserDocumentStorePort(Protocol):
    """Port exposing read/write access to one nested document per user."""

    def fetch_document(self, user_id: str) -> dict[str, Any] | None:
        """Return the stored document, or None when the user has none."""

    def write_document(self, user_id: str, document: dict[str, Any]) -> None:
        """Replace the stored document for the user."""


__all__ = ["PersistenceError", "UserDocumentStorePort"]
