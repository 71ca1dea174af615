"""Application ports package."""

from .database import DatabaseEnginePort
from .document_store import PersistenceError, UserDocumentStorePort
from .identity import IdentityError, IdentityPort

__all__ = [
    "DatabaseEnginePort",
    "PersistenceError",
    "UserDocumentStorePort",
    "IdentityError",
    "IdentityPort",
]
