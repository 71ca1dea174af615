"""Infrastructure adapters storing one JSON document per user."""

import copy
import json
from typing import Any

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.document_store import (
    PersistenceError,
    UserDocumentStorePort,
)


CREATE_USER_DOCUMENTS_SQL = """
CREATE TABLE IF NOT EXISTS user_documents (
    user_id TEXT PRIMARY KEY,
    payload TEXT NOT NULL
)
"""

SELECT_DOCUMENT_SQL = text(
    """
    SELECT payload
    FROM user_documents
    WHERE user_id = :user_id
    """
)

UPSERT_DOCUMENT_SQL = text(
    """
    INSERT INTO user_documents (user_id, payload)
    VALUES (:user_id, :payload)
    ON CONFLICT (user_id) DO UPDATE SET payload = excluded.payload
    """
)


class SqlAlchemyUserDocumentStore(UserDocumentStorePort):
    """Document store backed by a ``user_documents`` table."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the store.

        Args:
            db_port: Port providing access to the document engine.
        """
        self._db_port = db_port
        self._prepared = False

    def fetch_document(self, user_id: str) -> dict[str, Any] | None:
        try:
            self._ensure_table()
            engine = self._db_port.get_document_engine()
            with engine.connect() as conn:
                row = conn.execute(
                    SELECT_DOCUMENT_SQL,
                    {"user_id": user_id},
                ).first()
        except SQLAlchemyError as exc:
            raise PersistenceError(f"Document read failed: {exc}") from exc
        if row is None:
            return None
        try:
            document = json.loads(row.payload)
        except ValueError:
            return None
        return document if isinstance(document, dict) else None

    def write_document(self, user_id: str, document: dict[str, Any]) -> None:
        payload = json.dumps(document, ensure_ascii=False, sort_keys=True)
        try:
            self._ensure_table()
            engine = self._db_port.get_document_engine()
            with engine.begin() as conn:
                conn.execute(
                    UPSERT_DOCUMENT_SQL,
                    {"user_id": user_id, "payload": payload},
                )
        except SQLAlchemyError as exc:
            raise PersistenceError(f"Document write failed: {exc}") from exc

    def _ensure_table(self) -> None:
        """Create the user_documents table once per store instance."""
        if self._prepared:
            return
        engine = self._db_port.get_document_engine()
        with engine.begin() as conn:
            conn.exec_driver_sql(CREATE_USER_DOCUMENTS_SQL)
        self._prepared = True


class InMemoryUserDocumentStore(UserDocumentStorePort):
    """Process-local store, used for demos and tests."""

    def __init__(self, documents: dict[str, dict[str, Any]] | None = None) -> None:
        self._documents = copy.deepcopy(documents or {})

    def fetch_document(self, user_id: str) -> dict[str, Any] | None:
        document = self._documents.get(user_id)
        return copy.deepcopy(document) if document is not None else None

    def write_document(self, user_id: str, document: dict[str, Any]) -> None:
        self._documents[user_id] = copy.deepcopy(document)


__all__ = [
    "SqlAlchemyUserDocumentStore",
    "InMemoryUserDocumentStore",
    "CREATE_USER_DOCUMENTS_SQL",
    "SELECT_DOCUMENT_SQL",
    "UPSERT_DOCUMENT_SQL",
]
