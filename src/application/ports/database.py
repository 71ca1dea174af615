"""Database ports for the asset tracker.

This module defines the application-layer protocol for accessing the
database engine that backs the document store. Infrastructure
implementations provide the concrete adapter.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the engine holding user documents."""

    def get_document_engine(self) -> Engine:
        """Get the engine for the user documents database.

        Returns:
            Engine: SQLAlchemy engine connected to the document database.
        """


__all__ = ["DatabaseEnginePort"]
