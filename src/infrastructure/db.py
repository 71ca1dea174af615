"""Database infrastructure for the asset tracker.

This module exposes helpers to create and reuse the SQLAlchemy engine
holding user documents. Server databases get a small pooled engine;
SQLite URLs use the driver's default pool.
"""

import os
from typing import Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.engine.url import make_url
from sqlalchemy.pool import QueuePool

from src.application.ports.database import DatabaseEnginePort


def _get_env_var(name: str) -> str:
    """Read an environment variable or raise a descriptive error.

    Args:
        name: Name of the environment variable to read.

    Returns:
        str: The raw value of the environment variable.

    Raises:
        RuntimeError: If the environment variable is missing or empty.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine.

    Args:
        db_url: Fully qualified database URL (including driver and credentials)

    Returns:
        Engine: A SQLAlchemy engine with health checks enabled, pooled
        through QueuePool for server databases.
    """
    if make_url(db_url).get_backend_name() == "sqlite":
        return create_engine(db_url, future=True)
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


_document_engine: Optional[Engine] = None


def get_document_engine() -> Engine:
    """Get a singleton SQLAlchemy engine for the user documents database.

    Returns:
        Engine: Lazily initialized engine read from DOCUMENT_DB_URL.
    """
    global _document_engine
    if _document_engine is None:
        db_url = _get_env_var("DOCUMENT_DB_URL")
        _document_engine = _create_engine(db_url)
    return _document_engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by SQLAlchemy engines.

    The adapter hides configuration details (environment variables, pooling)
    behind the port so application code depends only on the protocol.
    """

    def get_document_engine(self) -> Engine:
        return get_document_engine()


__all__ = ["get_document_engine", "SqlAlchemyDatabaseEngineAdapter"]
