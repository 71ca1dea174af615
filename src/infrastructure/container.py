"""Composition root for wiring infrastructure adapters."""

from src.application.controller import AssetHubController
from src.application.ports.database import DatabaseEnginePort
from src.application.ports.document_store import UserDocumentStorePort
from src.application.ports.identity import IdentityPort
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.document_store import (
    InMemoryUserDocumentStore,
    SqlAlchemyUserDocumentStore,
)
from src.infrastructure.identity import StaticIdentityProvider
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger
from src.infrastructure.settings import AssetHubSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_document_store(
    settings: AssetHubSettings | None = None,
    db_port: DatabaseEnginePort | None = None,
) -> UserDocumentStorePort:
    """Return the configured user document store."""
    resolved = settings or AssetHubSettings.from_env()
    if resolved.store == "memory":
        return InMemoryUserDocumentStore()
    return SqlAlchemyUserDocumentStore(db_port or build_database_adapter())


def build_identity_provider(
    settings: AssetHubSettings | None = None,
) -> IdentityPort:
    """Return the identity provider for the configured user."""
    resolved = settings or AssetHubSettings.from_env()
    return StaticIdentityProvider(resolved.user_id)


def build_controller(
    settings: AssetHubSettings | None = None,
    document_store: UserDocumentStorePort | None = None,
) -> AssetHubController:
    """Return a controller wired to the configured store and identity."""
    resolved = settings or AssetHubSettings.from_env()
    return AssetHubController(
        document_store=document_store or build_document_store(resolved),
        identity=build_identity_provider(resolved),
        logger=get_app_logger(),
        usage_logger=get_usage_logger(),
        notice_seconds=resolved.notice_seconds,
    )


__all__ = [
    "build_database_adapter",
    "build_document_store",
    "build_identity_provider",
    "build_controller",
]
