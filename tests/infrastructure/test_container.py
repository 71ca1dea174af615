"""Tests for the composition root."""

from unittest.mock import MagicMock

from src.application.controller import AssetHubController
from src.infrastructure.container import (
    build_controller,
    build_document_store,
    build_identity_provider,
)
from src.infrastructure.document_store import (
    InMemoryUserDocumentStore,
    SqlAlchemyUserDocumentStore,
)
from src.infrastructure.settings import AssetHubSettings


def test_build_document_store_defaults_to_sqlalchemy() -> None:
    """Default selection should use the SQLAlchemy store."""
    store = build_document_store(AssetHubSettings(), db_port=MagicMock())

    assert isinstance(store, SqlAlchemyUserDocumentStore)


def test_build_document_store_uses_memory() -> None:
    """Selection should honor the memory store."""
    store = build_document_store(AssetHubSettings(store="memory"))

    assert isinstance(store, InMemoryUserDocumentStore)


def test_build_identity_provider_reports_configured_user() -> None:
    """The identity provider exposes the configured user id."""
    identity = build_identity_provider(AssetHubSettings(user_id="u1"))

    assert identity.is_resolved() is True
    assert identity.current_user_id() == "u1"


def test_build_controller_wires_store() -> None:
    """Controllers built by the container load from the given store."""
    store = InMemoryUserDocumentStore({"u1": {"monthlyPlan": {"income": 5}}})

    controller = build_controller(
        AssetHubSettings(store="memory", user_id="u1"),
        document_store=store,
    )

    assert isinstance(controller, AssetHubController)
    assert controller.load() is True
    assert controller.state.plan.income == 5
