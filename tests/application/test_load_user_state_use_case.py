"""Tests for the LoadUserStateUseCase."""

from unittest.mock import MagicMock

import pytest

from src.application.ports.document_store import PersistenceError
from src.application.use_cases.load_user_state import LoadUserStateUseCase
from src.domain.constants import Category
from src.domain.models import AppState
from src.infrastructure.document_store import InMemoryUserDocumentStore


def test_execute_decodes_stored_document() -> None:
    """Stored products should be decoded into the state."""
    store = InMemoryUserDocumentStore(
        {"u1": {"assets": {"trustISA": [{"id": "t1", "name": "ISA", "amount": 5}]}}}
    )
    logger = MagicMock()

    state = LoadUserStateUseCase(store, logger=logger).execute("u1")

    (product,) = state.portfolio.products(Category.TRUST_ISA)
    assert product.name == "ISA"
    logger.info.assert_called_once()


def test_execute_returns_defaults_for_unknown_user() -> None:
    """Users without a document get an empty state."""
    store = InMemoryUserDocumentStore()

    state = LoadUserStateUseCase(store, logger=MagicMock()).execute("nobody")

    assert state == AppState()


def test_execute_wraps_store_errors() -> None:
    """Store failures should surface as PersistenceError."""
    store = MagicMock()
    store.fetch_document.side_effect = ConnectionError("offline")

    with pytest.raises(PersistenceError, match="offline"):
        LoadUserStateUseCase(store, logger=MagicMock()).execute("u1")
