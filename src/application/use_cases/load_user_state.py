"""Use case to load the signed-in user's state from the document store."""

from src.application.ports.document_store import (
    PersistenceError,
    UserDocumentStorePort,
)
from src.application.use_cases.state_document import decode_state
from src.domain.models import AppState
from src.infrastructure.logging.logger import get_app_logger


class LoadUserStateUseCase:
    """Fetch the user document and decode it into an AppState."""

    def __init__(self, document_store: UserDocumentStorePort, logger=None) -> None:
        """Initialize the use case.

        Args:
            document_store: Port providing the per-user documents.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._document_store = document_store
        self._logger = logger or get_app_logger()

    def execute(self, user_id: str) -> AppState:
        """Return the decoded state; a missing document yields defaults.

        Args:
            user_id: Opaque identifier of the signed-in user.

        Returns:
            AppState: Decoded state.

        Raises:
            PersistenceError: If the store cannot be read.
        """
        try:
            document = self._document_store.fetch_document(user_id)
        except PersistenceError:
            raise
        except Exception as exc:
            raise PersistenceError(f"Failed to load user document: {exc}") from exc

        state = decode_state(document)
        product_count = len(state.portfolio.all_products())
        self._logger.info(
            f"Loaded state for user={user_id}: products={product_count}, "
            f"ledger_assets={len(state.ledger.deltas)}"
        )
        return state


__all__ = ["LoadUserStateUseCase"]
