"""Use case removing one product from the stored user document."""

from collections.abc import Callable
from datetime import datetime
from typing import Any

from src.application.ports.document_store import (
    PersistenceError,
    UserDocumentStorePort,
)
from src.application.use_cases.save_user_state import (
    MergeWriteResult,
    merge_write,
    utc_now,
)
from src.application.use_cases.state_document import ASSETS_FIELD
from src.domain.constants import CATEGORY_DOCUMENT_FIELDS, Category
from src.infrastructure.logging.logger import get_app_logger


class DeleteProductUseCase:
    """Persist a product removal without writing other local edits.

    Only the stored ``assets`` section changes, and only by dropping the
    entry with the given id. Unsaved edits elsewhere in local state stay
    local until the next save.
    """

    def __init__(
        self,
        document_store: UserDocumentStorePort,
        logger=None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._document_store = document_store
        self._logger = logger or get_app_logger()
        self._clock = clock

    def execute(
        self,
        user_id: str,
        category: Category,
        product_id: str,
    ) -> MergeWriteResult:
        """Remove ``product_id`` from the stored ``category`` list.

        Raises:
            PersistenceError: If the store cannot be read or written.
        """
        try:
            existing = self._document_store.fetch_document(user_id) or {}
        except PersistenceError:
            raise
        except Exception as exc:
            raise PersistenceError(f"Failed to read user document: {exc}") from exc

        assets = _without_product(existing.get(ASSETS_FIELD), category, product_id)
        result = merge_write(
            self._document_store,
            user_id,
            {ASSETS_FIELD: assets},
            self._clock().isoformat(),
        )
        self._logger.info(
            f"Deleted product={product_id} in {category.value} for user={user_id}"
        )
        return result


def _without_product(
    raw_assets: Any,
    category: Category,
    product_id: str,
) -> dict[str, Any]:
    assets = dict(raw_assets) if isinstance(raw_assets, dict) else {}
    field_name = CATEGORY_DOCUMENT_FIELDS[category]
    entries = assets.get(field_name)
    if not isinstance(entries, list):
        entries = []
    assets[field_name] = [
        entry
        for entry in entries
        if not (isinstance(entry, dict) and entry.get("id") == product_id)
    ]
    return assets


__all__ = ["DeleteProductUseCase"]
