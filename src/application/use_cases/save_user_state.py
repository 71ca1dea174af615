"""Use case implementing the fetch-merge-write save of user state.

The merge is shallow: owned top-level fields replace their stored
counterpart, everything else in the stored document is left untouched.
The sequence is not atomic and the last writer wins.
"""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from src.application.ports.document_store import (
    PersistenceError,
    UserDocumentStorePort,
)
from src.application.use_cases.state_document import (
    UPDATED_AT_FIELD,
    encode_state,
)
from src.domain.models import AppState
from src.infrastructure.logging.logger import get_app_logger


def utc_now() -> datetime:
    """Return the current UTC time."""
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class MergeWriteResult:
    """Result of a merge-write.

    Attributes:
        written_fields: Top-level fields replaced by this write.
        preserved_fields: Stored fields left as they were.
        updated_at: Timestamp stamped on the document.
    """

    written_fields: tuple[str, ...]
    preserved_fields: tuple[str, ...]
    updated_at: str


def merge_write(
    document_store: UserDocumentStorePort,
    user_id: str,
    fields: dict[str, Any],
    updated_at: str,
) -> MergeWriteResult:
    """Fetch the stored document, merge ``fields`` into it and write it back.

    Raises:
        PersistenceError: If the fetch or the write fails.
    """
    try:
        existing = document_store.fetch_document(user_id) or {}
        merged = {**existing, **fields, UPDATED_AT_FIELD: updated_at}
        document_store.write_document(user_id, merged)
    except PersistenceError:
        raise
    except Exception as exc:
        raise PersistenceError(f"Failed to save user document: {exc}") from exc

    preserved = sorted(
        key
        for key in existing
        if key not in fields and key != UPDATED_AT_FIELD
    )
    return MergeWriteResult(
        written_fields=tuple(sorted(fields)),
        preserved_fields=tuple(preserved),
        updated_at=updated_at,
    )


class SaveUserStateUseCase:
    """Persist the owned state sections with a merge-write."""

    def __init__(
        self,
        document_store: UserDocumentStorePort,
        logger=None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        """Initialize the use case.

        Args:
            document_store: Port providing the per-user documents.
            logger: Optional logger compatible with logging.Logger-like API.
            clock: Source of the ``updatedAt`` timestamp.
        """
        self._document_store = document_store
        self._logger = logger or get_app_logger()
        self._clock = clock

    def execute(self, user_id: str, state: AppState) -> MergeWriteResult:
        """Write the state sections of ``state`` for ``user_id``.

        Raises:
            PersistenceError: If the store cannot be read or written.
        """
        result = merge_write(
            self._document_store,
            user_id,
            encode_state(state),
            self._clock().isoformat(),
        )
        self._logger.info(
            f"Saved state for user={user_id}: "
            f"written={list(result.written_fields)}, "
            f"preserved={list(result.preserved_fields)}"
        )
        return result


__all__ = ["MergeWriteResult", "merge_write", "SaveUserStateUseCase", "utc_now"]
