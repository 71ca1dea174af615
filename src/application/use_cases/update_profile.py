"""Use case to merge profile details into the user document."""

from collections.abc import Callable
from datetime import date, datetime

from src.application.ports.document_store import UserDocumentStorePort
from src.application.ports.identity import IdentityError, IdentityPort
from src.application.use_cases.save_user_state import (
    MergeWriteResult,
    merge_write,
    utc_now,
)
from src.application.use_cases.state_document import encode_profile
from src.domain.models import UserProfile
from src.infrastructure.logging.logger import get_app_logger


class UpdateProfileUseCase:
    """Write only the profile fields the user filled in."""

    def __init__(
        self,
        document_store: UserDocumentStorePort,
        identity: IdentityPort,
        logger=None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._document_store = document_store
        self._identity = identity
        self._logger = logger or get_app_logger()
        self._clock = clock

    def execute(
        self,
        name: str | None = None,
        gender: str | None = None,
        birth_date: date | str | None = None,
    ) -> UserProfile:
        """Merge the provided profile fields for the signed-in user.

        Blank values are skipped so they never overwrite stored ones.

        Raises:
            IdentityError: If no user is signed in.
            ValueError: If ``birth_date`` is not an ISO date.
            PersistenceError: If the store cannot be read or written.
        """
        user_id = self._identity.current_user_id()
        if not user_id:
            raise IdentityError("Sign-in is required to update the profile.")

        profile = UserProfile(
            name=name.strip() if name and name.strip() else None,
            gender=gender or None,
            birth_date=_normalize_birth_date(birth_date),
        )
        fields = encode_profile(profile)
        result: MergeWriteResult = merge_write(
            self._document_store,
            user_id,
            fields,
            self._clock().isoformat(),
        )
        self._logger.info(
            f"Updated profile for user={user_id}: "
            f"fields={list(result.written_fields)}"
        )
        return profile


def _normalize_birth_date(value: date | str | None) -> str | None:
    if not value:
        return None
    if isinstance(value, date):
        return value.isoformat()
    return date.fromisoformat(value.strip()).isoformat()


__all__ = ["UpdateProfileUseCase"]
