"""Identity provider adapters."""

from src.application.ports.identity import IdentityPort


class StaticIdentityProvider(IdentityPort):
    """Identity resolved up front to a fixed user, or to nobody.

    Authentication itself happens elsewhere; this adapter only reports the
    outcome as an opaque user id.
    """

    def __init__(self, user_id: str | None, resolved: bool = True) -> None:
        self._user_id = user_id
        self._resolved = resolved

    def is_resolved(self) -> bool:
        return self._resolved

    def current_user_id(self) -> str | None:
        return self._user_id if self._resolved else None


__all__ = ["StaticIdentityProvider"]
