"""Port for the identity provider."""

from typing import Protocol


class IdentityError(RuntimeError):
    """Raised when an operation needs a signed-in user and has none."""


class IdentityPort(Protocol):
    """Port exposing the current user as an opaque identifier."""

    def is_resolved(self) -> bool:
        """Return True once the authentication state is known."""

    def current_user_id(self) -> str | None:
        """Return the signed-in user id, or None when signed out."""


__all__ = ["IdentityError", "IdentityPort"]
