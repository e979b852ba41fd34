"""User model for Starlette AuthenticationMiddleware integration."""

from __future__ import annotations

from typing import TYPE_CHECKING

from starlette.authentication import BaseUser

if TYPE_CHECKING:
    from shared.auth.models import Principal


class AuthenticatedMember(BaseUser):
    """Signed-in member exposed as ``request.user``.

    Wraps the principal built from the member's profile for this request.
    """

    def __init__(self, principal: Principal) -> None:
        self._principal = principal

    @property
    def is_authenticated(self) -> bool:  # pragma: no cover
        return True

    @property
    def display_name(self) -> str:  # pragma: no cover
        return self._principal.user_id

    @property
    def identity(self) -> str:  # pragma: no cover
        return self._principal.user_id

    @property
    def user_id(self) -> str:
        return self._principal.user_id

    @property
    def principal(self) -> Principal:
        return self._principal
