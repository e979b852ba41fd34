"""Starlette AuthenticationBackend resolving sessions into principals."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog
from starlette.authentication import AuthCredentials, AuthenticationBackend

from portal.auth.models import AuthenticatedMember
from shared.auth.models import Principal, Role

if TYPE_CHECKING:
    from starlette.requests import HTTPConnection

    from shared.auth.session_store import SessionStore
    from shared.dal.profile_repository import ProfileRepository

SESSION_COOKIE = "session_id"

logger = structlog.get_logger()


def bearer_token(conn: HTTPConnection) -> str | None:
    header = conn.headers.get("authorization", "")
    scheme, _, token = header.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


class SessionBackend(AuthenticationBackend):
    """Authenticate requests via the session cookie or an ``Authorization: Bearer`` token.

    Sessions are issued once the external identity provider has confirmed the
    member. The member's profile supplies role and subscription state; a
    session without a profile is treated as a guest.
    """

    def __init__(self, session_store: SessionStore, profiles: ProfileRepository) -> None:
        self._session_store = session_store
        self._profiles = profiles

    async def authenticate(
        self,
        conn: HTTPConnection,
    ) -> tuple[AuthCredentials, AuthenticatedMember] | None:
        session_id = conn.cookies.get(SESSION_COOKIE) or bearer_token(conn)
        session = self._session_store.get_session(session_id)
        if session is None:
            return None

        profile = await self._profiles.get_profile(session.user_id)
        if profile is None:
            logger.warning("session without profile, treating as guest", user_id=session.user_id)
            principal = Principal(user_id=session.user_id, role=Role.GUEST)
        else:
            principal = profile.to_principal()
        return AuthCredentials(["authenticated"]), AuthenticatedMember(principal)
