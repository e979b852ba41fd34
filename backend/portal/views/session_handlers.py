"""Session hand-off from the external identity provider, and sign-out."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog
from starlette.responses import JSONResponse

from portal.auth.backend import SESSION_COOKIE, bearer_token
from portal.views.requests import SignInRequest, read_json
from shared.auth.models import Profile
from shared.auth.sign_in_ticket import verify_ticket

if TYPE_CHECKING:
    from starlette.requests import Request

    from portal.server.settings import PortalSettings

logger = structlog.get_logger()


async def sign_in(request: Request) -> JSONResponse:
    """POST /api/session - exchange a provider-signed ticket for a session cookie.

    A member signing in for the first time gets a learner profile built from
    the ticket's email and name.
    """
    settings: PortalSettings = request.app.state.settings
    if settings.sign_in_secret is None:
        return JSONResponse({"error": "Sign-in is not configured"}, status_code=503)

    body = await read_json(request, SignInRequest)
    if isinstance(body, JSONResponse):
        return body
    ticket = verify_ticket(body.ticket, settings.sign_in_secret)
    if ticket is None:
        logger.warning("sign-in ticket rejected")
        return JSONResponse({"error": "Invalid sign-in ticket"}, status_code=401)

    profiles = request.app.state.profiles
    if await profiles.get_profile(ticket.user_id) is None:
        await profiles.upsert_profile(
            Profile(user_id=ticket.user_id, email=ticket.email or "", full_name=ticket.full_name or ""),
        )
        logger.info("profile created on first sign-in", user_id=ticket.user_id)

    session = request.app.state.session_store.create_session(ticket.user_id, settings.session_ttl_seconds)
    response = JSONResponse({"user_id": session.user_id, "expires_at": session.expires_at})
    response.set_cookie(
        key=SESSION_COOKIE,
        value=session.session_id,
        httponly=True,
        samesite="lax",
        secure=settings.cookie_secure,
        max_age=settings.session_ttl_seconds,
        path="/",
    )
    return response


async def sign_out(request: Request) -> JSONResponse:
    """DELETE /api/session - revoke the caller's session and clear the cookie."""
    session_id = request.cookies.get(SESSION_COOKIE) or bearer_token(request)
    if session_id:
        request.app.state.session_store.delete_session(session_id)
    response = JSONResponse({"signed_out": True})
    response.delete_cookie(key=SESSION_COOKIE, path="/")
    return response
