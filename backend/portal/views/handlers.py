"""General portal handlers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from starlette.responses import JSONResponse

from portal.auth.policy import request_principal
from shared.auth.models import RequiredRole
from shared.auth.policy import route_guard_decision
from shared.build_info import APP_VERSION, GIT_COMMIT

if TYPE_CHECKING:
    from starlette.requests import Request


async def health(_request: Request) -> JSONResponse:
    return JSONResponse({"status": "ok", "version": APP_VERSION, "commit": GIT_COMMIT})


async def access_check(request: Request) -> JSONResponse:
    """GET /api/access/{required_role} - what a guarded page would do for the caller.

    Used by the client to decide between rendering, the sign-in page, the
    subscribe page, and the unauthorized page.
    """
    try:
        required_role = RequiredRole(request.path_params["required_role"])
    except ValueError:
        return JSONResponse({"error": "Unknown role"}, status_code=404)
    require_auth = request.query_params.get("require_auth", "true").lower() not in {"0", "false", "no"}
    principal = request_principal(request)
    decision = route_guard_decision(principal, required_role, False, require_auth=require_auth)
    return JSONResponse({"required_role": required_role, "decision": decision})
