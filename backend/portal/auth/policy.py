"""Route access policy for the portal API.

Every endpoint is wrapped by ``guarded`` or ``public_route``; both set the
``AUTH_POLICY_ATTR`` marker so startup validation can verify that no route
was registered without an explicit policy. Guard outcomes come from the
shared role hierarchy (``route_guard_decision``) and are rendered as JSON
errors carrying the page the client should redirect to.
"""

from __future__ import annotations

import functools
from http import HTTPStatus
from typing import TYPE_CHECKING
from urllib.parse import urlencode

from starlette.responses import JSONResponse
from starlette.routing import Mount, Route

from shared.auth.models import RequiredRole
from shared.auth.policy import AccessDecision, route_guard_decision

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from starlette.requests import Request
    from starlette.responses import Response
    from starlette.routing import BaseRoute

    from shared.auth.models import Principal

    type Endpoint = Callable[..., Awaitable[Response]]

AUTH_POLICY_ATTR = "__auth_policy__"

# decision -> (status, error message, client redirect target)
_DENIALS: dict[AccessDecision, tuple[HTTPStatus, str, str]] = {
    AccessDecision.REDIRECT_SIGNIN: (HTTPStatus.UNAUTHORIZED, "Authentication required", "/signin"),
    AccessDecision.REDIRECT_SUBSCRIBE: (HTTPStatus.PAYMENT_REQUIRED, "Active subscription required", "/subscribe"),
    AccessDecision.REDIRECT_UNAUTHORIZED: (HTTPStatus.FORBIDDEN, "Insufficient role", "/unauthorized"),
    AccessDecision.PENDING: (HTTPStatus.SERVICE_UNAVAILABLE, "Authentication pending", ""),
}


def request_principal(request: Request) -> Principal | None:
    """Return the principal of an authenticated request, or None for anonymous callers."""
    if not request.user.is_authenticated:
        return None
    return request.user.principal


def denial_response(decision: AccessDecision, request: Request) -> JSONResponse:
    status, message, target = _DENIALS[decision]
    if decision == AccessDecision.REDIRECT_SIGNIN:
        next_path = request.url.path
        if request.url.query:
            next_path = f"{next_path}?{request.url.query}"
        target = f"{target}?{urlencode({'next': next_path})}"
    return JSONResponse({"error": message, "decision": decision, "redirect": target}, status_code=status)


def guarded(
    required_role: RequiredRole | None = None,
    *,
    require_auth: bool = True,
) -> Callable[[Endpoint], Endpoint]:
    """Gate an endpoint on authentication and, optionally, a minimum role."""

    def decorator(endpoint: Endpoint) -> Endpoint:
        @functools.wraps(endpoint)
        async def wrapper(request: Request, **kwargs: str) -> Response:
            # AuthenticationMiddleware has already resolved the session
            decision = route_guard_decision(
                request_principal(request),
                required_role,
                False,
                require_auth=require_auth,
            )
            if decision != AccessDecision.ALLOW:
                return denial_response(decision, request)
            return await endpoint(request, **kwargs)

        policy = f"guarded:{required_role}" if required_role else "guarded"
        setattr(wrapper, AUTH_POLICY_ATTR, policy)
        return wrapper

    return decorator


def public_route(endpoint: Endpoint) -> Endpoint:
    """Mark endpoint as explicitly public (no auth required).

    The marker lives on a thin wrapper rather than the original callable so
    reusing the function on another route does not leak the policy.
    """

    @functools.wraps(endpoint)
    async def wrapper(request: Request, **kwargs: str) -> Response:
        return await endpoint(request, **kwargs)

    setattr(wrapper, AUTH_POLICY_ATTR, "public")
    return wrapper


def validate_route_auth_policy(routes: list[BaseRoute]) -> None:
    """Verify every Route has an auth policy marker. Mount routes are exempt.

    Raises RuntimeError listing all unclassified routes if any are found.
    """
    unclassified: list[str] = []
    for route in routes:
        if isinstance(route, Mount):
            continue
        if isinstance(route, Route) and not hasattr(route.endpoint, AUTH_POLICY_ATTR):
            name = route.name or getattr(route.endpoint, "__name__", "unknown")
            unclassified.append(f"{route.path} ({name})")

    if unclassified:
        details = ", ".join(unclassified)
        msg = f"Unclassified routes missing auth policy: {details}"
        raise RuntimeError(msg)
