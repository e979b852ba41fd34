"""Role hierarchy access checks shared by every gated content surface.

Pure functions only: callers fetch the principal and decide how to present
the outcome (redirect, error body, hidden module, ...).

Translators share rank 2 with subscribers, but the subscription-activity
check applies to the ``subscriber`` role alone. A translator therefore
reaches subscriber content without any subscription record.
"""

from __future__ import annotations

from enum import StrEnum

from shared.auth.models import ANONYMOUS, Principal, RequiredRole, Role, SubscriptionStatus

ROLE_RANK: dict[str, int] = {
    Role.GUEST: 0,
    Role.LEARNER: 1,
    Role.SUBSCRIBER: 2,
    Role.TRANSLATOR: 2,
    Role.ADMIN: 3,
}


class AccessDecision(StrEnum):
    """Outcome of a route guard evaluation."""

    ALLOW = "allow"
    REDIRECT_SIGNIN = "redirect_signin"
    REDIRECT_SUBSCRIBE = "redirect_subscribe"
    REDIRECT_UNAUTHORIZED = "redirect_unauthorized"
    PENDING = "pending"


def role_rank(role: Role | RequiredRole | str) -> int:
    """Return the hierarchy rank of a role. Raises ValueError for unknown roles."""
    try:
        return ROLE_RANK[role]
    except KeyError:
        raise ValueError(f"Unknown role: {role!r}") from None


def _coerce_required(required_role: RequiredRole | str) -> RequiredRole:
    try:
        return RequiredRole(required_role)
    except ValueError:
        raise ValueError(f"Unknown required role: {required_role!r}") from None


def _needs_active_subscription(principal: Principal, required_role: RequiredRole) -> bool:
    return required_role == RequiredRole.SUBSCRIBER and principal.role == Role.SUBSCRIBER


def can_access(principal: Principal | None, required_role: RequiredRole | str) -> bool:
    """Return True when the principal may reach content demanding ``required_role``.

    An absent principal is evaluated as an anonymous guest.
    """
    required = _coerce_required(required_role)
    if required == RequiredRole.GUEST:
        return True

    member = principal or ANONYMOUS
    if member.role == Role.ADMIN:
        return True
    if role_rank(member.role) < role_rank(required):
        return False
    if _needs_active_subscription(member, required):
        return member.subscription_status == SubscriptionStatus.ACTIVE
    return True


def route_guard_decision(
    principal: Principal | None,
    required_role: RequiredRole | str | None,
    is_auth_loading: bool,  # noqa: FBT001
    *,
    require_auth: bool = True,
) -> AccessDecision:
    """Decide what a guarded route should do for the given principal.

    ``PENDING`` is returned while the upstream session is still resolving,
    whatever the other inputs are.
    """
    if is_auth_loading:
        return AccessDecision.PENDING
    if require_auth and principal is None:
        return AccessDecision.REDIRECT_SIGNIN
    if required_role is None:
        return AccessDecision.ALLOW

    required = _coerce_required(required_role)
    member = principal or ANONYMOUS
    if can_access(member, required):
        return AccessDecision.ALLOW
    if _needs_active_subscription(member, required):
        return AccessDecision.REDIRECT_SUBSCRIBE
    return AccessDecision.REDIRECT_UNAUTHORIZED
