"""Access control shared by the portal routes and content listings."""

from shared.auth.content import ContentUnit, accessible_units, course_progress
from shared.auth.models import (
    ANONYMOUS,
    AuthSession,
    Principal,
    Profile,
    RequiredRole,
    Role,
    SubscriptionStatus,
)
from shared.auth.policy import ROLE_RANK, AccessDecision, can_access, role_rank, route_guard_decision
from shared.auth.session_store import SessionStore

__all__ = [
    "ANONYMOUS",
    "ROLE_RANK",
    "AccessDecision",
    "AuthSession",
    "ContentUnit",
    "Principal",
    "Profile",
    "RequiredRole",
    "Role",
    "SessionStore",
    "SubscriptionStatus",
    "accessible_units",
    "can_access",
    "course_progress",
    "role_rank",
    "route_guard_decision",
]
