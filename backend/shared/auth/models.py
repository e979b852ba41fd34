"""Member roles, subscription state, and session models for access control."""

from dataclasses import dataclass
from enum import StrEnum

from pydantic import BaseModel


class Role(StrEnum):
    GUEST = "guest"
    LEARNER = "learner"
    SUBSCRIBER = "subscriber"
    TRANSLATOR = "translator"
    ADMIN = "admin"


class SubscriptionStatus(StrEnum):
    INACTIVE = "inactive"
    ACTIVE = "active"
    TRIALING = "trialing"
    CANCELED = "canceled"


class RequiredRole(StrEnum):
    """Minimum role tier a content unit or route demands."""

    GUEST = "guest"
    LEARNER = "learner"
    SUBSCRIBER = "subscriber"
    ADMIN = "admin"


class Principal(BaseModel, frozen=True):
    """Actor evaluated for access checks.

    Built once per request from the member's profile and replaced wholesale
    when the member re-authenticates.
    """

    user_id: str = ""
    role: Role = Role.GUEST
    subscription_status: SubscriptionStatus = SubscriptionStatus.INACTIVE


ANONYMOUS = Principal()


class Profile(BaseModel, frozen=True):
    """Member profile stored in the profile repository."""

    user_id: str
    email: str = ""
    full_name: str = ""
    role: Role = Role.LEARNER
    subscription_status: SubscriptionStatus = SubscriptionStatus.INACTIVE
    stripe_customer_id: str | None = None  # set by the billing provider, never read here

    def to_principal(self) -> Principal:
        return Principal(
            user_id=self.user_id,
            role=self.role,
            subscription_status=self.subscription_status,
        )


@dataclass
class AuthSession:
    """Server-side session issued after the external sign-in flow succeeds."""

    session_id: str  # opaque token, stored in cookie or sent as bearer token
    user_id: str
    created_at: float  # time.time()
    expires_at: float  # time.time() + TTL
