"""Tests for access-control models."""

import pytest
from pydantic import ValidationError

from shared.auth.models import ANONYMOUS, Principal, Profile, Role, SubscriptionStatus


class TestPrincipal:
    def test_defaults_to_anonymous_guest(self):
        assert ANONYMOUS.role == Role.GUEST
        assert ANONYMOUS.subscription_status == SubscriptionStatus.INACTIVE
        assert ANONYMOUS.user_id == ""

    def test_is_frozen(self):
        principal = Principal(user_id="u1", role=Role.LEARNER)
        with pytest.raises(ValidationError):
            principal.role = Role.ADMIN  # type: ignore[misc]

    def test_rejects_unknown_role(self):
        with pytest.raises(ValidationError):
            Principal(user_id="u1", role="sommelier")  # type: ignore[arg-type]

    def test_accepts_raw_strings(self):
        principal = Principal(user_id="u1", role="subscriber", subscription_status="trialing")  # type: ignore[arg-type]
        assert principal.role is Role.SUBSCRIBER
        assert principal.subscription_status is SubscriptionStatus.TRIALING


class TestProfile:
    def test_new_profiles_are_learners(self):
        profile = Profile(user_id="u1", email="a@example.com")
        assert profile.role == Role.LEARNER
        assert profile.subscription_status == SubscriptionStatus.INACTIVE

    def test_to_principal_copies_access_fields(self):
        profile = Profile(
            user_id="u1",
            full_name="Ana",
            role=Role.SUBSCRIBER,
            subscription_status=SubscriptionStatus.ACTIVE,
            stripe_customer_id="cus_123",
        )
        assert profile.to_principal() == Principal(
            user_id="u1",
            role=Role.SUBSCRIBER,
            subscription_status=SubscriptionStatus.ACTIVE,
        )

    def test_round_trips_through_json(self):
        profile = Profile(user_id="u1", role=Role.TRANSLATOR)
        assert Profile.model_validate_json(profile.model_dump_json()) == profile
