"""Tests for content gating helpers."""

from dataclasses import dataclass

import pytest

from shared.auth.content import accessible_units, course_progress
from shared.auth.models import Principal, RequiredRole, Role, SubscriptionStatus


@dataclass(frozen=True)
class _Module:
    id: str
    required_role: RequiredRole


MODULES = [
    _Module("intro", RequiredRole.GUEST),
    _Module("grapes", RequiredRole.LEARNER),
    _Module("regions", RequiredRole.SUBSCRIBER),
    _Module("blind-tasting", RequiredRole.SUBSCRIBER),
]

LEARNER = Principal(user_id="u1", role=Role.LEARNER)
SUBSCRIBER = Principal(user_id="u2", role=Role.SUBSCRIBER, subscription_status=SubscriptionStatus.ACTIVE)


class TestAccessibleUnits:
    def test_anonymous_sees_only_guest_units(self):
        assert [m.id for m in accessible_units(None, MODULES)] == ["intro"]

    def test_learner_sees_guest_and_learner_units(self):
        assert [m.id for m in accessible_units(LEARNER, MODULES)] == ["intro", "grapes"]

    def test_active_subscriber_sees_everything_in_order(self):
        assert accessible_units(SUBSCRIBER, MODULES) == MODULES


class TestCourseProgress:
    def test_counts_only_accessible_units(self):
        # regions is completed but locked for a learner
        assert course_progress(LEARNER, MODULES, {"intro", "regions"}) == pytest.approx(50.0)

    def test_full_completion(self):
        completed = {m.id for m in MODULES}
        assert course_progress(SUBSCRIBER, MODULES, completed) == pytest.approx(100.0)

    def test_no_accessible_units_is_zero(self):
        locked = [_Module("regions", RequiredRole.SUBSCRIBER)]
        assert course_progress(LEARNER, locked, {"regions"}) == 0.0

    def test_nothing_completed(self):
        assert course_progress(SUBSCRIBER, MODULES, set()) == 0.0
