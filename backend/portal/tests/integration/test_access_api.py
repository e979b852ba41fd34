"""Integration tests for the access check and health endpoints."""

import pytest

from portal.tests.integration.helpers import sign_in
from shared.auth.models import Role, SubscriptionStatus


class TestHealth:
    def test_reports_build(self, client):
        body = client.get("/health").json()
        assert body["status"] == "ok"
        assert "version" in body
        assert "commit" in body


class TestAccessCheck:
    def test_anonymous_guest_content_needs_signin(self, client):
        assert client.get("/api/access/guest").json()["decision"] == "redirect_signin"

    def test_anonymous_optional_auth(self, client):
        body = client.get("/api/access/guest", params={"require_auth": "false"}).json()
        assert body == {"required_role": "guest", "decision": "allow"}

    @pytest.mark.parametrize(
        ("role", "status", "required", "decision"),
        [
            (Role.LEARNER, SubscriptionStatus.INACTIVE, "learner", "allow"),
            (Role.LEARNER, SubscriptionStatus.INACTIVE, "subscriber", "redirect_unauthorized"),
            (Role.SUBSCRIBER, SubscriptionStatus.INACTIVE, "subscriber", "redirect_subscribe"),
            (Role.SUBSCRIBER, SubscriptionStatus.ACTIVE, "subscriber", "allow"),
            (Role.TRANSLATOR, SubscriptionStatus.INACTIVE, "subscriber", "allow"),
            (Role.TRANSLATOR, SubscriptionStatus.INACTIVE, "admin", "redirect_unauthorized"),
            (Role.ADMIN, SubscriptionStatus.CANCELED, "admin", "allow"),
        ],
    )
    def test_decisions(self, app, client, role, status, required, decision):
        headers = sign_in(app, "u-1", role=role, status=status)
        body = client.get(f"/api/access/{required}", headers=headers).json()
        assert body["decision"] == decision

    def test_cookie_session(self, app, client):
        headers = sign_in(app, "u-1", role=Role.ADMIN)
        client.cookies.set("session_id", headers["Authorization"].removeprefix("Bearer "))
        assert client.get("/api/access/admin").json()["decision"] == "allow"

    def test_unknown_role(self, client):
        assert client.get("/api/access/translator").status_code == 404
