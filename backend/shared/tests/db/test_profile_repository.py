"""Tests for SqliteProfileRepository."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from shared.auth.models import Profile, Role, SubscriptionStatus
from shared.db.connection import Database
from shared.db.profile_repository import SqliteProfileRepository

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def repo(tmp_path: Path):
    db = Database(tmp_path / "test.db")
    db.connect()
    yield SqliteProfileRepository(db)
    db.close()


class TestProfileRepository:
    async def test_upsert_and_get(self, repo: SqliteProfileRepository) -> None:
        profile = Profile(user_id="u1", email="ana@example.com", full_name="Ana")
        await repo.upsert_profile(profile)
        assert await repo.get_profile("u1") == profile

    async def test_get_unknown_returns_none(self, repo: SqliteProfileRepository) -> None:
        assert await repo.get_profile("nobody") is None

    async def test_upsert_replaces_role_and_subscription(self, repo: SqliteProfileRepository) -> None:
        profile = Profile(user_id="u1", email="ana@example.com")
        await repo.upsert_profile(profile)
        upgraded = profile.model_copy(
            update={"role": Role.SUBSCRIBER, "subscription_status": SubscriptionStatus.ACTIVE},
        )
        await repo.upsert_profile(upgraded)

        result = await repo.get_profile("u1")
        assert result.role == Role.SUBSCRIBER
        assert result.subscription_status == SubscriptionStatus.ACTIVE
