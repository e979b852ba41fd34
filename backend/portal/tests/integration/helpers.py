"""Seeding helpers for portal integration tests."""

from __future__ import annotations

import asyncio
from datetime import date
from typing import TYPE_CHECKING

from shared.auth.models import Profile, Role, SubscriptionStatus
from shared.db import SqliteSwirdleWordRepository
from swirdle.logic.state import SwirdleWord

if TYPE_CHECKING:
    from starlette.applications import Starlette

TODAY = date(2026, 3, 14)
SIGN_IN_SECRET = "test-sign-in-secret"


def sign_in(
    app: Starlette,
    user_id: str,
    role: Role | None = Role.LEARNER,
    status: SubscriptionStatus = SubscriptionStatus.INACTIVE,
) -> dict[str, str]:
    """Create the member's profile (unless role is None) and return bearer auth headers."""
    if role is not None:
        profile = Profile(user_id=user_id, email=f"{user_id}@example.com", role=role, subscription_status=status)
        asyncio.run(app.state.profiles.upsert_profile(profile))
    session = app.state.session_store.create_session(user_id)
    return {"Authorization": f"Bearer {session.session_id}"}


def schedule_word(
    app: Starlette,
    word: str = "MERLOT",
    *,
    word_id: str = "w-merlot",
    day: date = TODAY,
    published: bool = True,
) -> SwirdleWord:
    swirdle_word = SwirdleWord(
        id=word_id,
        word=word,
        definition="A red grape variety",
        date_scheduled=day,
        hints=("Red grape", "Bordeaux staple", "Soft tannins"),
        is_published=published,
    )
    asyncio.run(SqliteSwirdleWordRepository(app.state.db).save_word(swirdle_word))
    return swirdle_word
