"""SQLite-backed profile repository."""

from __future__ import annotations

import asyncio
import json
from typing import TYPE_CHECKING

from shared.auth.models import Profile
from shared.dal.profile_repository import ProfileRepository

if TYPE_CHECKING:
    from shared.db.connection import Database


class SqliteProfileRepository(ProfileRepository):
    """SQLite implementation of ProfileRepository storing profiles as JSON."""

    def __init__(self, db: Database) -> None:
        self._db = db
        self._lock = asyncio.Lock()

    async def upsert_profile(self, profile: Profile) -> None:
        async with self._lock:
            self._db.connection.execute(
                "INSERT INTO profiles (id, data) VALUES (?, ?) ON CONFLICT(id) DO UPDATE SET data = excluded.data",
                (profile.user_id, profile.model_dump_json()),
            )
            self._db.connection.commit()

    async def get_profile(self, user_id: str) -> Profile | None:
        row = self._db.connection.execute("SELECT data FROM profiles WHERE id = ?", (user_id,)).fetchone()
        if row is None:
            return None
        return Profile.model_validate(json.loads(row[0]))
