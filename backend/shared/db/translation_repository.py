"""SQLite-backed translation repository."""

from __future__ import annotations

import asyncio
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from shared.dal.models import Translation
from shared.dal.translation_repository import TranslationRepository

if TYPE_CHECKING:
    from shared.db.connection import Database


class SqliteTranslationRepository(TranslationRepository):
    """SQLite implementation of TranslationRepository.

    Rows are plain columns rather than JSON blobs: every field is part of the
    lookup key or the translated value itself.
    """

    def __init__(self, db: Database) -> None:
        self._db = db
        self._lock = asyncio.Lock()

    async def upsert_translation(self, translation: Translation) -> None:
        """Insert or overwrite one translated field, stamping updated_at when missing."""
        updated_at = translation.updated_at or datetime.now(UTC)
        async with self._lock:
            self._db.connection.execute(
                "INSERT INTO translations "
                "(content_type, content_id, language_code, field_name, translated_text, updated_at) "
                "VALUES (?, ?, ?, ?, ?, ?) "
                "ON CONFLICT(content_type, content_id, language_code, field_name) DO UPDATE SET "
                "translated_text = excluded.translated_text, updated_at = excluded.updated_at",
                (
                    translation.content_type.value,
                    translation.content_id,
                    translation.language_code,
                    translation.field_name,
                    translation.translated_text,
                    updated_at.isoformat(),
                ),
            )
            self._db.connection.commit()

    async def get_translations(self, content_type: str, content_id: str, language_code: str) -> list[Translation]:
        rows = self._db.connection.execute(
            "SELECT content_type, content_id, language_code, field_name, translated_text, updated_at "
            "FROM translations WHERE content_type = ? AND content_id = ? AND language_code = ? "
            "ORDER BY field_name",
            (content_type, content_id, language_code),
        ).fetchall()
        return [
            Translation(
                content_type=row[0],
                content_id=row[1],
                language_code=row[2],
                field_name=row[3],
                translated_text=row[4],
                updated_at=datetime.fromisoformat(row[5]) if row[5] else None,
            )
            for row in rows
        ]

    async def delete_translation(
        self,
        content_type: str,
        content_id: str,
        language_code: str,
        field_name: str,
    ) -> bool:
        """Delete one translated field. Returns False when nothing matched."""
        async with self._lock:
            cursor = self._db.connection.execute(
                "DELETE FROM translations "
                "WHERE content_type = ? AND content_id = ? AND language_code = ? AND field_name = ?",
                (content_type, content_id, language_code, field_name),
            )
            self._db.connection.commit()
            return cursor.rowcount > 0
