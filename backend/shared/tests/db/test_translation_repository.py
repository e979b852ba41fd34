"""Tests for SqliteTranslationRepository."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

import pytest

from shared.dal.models import ContentType, Translation
from shared.db.connection import Database
from shared.db.translation_repository import SqliteTranslationRepository

if TYPE_CHECKING:
    from pathlib import Path


def _tr(field: str = "title", text: str = "Introducción al vino", language: str = "es", **kwargs) -> Translation:
    return Translation(
        content_type=ContentType.COURSE,
        content_id="c1",
        language_code=language,
        field_name=field,
        translated_text=text,
        **kwargs,
    )


@pytest.fixture
def repo(tmp_path: Path):
    db = Database(tmp_path / "test.db")
    db.connect()
    yield SqliteTranslationRepository(db)
    db.close()


class TestTranslationRepository:
    async def test_upsert_stamps_updated_at(self, repo: SqliteTranslationRepository) -> None:
        await repo.upsert_translation(_tr())
        [row] = await repo.get_translations("course", "c1", "es")
        assert row.translated_text == "Introducción al vino"
        assert row.content_type == ContentType.COURSE
        assert row.updated_at is not None

    async def test_explicit_updated_at_kept(self, repo: SqliteTranslationRepository) -> None:
        stamp = datetime(2026, 2, 1, 12, tzinfo=UTC)
        await repo.upsert_translation(_tr(updated_at=stamp))
        [row] = await repo.get_translations("course", "c1", "es")
        assert row.updated_at == stamp

    async def test_upsert_overwrites_same_field(self, repo: SqliteTranslationRepository) -> None:
        await repo.upsert_translation(_tr())
        await repo.upsert_translation(_tr(text="Curso de vino"))
        rows = await repo.get_translations("course", "c1", "es")
        assert [r.translated_text for r in rows] == ["Curso de vino"]

    async def test_rows_are_scoped_by_language_and_sorted(self, repo: SqliteTranslationRepository) -> None:
        await repo.upsert_translation(_tr("title"))
        await repo.upsert_translation(_tr("description", "Aprende lo básico"))
        await repo.upsert_translation(_tr("title", "Introduction au vin", language="fr"))
        rows = await repo.get_translations("course", "c1", "es")
        assert [r.field_name for r in rows] == ["description", "title"]
        assert await repo.get_translations("course", "c1", "de") == []

    async def test_delete(self, repo: SqliteTranslationRepository) -> None:
        await repo.upsert_translation(_tr())
        assert await repo.delete_translation("course", "c1", "es", "title") is True
        assert await repo.get_translations("course", "c1", "es") == []
        assert await repo.delete_translation("course", "c1", "es", "title") is False
