"""Translated content lookup and admin edits, backed by a repository and an injected cache."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from shared.dal.models import ContentType, Translation

if TYPE_CHECKING:
    from collections.abc import Mapping

    from shared.dal.translation_repository import TranslationRepository
    from shared.i18n.cache import TranslationCache

logger = structlog.get_logger()


class TranslationService:
    """Merge stored translations over default (source language) field values."""

    def __init__(
        self,
        repo: TranslationRepository,
        cache: TranslationCache,
        *,
        default_language: str = "en",
    ) -> None:
        self._repo = repo
        self._cache = cache
        self._default_language = default_language

    async def get_translated_content(
        self,
        content_type: ContentType,
        content_id: str,
        language: str,
        defaults: Mapping[str, str],
    ) -> dict[str, str]:
        """Return ``defaults`` with any stored translations for ``language`` laid over them.

        Only the stored rows are cached; ``defaults`` are merged per call. Lookups
        with no stored rows are cached too, so a missing translation is fetched once.
        """
        if language == self._default_language or not content_id:
            return dict(defaults)

        key = (ContentType(content_type).value, content_id, language)
        stored = self._cache.get(key)
        if stored is None:
            rows = await self._repo.get_translations(key[0], content_id, language)
            stored = {row.field_name: row.translated_text for row in rows}
            self._cache.set(key, stored)
            logger.debug(
                "translations loaded", content_type=key[0], content_id=content_id, language=language, fields=len(rows)
            )
        return {**defaults, **stored}

    async def save_translation(self, translation: Translation) -> None:
        await self._repo.upsert_translation(translation)
        self._cache.invalidate((translation.content_type.value, translation.content_id, translation.language_code))
        logger.info(
            "translation saved",
            content_type=translation.content_type,
            content_id=translation.content_id,
            language=translation.language_code,
            field=translation.field_name,
        )

    async def delete_translation(
        self,
        content_type: ContentType,
        content_id: str,
        language_code: str,
        field_name: str,
    ) -> bool:
        content_type = ContentType(content_type)
        deleted = await self._repo.delete_translation(content_type.value, content_id, language_code, field_name)
        self._cache.invalidate((content_type.value, content_id, language_code))
        if not deleted:
            logger.warning(
                "translation delete had no effect",
                content_type=content_type,
                content_id=content_id,
                language=language_code,
                field=field_name,
            )
        return deleted
