"""Abstract interface for content translation persistence."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from shared.dal.models import Translation


class TranslationRepository(ABC):
    """Translated field values, upserted on (content_type, content_id, language_code, field_name)."""

    @abstractmethod
    async def upsert_translation(self, translation: Translation) -> None: ...

    @abstractmethod
    async def get_translations(self, content_type: str, content_id: str, language_code: str) -> list[Translation]: ...

    @abstractmethod
    async def delete_translation(
        self,
        content_type: str,
        content_id: str,
        language_code: str,
        field_name: str,
    ) -> bool: ...
