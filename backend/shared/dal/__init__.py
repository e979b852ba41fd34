"""Data access layer: repository interfaces and shared persistence models."""

from shared.dal.models import ContentType, Translation
from shared.dal.profile_repository import ProfileRepository
from shared.dal.swirdle_repository import SwirdleAttemptRepository, SwirdleStatsRepository, SwirdleWordRepository
from shared.dal.translation_repository import TranslationRepository

__all__ = [
    "ContentType",
    "ProfileRepository",
    "SwirdleAttemptRepository",
    "SwirdleStatsRepository",
    "SwirdleWordRepository",
    "Translation",
    "TranslationRepository",
]
