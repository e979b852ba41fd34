"""Translation of course, module, quiz, and community content."""

from shared.i18n.cache import TranslationCache
from shared.i18n.service import TranslationService
from shared.i18n.text import interpolate, pluralize, text_direction

__all__ = [
    "TranslationCache",
    "TranslationService",
    "interpolate",
    "pluralize",
    "text_direction",
]
