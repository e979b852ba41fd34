"""Explicit in-process cache of merged translations.

One instance is created at startup and injected into the translation
service, so tests can build, inspect, and reset their own.
"""

from collections import OrderedDict

type CacheKey = tuple[str, str, str]  # (content_type, content_id, language_code)
type TranslatedFields = dict[str, str]


class TranslationCache:
    """Map of (content type, content id, language) to merged field values.

    Writes through the translation service invalidate the affected key.
    When ``max_entries`` is set the oldest insertion is dropped once the
    bound is exceeded.
    """

    def __init__(self, max_entries: int | None = None) -> None:
        if max_entries is not None and max_entries < 1:
            raise ValueError(f"max_entries must be positive, got {max_entries}")
        self._max_entries = max_entries
        self._entries: OrderedDict[CacheKey, TranslatedFields] = OrderedDict()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def get(self, key: CacheKey) -> TranslatedFields | None:
        fields = self._entries.get(key)
        return dict(fields) if fields is not None else None

    def set(self, key: CacheKey, fields: TranslatedFields) -> None:
        self._entries[key] = dict(fields)
        self._entries.move_to_end(key)
        if self._max_entries is not None:
            while len(self._entries) > self._max_entries:
                self._entries.popitem(last=False)

    def invalidate(self, key: CacheKey) -> bool:
        """Drop one key. Returns True when something was cached under it."""
        return self._entries.pop(key, None) is not None

    def clear(self) -> None:
        self._entries.clear()
