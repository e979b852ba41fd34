"""Validation helpers for settings read from the environment."""

import json


def parse_string_list(value: str | list[str], *, allow_empty: bool = False) -> list[str]:
    """Parse a list of strings given as a list, a JSON array, or comma-separated text.

    Raises ValueError for malformed JSON, and for empty input unless
    ``allow_empty`` is set.
    """
    if isinstance(value, list):
        items = value
    else:
        stripped = value.strip()
        if stripped.startswith("["):
            try:
                parsed = json.loads(stripped)
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid JSON array: {e}") from e
            if not isinstance(parsed, list) or not all(isinstance(item, str) for item in parsed):
                raise ValueError("JSON value must be an array of strings")
            items = parsed
        else:
            items = [part.strip() for part in stripped.split(",") if part.strip()]

    if not allow_empty and not items:
        raise ValueError("String list value must not be empty")
    return items


def parse_language_code(value: str) -> str:
    """Normalize a language code such as ``"EN"`` or ``"pt-BR"`` to lower case."""
    code = value.strip().lower()
    if not 2 <= len(code) <= 10 or not code.replace("-", "").isalpha():
        raise ValueError(f"Invalid language code: {value!r}")
    return code
