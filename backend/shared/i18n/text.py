"""Small text helpers for translated UI strings."""

import re
from collections.abc import Mapping

_PLACEHOLDER = re.compile(r"\{(\w+)\}")

RTL_LANGUAGES = frozenset({"ar", "he", "fa", "ur"})


def interpolate(template: str, variables: Mapping[str, str | int | float] | None = None) -> str:
    """Replace ``{name}`` placeholders; unknown names are left verbatim."""
    values = variables or {}

    def _replace(match: re.Match[str]) -> str:
        key = match.group(1)
        if key not in values:
            return match.group(0)
        return str(values[key])

    return _PLACEHOLDER.sub(_replace, template)


def pluralize(count: int, singular: str, plural: str) -> str:
    return singular if count == 1 else plural


def text_direction(language: str) -> str:
    return "rtl" if language.split("-")[0].lower() in RTL_LANGUAGES else "ltr"
