"""Tests for translation text helpers."""

import pytest

from shared.i18n.text import interpolate, pluralize, text_direction


class TestInterpolate:
    def test_replaces_known_placeholders(self):
        assert interpolate("Streak: {count} days", {"count": 4}) == "Streak: 4 days"

    def test_unknown_placeholders_left_verbatim(self):
        assert interpolate("Hello {name}, {missing}", {"name": "Ana"}) == "Hello Ana, {missing}"

    def test_no_variables(self):
        assert interpolate("Hello {name}") == "Hello {name}"


class TestPluralize:
    @pytest.mark.parametrize(("count", "expected"), [(0, "guesses"), (1, "guess"), (2, "guesses")])
    def test_forms(self, count, expected):
        assert pluralize(count, "guess", "guesses") == expected


class TestTextDirection:
    @pytest.mark.parametrize("language", ["ar", "he", "fa", "ur", "AR", "ar-SA"])
    def test_rtl(self, language):
        assert text_direction(language) == "rtl"

    @pytest.mark.parametrize("language", ["en", "es", "fr", "pt-BR"])
    def test_ltr(self, language):
        assert text_direction(language) == "ltr"
