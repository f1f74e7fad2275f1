"""
Tests for the localized content resolver.

System role: Verification of bilingual field selection
"""

from types import SimpleNamespace

import pytest

from elham.core.localization import (
    get_localized,
    get_localized_list,
    get_localized_value,
    normalize_locale,
)


class TestGetLocalized:
    """Test suite for get_localized()."""

    def test_returns_requested_locale(self) -> None:
        record = {"name_en": "Hilton Suites", "name_ar": "هيلتون سويتس"}

        assert get_localized(record, "name", "en") == "Hilton Suites"
        assert get_localized(record, "name", "ar") == "هيلتون سويتس"

    def test_falls_back_to_other_locale_when_empty(self) -> None:
        record = {"name_en": "Hilton", "name_ar": ""}

        assert get_localized(record, "name", "ar") == "Hilton"

    def test_falls_back_from_english_to_arabic(self) -> None:
        record = {"name_en": None, "name_ar": "فندق"}

        assert get_localized(record, "name", "en") == "فندق"

    def test_returns_empty_string_when_both_missing(self) -> None:
        assert get_localized({}, "name", "en") == ""
        assert get_localized({"name_en": "", "name_ar": None}, "name", "ar") == ""

    def test_non_string_values_count_as_missing(self) -> None:
        record = {"name_en": 42, "name_ar": "اسم"}

        assert get_localized(record, "name", "en") == "اسم"

    def test_unknown_locale_is_treated_as_english(self) -> None:
        record = {"title_en": "Umrah", "title_ar": "عمرة"}

        assert get_localized(record, "title", "fr") == "Umrah"
        assert get_localized(record, "title", None) == "Umrah"

    def test_reads_object_attributes(self) -> None:
        row = SimpleNamespace(description_en="Near the Haram", description_ar=None)

        assert get_localized(row, "description", "ar") == "Near the Haram"

    def test_none_record_never_raises(self) -> None:
        assert get_localized(None, "name", "en") == ""


class TestLocaleHelpers:
    """Test suite for normalize_locale(), get_localized_value() and get_localized_list()."""

    @pytest.mark.parametrize(
        "value, expected",
        [("ar", "ar"), (" AR ", "ar"), ("en", "en"), ("de", "en"), ("", "en"), (None, "en")],
    )
    def test_normalize_locale(self, value, expected) -> None:
        assert normalize_locale(value) == expected

    def test_get_localized_value_has_no_fallback(self) -> None:
        record = {"name_en": "Hilton", "name_ar": ""}

        assert get_localized_value(record, "name", "ar") == ""
        assert get_localized_value(record, "missing", "en") is None

    def test_get_localized_list_falls_back(self) -> None:
        record = {"inclusions_en": ["Visa", "Hotel"], "inclusions_ar": []}

        assert get_localized_list(record, "inclusions", "ar") == ["Visa", "Hotel"]
        assert get_localized_list({}, "inclusions", "en") == []
