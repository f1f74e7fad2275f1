"""
Localized content resolution.

Catalog rows carry each translatable field twice, as ``<field>_en`` and
``<field>_ar``. These helpers pick the variant for the visitor's locale
and fall back to the other language when the requested one is empty.

Dependencies: None (pure domain layer)
System role: Bilingual field selection for public responses and emails
"""

from collections.abc import Mapping
from typing import Any, Literal

Locale = Literal["en", "ar"]

SUPPORTED_LOCALES: tuple[str, ...] = ("en", "ar")
DEFAULT_LOCALE: Locale = "en"


def normalize_locale(value: Any) -> Locale:
    """Map any input to a supported locale; anything but "ar" is English."""
    if isinstance(value, str) and value.strip().lower() == "ar":
        return "ar"
    return DEFAULT_LOCALE


def _other(locale: Locale) -> Locale:
    return "en" if locale == "ar" else "ar"


def _read(record: Any, key: str) -> Any:
    if record is None:
        return None
    if isinstance(record, Mapping):
        return record.get(key)
    return getattr(record, key, None)


def get_localized_value(record: Any, field: str, locale: Any) -> Any:
    """
    Raw value of ``<field>_<locale>`` without fallback.

    Returns None when the key or attribute is absent.
    """
    return _read(record, f"{field}_{normalize_locale(locale)}")


def get_localized(record: Any, field: str, locale: Any) -> str:
    """
    Resolve a bilingual field to display text.

    Tries the requested locale, then the other one, then returns "".
    Values that are not non-empty strings count as missing. Never raises.

    Args:
        record: Mapping or object exposing ``<field>_en`` / ``<field>_ar``
        field: Base field name, e.g. "name" or "description"
        locale: "en" or "ar"; other values are treated as "en"

    Returns:
        str: Localized text, possibly empty

    Examples:
        >>> get_localized({"name_en": "Hilton", "name_ar": ""}, "name", "ar")
        'Hilton'
    """
    primary = normalize_locale(locale)
    for candidate in (primary, _other(primary)):
        value = _read(record, f"{field}_{candidate}")
        if isinstance(value, str) and value:
            return value
    return ""


def get_localized_list(record: Any, field: str, locale: Any) -> list:
    """List-valued variant of ``get_localized`` (amenities, inclusions, ...)."""
    primary = normalize_locale(locale)
    for candidate in (primary, _other(primary)):
        value = _read(record, f"{field}_{candidate}")
        if isinstance(value, list) and value:
            return list(value)
    return []
