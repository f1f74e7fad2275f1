"""
Lenient field types for admin form payloads.

The admin forms post loosely typed JSON: numbers arrive as strings,
optional text arrives as "", lists may contain blanks. These annotated
types normalize such input instead of rejecting it, so business rules
(required names, defaults) are decided by the services.

Dependencies: pydantic
System role: Input normalization shared by all admin schemas
"""

import math
import uuid
from datetime import datetime
from typing import Annotated, Any

from pydantic import AfterValidator, BeforeValidator


def trim_text(value: Any) -> str | None:
    """Trimmed string, or None for blanks and non-strings."""
    if not isinstance(value, str):
        return None
    return value.strip() or None


def string_list(value: Any) -> list[str]:
    """Trimmed non-empty strings from a list; anything else becomes []."""
    if not isinstance(value, list):
        return []
    items = []
    for item in value:
        if item is None or isinstance(item, (dict, list)):
            continue
        text = str(item).strip()
        if text:
            items.append(text)
    return items


def lenient_float(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str) and value.strip():
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def lenient_int(value: Any) -> int | None:
    number = lenient_float(value)
    return int(number) if number is not None else None


def flag(value: Any) -> bool | None:
    if value is None:
        return None
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "on", "yes")
    return bool(value)


def non_negative(value: float | int | None):
    return value if value is None or value >= 0 else None


def at_least_one(value: int | None) -> int | None:
    return value if value is None or value >= 1 else None


def rating_range(value: int | None) -> int | None:
    return value if value is None or 1 <= value <= 5 else None


def blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


Text = Annotated[str | None, BeforeValidator(trim_text)]
TextList = Annotated[list[str] | None, BeforeValidator(string_list)]
Amount = Annotated[float | None, BeforeValidator(lenient_float), AfterValidator(non_negative)]
Count = Annotated[int | None, BeforeValidator(lenient_int), AfterValidator(at_least_one)]
Rating = Annotated[int | None, BeforeValidator(lenient_int), AfterValidator(rating_range)]
SortOrder = Annotated[int | None, BeforeValidator(lenient_int)]
Flag = Annotated[bool | None, BeforeValidator(flag)]
OptionalDateTime = Annotated[datetime | None, BeforeValidator(blank_to_none)]
Reference = Annotated[uuid.UUID | None, BeforeValidator(blank_to_none)]


def loose_text(value: Any) -> str | None:
    """Like trim_text, but numbers are kept as their string form."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return trim_text(value)


LooseText = Annotated[str | None, BeforeValidator(loose_text)]
