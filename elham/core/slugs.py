"""
URL slug helpers for events and blog posts.

Dependencies: re (stdlib)
System role: Slug derivation
"""

import re
from typing import Awaitable, Callable

_WHITESPACE = re.compile(r"\s+")
_DISALLOWED = re.compile(r"[^a-z0-9-]")
_DASHES = re.compile(r"-{2,}")


def slugify(value: str | None) -> str:
    """
    Turn free text into a URL slug.

    Lowercases, trims, replaces whitespace runs with "-", drops every
    character outside [a-z0-9-] and tidies the dashes left behind.
    Arabic-only input therefore yields "".

    Examples:
        >>> slugify("  Umrah in Ramadan ")
        'umrah-in-ramadan'
        >>> slugify("Hajj 2025!")
        'hajj-2025'
    """
    if not value:
        return ""
    slug = _WHITESPACE.sub("-", value.strip().lower())
    slug = _DISALLOWED.sub("", slug)
    return _DASHES.sub("-", slug).strip("-")


async def unique_slug(base: str, is_taken: Callable[[str], Awaitable[bool]]) -> str:
    """
    Append -2, -3, ... to ``base`` until ``is_taken`` reports it free.

    Args:
        base: Already slugified candidate
        is_taken: Async predicate checking the candidate against storage

    Returns:
        str: First free slug
    """
    candidate = base
    suffix = 2
    while await is_taken(candidate):
        candidate = f"{base}-{suffix}"
        suffix += 1
    return candidate
