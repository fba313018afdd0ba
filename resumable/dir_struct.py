"""Expansion of directory templates with date and time parts."""

from __future__ import annotations

from datetime import datetime, timezone


def substr_time(dir_structure: str, time: datetime) -> str:
    """Fill ``{day}``, ``{month}``, ``{year}``, ``{hour}`` and ``{minute}``."""
    replacements = (
        ("{day}", time.day),
        ("{month}", time.month),
        ("{year}", time.year),
        ("{hour}", time.hour),
        ("{minute}", time.minute),
    )
    result = dir_structure
    for placeholder, number in replacements:
        result = result.replace(placeholder, str(number))
    return result


def substr_now(dir_structure: str) -> str:
    """Fill the template with the current UTC time."""
    return substr_time(dir_structure, datetime.now(timezone.utc))