"""Helpers for reading request headers."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import TypeVar

T = TypeVar("T")


def _lookup(headers: Mapping[str, str | bytes], name: str) -> str | None:
    value = headers.get(name)
    if value is None:
        wanted = name.lower()
        value = next(
            (val for key, val in headers.items() if key.lower() == wanted), None
        )
    if value is None:
        return None
    if isinstance(value, (bytes, bytearray)):
        try:
            value = bytes(value).decode("ascii")
        except UnicodeDecodeError:
            return None
    if not all(ch == "\t" or 32 <= ord(ch) < 127 for ch in value):
        return None
    return value


def parse_header(
    headers: Mapping[str, str | bytes],
    name: str,
    convert: Callable[[str], T] = str,
) -> T | None:
    """Return the header converted with ``convert``, or None if absent or invalid."""
    value = _lookup(headers, name)
    if value is None:
        return None
    try:
        return convert(value)
    except (ValueError, TypeError):
        return None


def check_header(
    headers: Mapping[str, str | bytes],
    name: str,
    predicate: Callable[[str], bool],
) -> bool:
    """Return whether the header is present and satisfies ``predicate``."""
    value = _lookup(headers, name)
    if value is None:
        return False
    return bool(predicate(value))