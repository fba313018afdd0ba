"""Parsing of the headers a client sends when it creates an upload."""

from __future__ import annotations

import base64
import binascii
from collections.abc import Mapping

from resumable.headers import parse_header

_FINAL_PREFIX = "final;"


def _decode_value(encoded: str) -> str | None:
    try:
        raw = base64.b64decode(encoded, validate=True)
    except (binascii.Error, ValueError):
        return None
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        return None


def get_metadata(headers: Mapping[str, str | bytes]) -> dict[str, str] | None:
    """Read the ``Upload-Metadata`` header into a dictionary.

    Pairs are separated by commas; each pair is a key and a base64 encoded
    value separated by a space. Pairs without a value or whose value is not
    valid base64 encoded UTF-8 are skipped. Returns None when the header is
    absent or unreadable.
    """
    header = parse_header(headers, "Upload-Metadata")
    if header is None:
        return None
    metadata: dict[str, str] = {}
    for pair in header.split(","):
        key, sep, rest = pair.strip().partition(" ")
        if not sep:
            continue
        value = _decode_value(rest.split(" ", 1)[0])
        if value is not None:
            metadata[key] = value
    return metadata


def get_upload_parts(headers: Mapping[str, str | bytes]) -> list[str]:
    """Return the ids of the parts named by a ``final;`` ``Upload-Concat`` header.

    Each part is given as a URL; its id is the last path segment. Raises
    ``ValueError`` when the header is absent or does not describe a final upload.
    """
    header = parse_header(headers, "Upload-Concat")
    if header is None:
        raise ValueError("Upload-Concat header is missing")
    if not header.startswith(_FINAL_PREFIX):
        raise ValueError("Upload-Concat header does not describe a final upload")
    urls = header[len(_FINAL_PREFIX):]
    parts = (url.strip().split("/")[-1] for url in urls.split(" "))
    return [part for part in parts if part.strip()]