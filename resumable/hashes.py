"""Verification of chunk checksums sent in the Upload-Checksum header."""

from __future__ import annotations

import base64
import binascii
import hashlib
import logging

logger = logging.getLogger(__name__)

_ALGORITHMS = {
    "sha1": hashlib.sha1,
    "sha256": hashlib.sha256,
    "sha512": hashlib.sha512,
    "md5": hashlib.md5,
}


class ChecksumError(ValueError):
    """Base class for checksum verification failures."""


class UnknownHashAlgorithm(ChecksumError):
    """The requested hash algorithm is not supported."""


class WrongHeaderValue(ChecksumError):
    """The checksum header cannot be decoded."""


def checksum_verify(algo: str, data: bytes, checksum: bytes) -> bool:
    """Return whether the digest of ``data`` under ``algo`` equals ``checksum``."""
    try:
        factory = _ALGORITHMS[algo]
    except KeyError:
        raise UnknownHashAlgorithm(algo) from None
    return factory(data).digest() == bytes(checksum)


def _header_str(header: str | bytes) -> str:
    if isinstance(header, (bytes, bytearray)):
        try:
            text = bytes(header).decode("ascii")
        except UnicodeDecodeError:
            raise WrongHeaderValue("header is not visible ASCII") from None
    else:
        text = header
    if not all(ch == "\t" or 32 <= ord(ch) < 127 for ch in text):
        raise WrongHeaderValue("header is not visible ASCII")
    return text


def verify_chunk_checksum(header: str | bytes, data: bytes) -> bool:
    """Check ``data`` against a header of the form ``<algorithm> <base64 digest>``.

    Raises ``WrongHeaderValue`` for malformed headers and
    ``UnknownHashAlgorithm`` for unsupported algorithms.
    """
    try:
        value = _header_str(header)
    except WrongHeaderValue:
        logger.error("Can't decode checksum header.")
        raise
    parts = value.split(" ")
    if len(parts) < 2:
        raise WrongHeaderValue("expected '<algorithm> <checksum>'")
    algo, encoded = parts[0], parts[1]
    try:
        checksum = base64.b64decode(encoded, validate=True)
    except (binascii.Error, ValueError):
        logger.error("Can't decode checksum value")
        raise WrongHeaderValue("checksum is not valid base64") from None
    return checksum_verify(algo, data, checksum)