"""Header values produced by the core protocol endpoints."""

from __future__ import annotations

from collections.abc import Iterable

from resumable.extensions import Extensions

CHECKSUM_ALGORITHMS = "md5,sha1,sha256,sha512"


def server_info_headers(extensions: Iterable[Extensions]) -> dict[str, str]:
    """Return the headers announcing the server's enabled extensions.

    ``Tus-Extension`` lists the extensions in the given order, separated by
    commas. ``Tus-Checksum-Algorithm`` is added when checksums are enabled.
    """
    enabled = list(extensions)
    headers = {"Tus-Extension": ",".join(str(ext) for ext in enabled)}
    if Extensions.CHECKSUM in enabled:
        headers["Tus-Checksum-Algorithm"] = CHECKSUM_ALGORITHMS
    return headers


def final_concat_header(base_url: str, parts: Iterable[str]) -> str:
    """Return the ``Upload-Concat`` value describing a final upload.

    Every part id becomes a URL under ``base_url``; the URLs are joined
    with spaces after the ``final;`` marker.
    """
    base = base_url.strip("/")
    urls = " ".join(f"/{base}/{part}" for part in parts)
    return f"final; {urls}"