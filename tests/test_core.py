import pytest

from resumable.core import final_concat_header, server_info_headers
from resumable.creation import get_upload_parts
from resumable.extensions import Extensions


def test_server_info_lists_extensions():
    headers = server_info_headers(
        [Extensions.CREATION, Extensions.CONCATENATION, Extensions.TERMINATION]
    )
    extensions = headers["Tus-Extension"]
    assert str(Extensions.CREATION) in extensions
    assert str(Extensions.CONCATENATION) in extensions
    assert str(Extensions.TERMINATION) in extensions


def test_server_info_keeps_order():
    given = [Extensions.TERMINATION, Extensions.CREATION, Extensions.GETTING]
    headers = server_info_headers(given)
    assert headers["Tus-Extension"].split(",") == [str(ext) for ext in given]


def test_server_info_without_checksum_has_no_algorithms():
    headers = server_info_headers([Extensions.CREATION])
    assert "Tus-Checksum-Algorithm" not in headers


def test_server_info_with_checksum_lists_algorithms():
    headers = server_info_headers([Extensions.CHECKSUM, Extensions.CREATION])
    assert headers["Tus-Checksum-Algorithm"] == "md5,sha1,sha256,sha512"


def test_server_info_empty():
    assert server_info_headers([]) == {"Tus-Extension": ""}


def test_server_info_accepts_generator():
    headers = server_info_headers(ext for ext in Extensions)
    assert headers["Tus-Extension"].split(",") == [ext.value for ext in Extensions]
    assert "Tus-Checksum-Algorithm" in headers


def test_final_concat_header_value():
    assert (
        final_concat_header("files", ["test1", "test2"])
        == "final; /files/test1 /files/test2"
    )


def test_final_concat_header_prefix():
    header = final_concat_header("files", ["abc"])
    assert header.startswith("final; ")


@pytest.mark.parametrize("base_url", ["files", "/files", "/files/", "api/v1"])
@pytest.mark.parametrize("parts", [["a"], ["a", "b"], ["x1", "y2", "z3"]])
def test_final_concat_header_round_trip(base_url, parts):
    header = final_concat_header(base_url, parts)
    assert get_upload_parts({"Upload-Concat": header}) == parts


def test_final_concat_header_part_count():
    parts = ["one", "two", "three"]
    header = final_concat_header("files", parts)
    urls = header[len("final; "):].split(" ")
    assert len(urls) == len(parts)
    assert [url.rsplit("/", 1)[-1] for url in urls] == parts