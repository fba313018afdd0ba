# resumable

Building blocks for a server that speaks the tus resumable upload protocol
(version 1.0.0). The package has no runtime dependencies and needs
Python 3.10 or later.

## Install

    pip install .

For the test suite:

    pip install ".[test]"
    pytest

## Modules

### `resumable.extensions`

- `Extensions` — enum of protocol extensions. `str()` of a member gives its
  protocol name: `creation-defer-length`, `creation-with-upload`, `creation`,
  `termination`, `concatenation`, `getting`, `checksum`. Members compare in
  the order they are declared.
- `Extensions.from_str(value)` — the member with that name.
- `enum_from_str(enum_cls, value, kind)` — the member of any enum whose
  `str()` equals `value`. An unknown value raises `ValueError` whose message
  lists every accepted value.

### `resumable.dir_struct`

- `substr_time(dir_structure, time)` — replaces `{day}`, `{month}`, `{year}`,
  `{hour}` and `{minute}` in a template with the parts of `time` (without
  zero padding). Other placeholders are left as they are.
- `substr_now(dir_structure)` — the same with the current UTC time.

### `resumable.hashes`

- `checksum_verify(algo, data, checksum)` — whether the raw digest of `data`
  equals `checksum`. Supported algorithms: `md5`, `sha1`, `sha256`, `sha512`;
  any other raises `UnknownHashAlgorithm`.
- `verify_chunk_checksum(header, data)` — checks an `Upload-Checksum` value
  of the form `<algorithm> <base64 digest>` (as `str` or `bytes`). A value
  that is not visible ASCII, lacks the digest, or has invalid base64 raises
  `WrongHeaderValue`.
- `UnknownHashAlgorithm` and `WrongHeaderValue` derive from `ChecksumError`,
  itself a `ValueError`.

### `resumable.headers`

Both functions take a mapping of header names to `str` or `bytes` values;
names are matched case-insensitively when there is no exact match.

- `parse_header(headers, name, convert=str)` — the value passed through
  `convert`, or `None` if the header is absent, not visible ASCII, or
  `convert` raises `ValueError`/`TypeError`.
- `check_header(headers, name, predicate)` — `True` only if the header is
  present and `predicate(value)` is true.

### `resumable.storage`

- `Storage` — abstract interface: `prepare()`, `get_contents(file_info)`,
  `add_bytes(file_info, data)`, `create_file(file_info)`,
  `concat_files(file_info, parts_info)`, `remove_file(file_info)`. A
  `file_info` is any object with `id` and `path` attributes.
- `FileStorage(data_dir, dir_struct, force_fsync)` — keeps each upload as a
  file on disk; `str()` of it is `file_storage`.
  - `prepare()` creates `data_dir` if it is missing.
  - `data_file_path(file_id)` resolves `data_dir` to an absolute path,
    creates the subdirectory given by `dir_struct` (expanded with
    `substr_now`) and returns the path for the file.
  - `create_file` creates an empty file and returns its path; it raises
    `FileAlreadyExists` if the file is already there.
  - `add_bytes` appends to an existing file; `concat_files` appends the parts
    in order, creating the target if needed; with `force_fsync` the data is
    synced to disk after writing.
  - `get_contents` returns the file's bytes.
  - `remove_file` deletes the file.
- Errors derive from `StorageError`: `FileNotFound`, `FileAlreadyExists`,
  `UnableToWrite`, `UnableToRemove` (with a `file_id` attribute),
  `UnableToPrepareStorage`.
- `AvailableStores` — storages selectable by name. It has one member,
  `FILE_STORAGE` (`file-storage`). `AvailableStores.from_str(value)` parses a
  name; `get(data_dir, dir_structure, force_fsync)` builds a `FileStorage`.

### `resumable.creation`

- `get_metadata(headers)` — decodes `Upload-Metadata`
  (`key base64value,key base64value`) into a `dict`. Pairs without a value or
  whose value is not valid base64-encoded UTF-8 are skipped. Returns `None`
  when the header is absent.
- `get_upload_parts(headers)` — the part ids (last path segment of each URL)
  from an `Upload-Concat: final;...` header. Raises `ValueError` if the header
  is missing or not a final one.

### `resumable.core`

- `server_info_headers(extensions)` — the headers for an `OPTIONS` reply:
  `Tus-Extension` with the extensions comma-separated in the given order, and
  `Tus-Checksum-Algorithm: md5,sha1,sha256,sha512` when `Extensions.CHECKSUM`
  is among them.
- `final_concat_header(base_url, parts)` — the `Upload-Concat` value for a
  final upload, e.g. `final; /files/a /files/b`.

## Example

    from resumable.extensions import Extensions
    from resumable.hashes import verify_chunk_checksum
    from resumable.core import server_info_headers

    exts = [Extensions.from_str("creation"), Extensions.CHECKSUM]
    headers = server_info_headers(exts)
    # {'Tus-Extension': 'creation,checksum',
    #  'Tus-Checksum-Algorithm': 'md5,sha1,sha256,sha512'}

    verify_chunk_checksum("md5 XUFAKrxLKna5cZ2REBfFkg==", b"hello")  # True

## What this package does not do

It is a set of parts, not a server. It has no HTTP server, routing or
request handlers for the protocol's endpoints, no command to run, and no
store for upload records (offsets, lengths, metadata): callers keep that
themselves and hand `FileStorage` objects that carry an `id` and a `path`.
There are no notification hooks, no metrics, and no storage other than
files on the local disk.