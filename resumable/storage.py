"""Data storages that hold the bytes of uploads."""

from __future__ import annotations

import abc
import logging
import os
import shutil
from enum import Enum
from pathlib import Path
from typing import Iterable, Optional, Protocol

from resumable.dir_struct import substr_now
from resumable.extensions import enum_from_str

logger = logging.getLogger(__name__)


class _FileInfo(Protocol):
    id: str
    path: Optional[str]


class StorageError(Exception):
    """Base class for storage failures."""


class FileNotFound(StorageError):
    """The upload's data file cannot be found."""


class FileAlreadyExists(StorageError):
    """A data file for the upload already exists."""


class UnableToWrite(StorageError):
    """Data cannot be written to the storage."""


class UnableToRemove(StorageError):
    """An upload's data file cannot be removed."""

    def __init__(self, file_id: str) -> None:
        super().__init__(file_id)
        self.file_id = file_id


class UnableToPrepareStorage(StorageError):
    """The storage cannot be made ready for use."""


class Storage(abc.ABC):
    """Interface of a storage for upload data."""

    @abc.abstractmethod
    def prepare(self) -> None:
        """Check the configuration and make the storage ready for use."""

    @abc.abstractmethod
    def get_contents(self, file_info: _FileInfo) -> bytes:
        """Return the stored contents of an upload."""

    @abc.abstractmethod
    def add_bytes(self, file_info: _FileInfo, data: bytes) -> None:
        """Append ``data`` to the upload's file."""

    @abc.abstractmethod
    def create_file(self, file_info: _FileInfo) -> str:
        """Create an empty file for the upload and return its path."""

    @abc.abstractmethod
    def concat_files(
        self, file_info: _FileInfo, parts_info: Iterable[_FileInfo]
    ) -> None:
        """Append the contents of every part, in order, to the upload's file."""

    @abc.abstractmethod
    def remove_file(self, file_info: _FileInfo) -> None:
        """Remove the upload's data."""


class FileStorage(Storage):
    """Storage that keeps uploads as files on the local filesystem."""

    def __init__(self, data_dir: str | os.PathLike, dir_struct: str, force_fsync: bool) -> None:
        self.data_dir = Path(data_dir)
        self.dir_struct = dir_struct
        self.force_fsync = force_fsync

    def __str__(self) -> str:
        return "file_storage"

    def __repr__(self) -> str:
        return (
            f"FileStorage(data_dir={str(self.data_dir)!r}, "
            f"dir_struct={self.dir_struct!r}, force_fsync={self.force_fsync!r})"
        )

    def data_file_path(self, file_id: str) -> Path:
        """Return the absolute path for a new file, creating its directory."""
        try:
            base = self.data_dir.resolve(strict=True)
        except OSError as err:
            logger.error("%s", err)
            raise UnableToWrite(str(err)) from err
        directory = base / substr_now(self.dir_struct)
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as err:
            logger.error("%s", err)
            raise UnableToWrite(str(err)) from err
        return directory / file_id

    def prepare(self) -> None:
        if not self.data_dir.exists():
            try:
                self.data_dir.mkdir(parents=True, exist_ok=True)
            except OSError as err:
                raise UnableToPrepareStorage(str(err)) from err

    def get_contents(self, file_info: _FileInfo) -> bytes:
        if file_info.path is None:
            raise FileNotFound(file_info.id)
        try:
            return Path(file_info.path).read_bytes()
        except OSError as err:
            logger.error("%r", err)
            raise FileNotFound(file_info.id) from err

    def _sync(self, handle) -> None:
        handle.flush()
        if self.force_fsync:
            os.fsync(handle.fileno())

    def add_bytes(self, file_info: _FileInfo, data: bytes) -> None:
        if file_info.path is None:
            raise FileNotFound(file_info.id)
        try:
            fd = os.open(file_info.path, os.O_WRONLY | os.O_APPEND)
        except OSError as err:
            logger.error("%r", err)
            raise UnableToWrite(str(err)) from err
        with os.fdopen(fd, "ab") as handle:
            handle.write(data)
            self._sync(handle)

    def create_file(self, file_info: _FileInfo) -> str:
        file_path = self.data_file_path(file_info.id)
        try:
            with open(file_path, "xb"):
                pass
        except OSError as err:
            logger.error("%r", err)
            raise FileAlreadyExists(str(file_path)) from err
        return str(file_path)

    def concat_files(
        self, file_info: _FileInfo, parts_info: Iterable[_FileInfo]
    ) -> None:
        if file_info.path is None:
            raise FileNotFound(file_info.id)
        try:
            target = open(file_info.path, "ab")
        except OSError as err:
            logger.error("%r", err)
            raise UnableToWrite(str(err)) from err
        with target:
            for part in parts_info:
                if part.path is None:
                    raise FileNotFound(part.id)
                with open(part.path, "rb") as source:
                    shutil.copyfileobj(source, target)
            self._sync(target)

    def remove_file(self, file_info: _FileInfo) -> None:
        if file_info.path is None:
            raise FileNotFound(file_info.id)
        data_path = Path(file_info.path)
        if not data_path.exists():
            raise FileNotFound(file_info.id)
        try:
            data_path.unlink()
        except OSError as err:
            logger.error("%r", err)
            raise UnableToRemove(file_info.id) from err


class AvailableStores(Enum):
    """Storage implementations that can be selected by name."""

    FILE_STORAGE = "file-storage"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_str(cls, value: str) -> "AvailableStores":
        """Parse a storage from its configuration name."""
        return enum_from_str(cls, value, "storage")

    def get(
        self, data_dir: str | os.PathLike, dir_structure: str, force_fsync: bool
    ) -> Storage:
        """Build the storage this member stands for."""
        return FileStorage(data_dir, dir_structure, force_fsync)