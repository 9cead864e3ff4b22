"""Filesystem view over a directory of the host operating system."""

import errno
import logging
import os
from pathlib import Path
from typing import BinaryIO, Union

from fspath.domain.correlation_id import CorrelationLoggerAdapter
from fspath.domain.errors import (
    InvalidError,
    InvalidPathError,
    NotExistError,
    PathError,
    PermissionDeniedError,
)
from fspath.domain.file_types import DirEntry, FileInfo
from fspath.domain.paths import base, valid_path

DIRFS_LOGGER = CorrelationLoggerAdapter(logging.getLogger("fspath.dirfs"), {})


def _path_error(op: str, name: str, exc: OSError) -> PathError:
    """Translate an OSError into the matching PathError."""
    if isinstance(exc, FileNotFoundError):
        return NotExistError(op, name)
    if isinstance(exc, PermissionError):
        return PermissionDeniedError(op, name)
    if exc.errno == errno.EINVAL:
        return InvalidError(op, name)
    if isinstance(exc, (IsADirectoryError, NotADirectoryError)):
        return InvalidError(op, name, exc.strerror)
    DIRFS_LOGGER.warning(
        "Filesystem operation failed",
        extra={
            "event": "os_error",
            "op": op,
            "path": name,
            "errno": exc.errno,
        },
    )
    return PathError(op, name, exc.strerror or str(exc))


def _file_info(name: str, result: os.stat_result) -> FileInfo:
    return FileInfo(base(name), result.st_size, result.st_mode, result.st_mtime)


class DirFileHandle:
    """Open handle on a regular file of a DirFS."""

    def __init__(self, name: str, stream: BinaryIO) -> None:
        self._name = name
        self._stream = stream

    def read(self, size: int = -1) -> bytes:
        return self._stream.read(size)

    def stat(self) -> FileInfo:
        return _file_info(self._name, os.fstat(self._stream.fileno()))

    def close(self) -> None:
        self._stream.close()

    def __enter__(self) -> "DirFileHandle":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class DirDirHandle:
    """Open handle on a directory of a DirFS."""

    def __init__(self, fsys: "DirFS", name: str, info: FileInfo) -> None:
        self._fsys = fsys
        self._name = name
        self._info = info

    def read(self, size: int = -1) -> bytes:
        raise InvalidError("read", self._name, "is a directory")

    def read_dir(self) -> list[DirEntry]:
        return self._fsys.read_dir(self._name)

    def stat(self) -> FileInfo:
        return self._info

    def close(self) -> None:
        pass

    def __enter__(self) -> "DirDirHandle":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class DirFS:
    """View of the host directory tree rooted at ``root``.

    Like the operating system, open and stat follow symbolic links, including
    links pointing outside of ``root``. Wrap the view in RootFS to keep link
    resolution inside the directory.
    """

    def __init__(self, root: Union[str, os.PathLike]) -> None:
        self._root = Path(root)

    def __repr__(self) -> str:
        return f"DirFS({self._root.as_posix()!r})"

    @property
    def root(self) -> Path:
        return self._root

    def _host_path(self, op: str, name: str) -> Path:
        if not valid_path(name) or "\x00" in name:
            raise InvalidPathError(op, name)
        if name == ".":
            return self._root
        return self._root.joinpath(*name.split("/"))

    def open(self, name: str) -> Union[DirFileHandle, DirDirHandle]:
        target = self._host_path("open", name)
        try:
            info = _file_info(name, target.stat())
            if info.is_dir:
                return DirDirHandle(self, name, info)
            return DirFileHandle(name, target.open("rb"))
        except OSError as exc:
            raise _path_error("open", name, exc) from exc

    def stat(self, name: str) -> FileInfo:
        target = self._host_path("stat", name)
        try:
            return _file_info(name, target.stat())
        except OSError as exc:
            raise _path_error("stat", name, exc) from exc

    def read_dir(self, name: str) -> list[DirEntry]:
        target = self._host_path("readdir", name)
        try:
            with os.scandir(target) as scanner:
                entries = [
                    DirEntry(
                        entry.name,
                        _file_info(entry.name, entry.stat(follow_symlinks=False)),
                    )
                    for entry in scanner
                ]
        except OSError as exc:
            raise _path_error("readdir", name, exc) from exc
        return sorted(entries, key=lambda entry: entry.name)

    def read_file(self, name: str) -> bytes:
        target = self._host_path("read", name)
        try:
            return target.read_bytes()
        except OSError as exc:
            raise _path_error("read", name, exc) from exc

    def read_link(self, name: str) -> str:
        target = self._host_path("readlink", name)
        try:
            return os.readlink(target)
        except OSError as exc:
            raise _path_error("readlink", name, exc) from exc
