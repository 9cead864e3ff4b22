"""Sub-views rebasing a filesystem view onto one of its directories."""

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from fspath.domain.capabilities import FileSystem, ReadLinkFileSystem, SubFileSystem
from fspath.domain.correlation_id import CorrelationLoggerAdapter
from fspath.domain.errors import InvalidPathError, PathError, UnsupportedError
from fspath.domain.file_types import DirEntry, File, FileInfo
from fspath.domain.paths import join, valid_path
from fspath.views import operations

SUBVIEW_LOGGER = CorrelationLoggerAdapter(logging.getLogger("fspath.subview"), {})


def subview(fsys: FileSystem, directory: str) -> FileSystem:
    """Return a view of fsys rooted at directory.

    Views implementing their own ``sub`` are delegated to; any other view is
    wrapped in a SubView.
    """
    if not valid_path(directory):
        raise InvalidPathError("sub", directory)
    if directory == ".":
        return fsys
    if isinstance(fsys, SubFileSystem):
        return fsys.sub(directory)
    if SUBVIEW_LOGGER.logger.isEnabledFor(logging.DEBUG):
        SUBVIEW_LOGGER.debug(
            "Sub-view created",
            extra={
                "event": "subview_created",
                "path": directory,
                "view": type(fsys).__name__,
            },
        )
    return SubView(fsys, directory)


class SubView:
    """View forwarding every operation to ``directory/name`` on the parent view.

    Errors raised by the parent view are reported relative to the sub-view.
    """

    def __init__(self, fsys: FileSystem, directory: str) -> None:
        self._fsys = fsys
        self._dir = directory

    def __repr__(self) -> str:
        return f"SubView({self._fsys!r}, {self._dir!r})"

    @property
    def directory(self) -> str:
        return self._dir

    def _full_name(self, op: str, name: str) -> str:
        if not valid_path(name):
            raise InvalidPathError(op, name)
        return join(self._dir, name)

    def _shorten(self, name: str) -> Optional[str]:
        if name == self._dir:
            return "."
        prefix = self._dir + "/"
        if name.startswith(prefix) and len(name) > len(prefix):
            return name[len(prefix) :]
        return None

    @contextmanager
    def _relative_errors(self) -> Iterator[None]:
        try:
            yield
        except PathError as err:
            short = self._shorten(err.path)
            if short is not None:
                err.path = short
            raise

    def open(self, name: str) -> File:
        full = self._full_name("open", name)
        with self._relative_errors():
            return self._fsys.open(full)

    def stat(self, name: str) -> FileInfo:
        full = self._full_name("stat", name)
        with self._relative_errors():
            return operations.stat(self._fsys, full)

    def read_dir(self, name: str) -> list[DirEntry]:
        full = self._full_name("read", name)
        with self._relative_errors():
            return operations.read_dir(self._fsys, full)

    def read_file(self, name: str) -> bytes:
        full = self._full_name("read", name)
        with self._relative_errors():
            return operations.read_file(self._fsys, full)

    def read_link(self, name: str) -> str:
        full = self._full_name("readlink", name)
        if not isinstance(self._fsys, ReadLinkFileSystem):
            raise UnsupportedError(
                "readlink",
                name,
                "read_link called on file system which does not support "
                f"symbolic links: {type(self._fsys).__name__}",
            )
        with self._relative_errors():
            return self._fsys.read_link(full)

    def sub(self, directory: str) -> FileSystem:
        if directory == ".":
            return self
        full = self._full_name("sub", directory)
        return SubView(self._fsys, full)
