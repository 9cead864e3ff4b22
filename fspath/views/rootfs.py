"""Filesystem operations resolved through lookup, and the root-confined view."""

import logging

from fspath.domain.capabilities import FileSystem, ReadLinkFileSystem
from fspath.domain.correlation_id import CorrelationLoggerAdapter
from fspath.domain.errors import PathError, UnsupportedError
from fspath.domain.file_types import DirEntry, File, FileInfo
from fspath.views import operations
from fspath.views.lookup import lookup
from fspath.views.subview import subview

ROOTFS_LOGGER = CorrelationLoggerAdapter(logging.getLogger("fspath.rootfs"), {})


def open_file(fsys: FileSystem, name: str) -> File:
    """Open name in fsys after resolving symbolic links."""
    view, base_name = lookup(fsys, name)
    return view.open(base_name)


def stat(fsys: FileSystem, name: str) -> FileInfo:
    """Describe name in fsys after resolving symbolic links."""
    view, base_name = lookup(fsys, name)
    return operations.stat(view, base_name)


def sub(fsys: FileSystem, name: str) -> FileSystem:
    """Return a view of the directory name after resolving symbolic links."""
    view, base_name = lookup(fsys, name)
    return subview(view, base_name)


def read_dir(fsys: FileSystem, name: str) -> list[DirEntry]:
    """List the directory name in fsys after resolving symbolic links."""
    view, base_name = lookup(fsys, name)
    return operations.read_dir(view, base_name)


def read_file(fsys: FileSystem, name: str) -> bytes:
    """Read the file name in fsys after resolving symbolic links."""
    view, base_name = lookup(fsys, name)
    return operations.read_file(view, base_name)


def read_link(fsys: FileSystem, name: str) -> str:
    """Read the link name in fsys after resolving the links leading to it."""
    view, base_name = lookup(fsys, name)
    if not isinstance(view, ReadLinkFileSystem):
        raise UnsupportedError(
            "readlink",
            base_name,
            "symbolic link found in file system which does not support "
            f"symbolic links: {type(view).__name__}",
        )
    return view.read_link(base_name)


class RootFS:
    """View resolving every path with lookup before accessing it.

    Symbolic links are followed but never escape the root of the wrapped
    view, which makes RootFS suitable to hand a read-only directory tree to
    untrusted code. See lookup for the concurrency caveat.
    """

    def __init__(self, fsys: FileSystem) -> None:
        self._fsys = fsys

    def __repr__(self) -> str:
        return f"RootFS({self._fsys!r})"

    @property
    def wrapped(self) -> FileSystem:
        return self._fsys

    def open(self, name: str) -> File:
        return self._logged("open", name, open_file)

    def stat(self, name: str) -> FileInfo:
        return self._logged("stat", name, stat)

    def read_dir(self, name: str) -> list[DirEntry]:
        return self._logged("readdir", name, read_dir)

    def read_file(self, name: str) -> bytes:
        return self._logged("read", name, read_file)

    def read_link(self, name: str) -> str:
        return self._logged("readlink", name, read_link)

    def sub(self, name: str) -> FileSystem:
        if name == ".":
            return self
        # The wrapper hides RootFS.sub so subview builds a generic SubView
        # instead of recursing here; the wrapped view's own sub is never used.
        return subview(_WithoutSub(self), name)

    def _logged(self, op, name, operation):
        try:
            return operation(self._fsys, name)
        except PathError as err:
            if ROOTFS_LOGGER.logger.isEnabledFor(logging.DEBUG):
                ROOTFS_LOGGER.debug(
                    "Confined operation failed",
                    extra={
                        "event": "confined_operation_failed",
                        "op": op,
                        "path": name,
                        "error_type": type(err).__name__,
                    },
                )
            raise


class _WithoutSub:
    """Forwards every RootFS operation except sub."""

    def __init__(self, fsys: RootFS) -> None:
        self._fsys = fsys

    def __repr__(self) -> str:
        return repr(self._fsys)

    def open(self, name: str) -> File:
        return self._fsys.open(name)

    def stat(self, name: str) -> FileInfo:
        return self._fsys.stat(name)

    def read_dir(self, name: str) -> list[DirEntry]:
        return self._fsys.read_dir(name)

    def read_file(self, name: str) -> bytes:
        return self._fsys.read_file(name)

    def read_link(self, name: str) -> str:
        return self._fsys.read_link(name)
