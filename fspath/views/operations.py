"""Generic filesystem operations falling back to open when a capability is missing."""

from fspath.domain.capabilities import (
    FileSystem,
    ReadDirFileSystem,
    ReadFileFileSystem,
    StatFileSystem,
)
from fspath.domain.errors import InvalidError
from fspath.domain.file_types import DirEntry, DirFile, FileInfo


def stat(fsys: FileSystem, name: str) -> FileInfo:
    """Describe name, using the view's stat when it has one."""
    if isinstance(fsys, StatFileSystem):
        return fsys.stat(name)
    with fsys.open(name) as handle:
        return handle.stat()


def read_dir(fsys: FileSystem, name: str) -> list[DirEntry]:
    """List the directory name sorted by entry name."""
    if isinstance(fsys, ReadDirFileSystem):
        return fsys.read_dir(name)
    with fsys.open(name) as handle:
        if not isinstance(handle, DirFile):
            raise InvalidError("readdir", name, "not implemented")
        entries = handle.read_dir()
    return sorted(entries, key=lambda entry: entry.name)


def read_file(fsys: FileSystem, name: str) -> bytes:
    """Return the full contents of the file name."""
    if isinstance(fsys, ReadFileFileSystem):
        return fsys.read_file(name)
    with fsys.open(name) as handle:
        return handle.read()
