"""Shared file metadata types to avoid circular imports."""

import stat as stat_mode
from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class FileInfo:
    """Metadata describing a file, directory or symbolic link."""

    name: str
    size: int
    mode: int
    mod_time: float = 0.0

    @property
    def is_dir(self) -> bool:
        return stat_mode.S_ISDIR(self.mode)

    @property
    def is_symlink(self) -> bool:
        return stat_mode.S_ISLNK(self.mode)

    @property
    def is_regular(self) -> bool:
        return stat_mode.S_IFMT(self.mode) in {0, stat_mode.S_IFREG}

    @property
    def permissions(self) -> int:
        return stat_mode.S_IMODE(self.mode)


@dataclass(frozen=True)
class DirEntry:
    """Represents one entry of a directory listing."""

    name: str
    info: FileInfo

    @property
    def is_dir(self) -> bool:
        return self.info.is_dir


@runtime_checkable
class File(Protocol):
    """An open file handle returned by a filesystem view."""

    def read(self, size: int = -1) -> bytes: ...

    def stat(self) -> FileInfo: ...

    def close(self) -> None: ...

    def __enter__(self) -> "File": ...

    def __exit__(self, *exc_info) -> None: ...


@runtime_checkable
class DirFile(File, Protocol):
    """An open directory handle able to list its entries."""

    def read_dir(self) -> list[DirEntry]: ...
