"""In-memory filesystem view built from a mapping of paths to files."""

import io
import stat as stat_mode
from dataclasses import dataclass
from typing import Mapping, Optional, Union

from fspath.domain.errors import InvalidError, InvalidPathError, NotExistError
from fspath.domain.file_types import DirEntry, FileInfo
from fspath.domain.paths import base, valid_path

DEFAULT_DIR_MODE = stat_mode.S_IFDIR | 0o555


@dataclass
class MapFile:
    """Content and metadata of one MapFS entry.

    Directories carry ``S_IFDIR`` in their mode, symbolic links carry
    ``S_IFLNK`` and store their target in ``data``.
    """

    data: bytes = b""
    mode: int = 0o644
    mod_time: float = 0.0


class MapFileHandle:
    """Open handle on a file or symbolic link of a MapFS."""

    def __init__(self, info: FileInfo, data: bytes) -> None:
        self._info = info
        self._buffer = io.BytesIO(data)

    def read(self, size: int = -1) -> bytes:
        return self._buffer.read(size)

    def stat(self) -> FileInfo:
        return self._info

    def close(self) -> None:
        self._buffer.close()

    def __enter__(self) -> "MapFileHandle":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class MapDirHandle:
    """Open handle on a directory of a MapFS."""

    def __init__(self, name: str, info: FileInfo, entries: list[DirEntry]) -> None:
        self._name = name
        self._info = info
        self._entries = entries

    def read(self, size: int = -1) -> bytes:
        raise InvalidError("read", self._name, "is a directory")

    def read_dir(self) -> list[DirEntry]:
        return list(self._entries)

    def stat(self) -> FileInfo:
        return self._info

    def close(self) -> None:
        self._entries = []

    def __enter__(self) -> "MapDirHandle":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class MapFS:
    """Filesystem view over an in-memory mapping of slash-separated paths.

    Parent directories of listed paths exist implicitly. Symbolic links are
    not followed by open or stat; wrap the view in RootFS for that.
    """

    def __init__(self, files: Optional[Mapping[str, MapFile]] = None) -> None:
        self._files: dict[str, MapFile] = dict(files or {})

    def __repr__(self) -> str:
        return f"MapFS({sorted(self._files)!r})"

    def __setitem__(self, name: str, file: MapFile) -> None:
        self._files[name] = file

    def _entry(self, op: str, name: str) -> MapFile:
        if not valid_path(name):
            raise InvalidPathError(op, name)
        file = self._files.get(name)
        if file is not None:
            return file
        prefix = "" if name == "." else name + "/"
        if name == "." or any(key.startswith(prefix) for key in self._files):
            return MapFile(mode=DEFAULT_DIR_MODE)
        raise NotExistError(op, name)

    def _info(self, name: str, file: MapFile) -> FileInfo:
        return FileInfo(base(name), len(file.data), file.mode, file.mod_time)

    def _children(self, name: str) -> list[DirEntry]:
        prefix = "" if name == "." else name + "/"
        children: dict[str, FileInfo] = {}
        for key, file in self._files.items():
            if not key.startswith(prefix) or key == name:
                continue
            child, _, rest = key[len(prefix) :].partition("/")
            if rest:
                children.setdefault(child, FileInfo(child, 0, DEFAULT_DIR_MODE))
            else:
                children[child] = self._info(child, file)
        return [DirEntry(child, children[child]) for child in sorted(children)]

    def open(self, name: str) -> Union[MapFileHandle, MapDirHandle]:
        file = self._entry("open", name)
        info = self._info(name, file)
        if info.is_dir:
            return MapDirHandle(name, info, self._children(name))
        return MapFileHandle(info, file.data)

    def stat(self, name: str) -> FileInfo:
        return self._info(name, self._entry("stat", name))

    def read_dir(self, name: str) -> list[DirEntry]:
        file = self._entry("readdir", name)
        if not stat_mode.S_ISDIR(file.mode):
            raise InvalidError("readdir", name, "not a directory")
        return self._children(name)

    def read_file(self, name: str) -> bytes:
        file = self._entry("read", name)
        if stat_mode.S_ISDIR(file.mode):
            raise InvalidError("read", name, "is a directory")
        return file.data

    def read_link(self, name: str) -> str:
        file = self._entry("readlink", name)
        if not stat_mode.S_ISLNK(file.mode):
            raise InvalidError("readlink", name, "not a symbolic link")
        try:
            return file.data.decode()
        except UnicodeDecodeError as exc:
            raise InvalidError("readlink", name, "invalid link target") from exc
