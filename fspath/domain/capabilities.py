"""Capability protocols implemented by filesystem views.

A view only has to implement ``open``. Every other operation is an optional
capability, checked with ``isinstance`` where it is needed.
"""

from typing import Protocol, runtime_checkable

from fspath.domain.file_types import DirEntry, File, FileInfo


@runtime_checkable
class FileSystem(Protocol):
    """A hierarchical namespace addressed by valid relative paths."""

    def open(self, name: str) -> File: ...


@runtime_checkable
class StatFileSystem(FileSystem, Protocol):
    """A view able to describe a path without opening it."""

    def stat(self, name: str) -> FileInfo: ...


@runtime_checkable
class ReadDirFileSystem(FileSystem, Protocol):
    """A view able to list a directory, sorted by entry name."""

    def read_dir(self, name: str) -> list[DirEntry]: ...


@runtime_checkable
class ReadFileFileSystem(FileSystem, Protocol):
    """A view able to return the full contents of a file."""

    def read_file(self, name: str) -> bytes: ...


@runtime_checkable
class ReadLinkFileSystem(FileSystem, Protocol):
    """A view that may contain symbolic links."""

    def read_link(self, name: str) -> str: ...


@runtime_checkable
class SubFileSystem(FileSystem, Protocol):
    """A view providing its own sub-view implementation."""

    def sub(self, name: str) -> FileSystem: ...
