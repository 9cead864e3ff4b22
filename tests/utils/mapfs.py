"""Helpers building MapFS entries for tests."""

import stat

from fspath.backends.mapfs import MapFile

DIR_MODE = stat.S_IFDIR | 0o755
LINK_MODE = stat.S_IFLNK | 0o666


def make_dir() -> MapFile:
    """Build a MapFS directory entry."""
    return MapFile(mode=DIR_MODE)


def make_link(target: str) -> MapFile:
    """Build a MapFS symbolic link entry pointing at target."""
    return MapFile(data=target.encode(), mode=LINK_MODE)


def make_file(data: bytes) -> MapFile:
    """Build a MapFS regular file entry."""
    return MapFile(data=data, mode=0o644)
