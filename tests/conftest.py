"""Shared pytest fixtures for integration and unit tests."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from fspath.backends.mapfs import MapFS
from tests.utils.mapfs import make_dir, make_file, make_link


@pytest.fixture()
def clamped_link_fs() -> MapFS:
    """Filesystem whose link a/b rises twice above its directory."""

    return MapFS(
        {
            "a": make_dir(),
            "a/b": make_link("../../c"),
            "a/c": make_dir(),
            "c/d": make_file(b"Hello World!"),
        }
    )


@pytest.fixture()
def file_link_fs() -> MapFS:
    """Filesystem whose link a/b points at the file c/d."""

    return MapFS(
        {
            "a": make_dir(),
            "a/b": make_link("../c/d"),
            "a/c": make_dir(),
            "c/d": make_file(b"Hello World!"),
        }
    )


@pytest.fixture()
def host_tree(tmp_path: Path) -> Path:
    """Create a host directory next to a secret it must not expose.

    Layout::

        outside/secret.txt
        root/docs/readme.txt
        root/docs/latest -> readme.txt
        root/escape -> ../outside
        root/deep -> ../../../../../../outside
        root/absolute -> <tmp>/outside/secret.txt
        root/up/back -> ../docs
    """

    if not hasattr(os, "symlink"):
        pytest.skip("symbolic links are not supported on this platform")

    outside = tmp_path / "outside"
    outside.mkdir()
    (outside / "secret.txt").write_bytes(b"top secret")

    root = tmp_path / "root"
    docs = root / "docs"
    docs.mkdir(parents=True)
    (docs / "readme.txt").write_bytes(b"read me")
    (root / "outside").mkdir()
    (root / "outside" / "secret.txt").write_bytes(b"decoy")
    (root / "up").mkdir()

    try:
        os.symlink("readme.txt", docs / "latest")
    except OSError:
        pytest.skip("unable to create symbolic links")
    os.symlink("../outside", root / "escape")
    os.symlink("../../../../../../outside", root / "deep")
    os.symlink((outside / "secret.txt").as_posix(), root / "absolute")
    os.symlink("../docs", root / "up" / "back")
    return root
