"""Symbolic link resolution confined to the root of a filesystem view.

``lookup`` walks a path one prefix at a time, following every symbolic link
it meets, and returns the view of the directory holding the last element
together with that element's name. A link rising above the root with ``..``
is rebased at the root, as ``/..`` resolves to ``/`` on POSIX systems, so the
result never refers to anything outside the original view.

The guarantee only holds while the underlying filesystem is not modified
concurrently: an entry can become a link between the probe made here and the
operation the caller performs on the result.
"""

import logging
from typing import Optional

from fspath.domain.capabilities import FileSystem, ReadLinkFileSystem
from fspath.domain.correlation_id import CorrelationLoggerAdapter
from fspath.domain.errors import InvalidError, LoopError, NotExistError
from fspath.domain.paths import base, clean, join, valid_path, walk
from fspath.views.subview import subview

LOOKUP_LOGGER = CorrelationLoggerAdapter(logging.getLogger("fspath.lookup"), {})

# Same ceiling as Linux.
MAX_LINK_HOPS = 40


class _Restart:
    """Returned by the walk visitor after a link rewrote the path."""

    def __repr__(self) -> str:
        return "RESTART"


RESTART = _Restart()


def _rises(link: str) -> bool:
    return link == ".." or link.startswith("../")


def _strip_parent(link: str) -> str:
    return link[len("..") :].lstrip("/")


class _Resolution:
    """State of a single lookup: current view, remaining name and ancestors."""

    def __init__(self, fsys: FileSystem, name: str) -> None:
        self.fsys = fsys
        self.name = name
        self.hops = 0
        self._ancestors: list[FileSystem] = []

    def visit(self, prefix: str) -> Optional[_Restart]:
        element = base(prefix)
        # Open and stat both follow links, so the only way to detect one is
        # to try reading it.
        if isinstance(self.fsys, ReadLinkFileSystem):
            try:
                link = self.fsys.read_link(element)
            except (InvalidError, NotExistError):
                pass
            else:
                self._follow(prefix, link)
                return RESTART

        if len(prefix) < len(self.name):
            child = subview(self.fsys, element)
            self._ancestors.append(self.fsys)
            self.fsys = child
        return None

    def _follow(self, prefix: str, target: str) -> None:
        link = clean(target)
        if not (_rises(link) or valid_path(link)):
            raise NotExistError("lookup", link)

        while self._ancestors and _rises(link):
            self.fsys = self._ancestors.pop()
            link = _strip_parent(link)

        clamped = _rises(link)
        while _rises(link):
            link = _strip_parent(link)

        remainder = self.name[len(prefix) :].lstrip("/")
        rewritten = join(link, remainder)

        if clamped:
            LOOKUP_LOGGER.info(
                "Symbolic link clamped at root",
                extra={
                    "event": "symlink_clamped",
                    "path": prefix,
                    "target": target,
                },
            )
        if LOOKUP_LOGGER.logger.isEnabledFor(logging.DEBUG):
            LOOKUP_LOGGER.debug(
                "Symbolic link followed",
                extra={
                    "event": "symlink_followed",
                    "path": prefix,
                    "target": target,
                    "resolved": rewritten,
                    "hops": self.hops + 1,
                    "depth": len(self._ancestors),
                },
            )
        self.name = rewritten


def lookup(fsys: FileSystem, name: str) -> tuple[FileSystem, str]:
    """Resolve name in fsys, following symbolic links along the way.

    Returns the view positioned on the directory holding the last element of
    the resolved path, and the base name of that element. The returned name
    never refers to a symbolic link.

    Raises NotExistError when name is not a valid path or a link points to an
    unusable target, LoopError after MAX_LINK_HOPS links, and lets any other
    error raised by the view propagate.
    """
    if not valid_path(name):
        raise NotExistError("lookup", name)

    state = _Resolution(fsys, name)
    while True:
        if state.name == ".":
            return state.fsys, "."
        # Checked after ".", so a chain ending at the root never hits the limit.
        if state.hops == MAX_LINK_HOPS:
            LOOKUP_LOGGER.warning(
                "Symbolic link loop detected",
                extra={
                    "event": "symlink_loop",
                    "path": state.name,
                    "hops": state.hops,
                },
            )
            raise LoopError("lookup", state.name, state.hops)
        if walk(state.name, state.visit) is None:
            return state.fsys, base(state.name)
        state.hops += 1
