"""Helpers for slash-separated relative paths."""

import posixpath
from typing import Callable, Iterator, Optional, TypeVar

T = TypeVar("T")


def valid_path(name: str) -> bool:
    """Return True when name is "." or a clean relative path."""
    if name == ".":
        return True
    if not name:
        return False
    return all(element not in {"", ".", ".."} for element in name.split("/"))


def clean(name: str) -> str:
    """Return the shortest lexically equivalent form of name."""
    if not name:
        return "."
    cleaned = posixpath.normpath(name)
    # normpath keeps a leading "//" as required by POSIX.
    if cleaned.startswith("//"):
        cleaned = "/" + cleaned.lstrip("/")
    return cleaned


def join(*parts: str) -> str:
    """Join the non-empty parts with slashes and clean the result."""
    elements = [part for part in parts if part]
    if not elements:
        return "."
    return clean("/".join(elements))


def base(name: str) -> str:
    """Return the last element of name."""
    name = name.rstrip("/")
    if not name:
        return "."
    return name.rsplit("/", 1)[-1]


def iter_prefixes(name: str) -> Iterator[str]:
    """Yield each prefix of name ending at a slash, then name itself.

    ``"a/b/c"`` yields ``"a"``, ``"a/b"`` and ``"a/b/c"``.
    """
    seek = name.find("/")
    while seek >= 0:
        yield name[:seek]
        seek = name.find("/", seek + 1)
    yield name


def walk(name: str, visit: Callable[[str], Optional[T]]) -> Optional[T]:
    """Call visit for every prefix of name, stopping at the first result.

    The walk stops early when visit returns anything other than None, and
    that value is returned. Exceptions raised by visit propagate and abort the
    walk as well. Callers must pass a valid, non-empty path.
    """
    for prefix in iter_prefixes(name):
        outcome = visit(prefix)
        if outcome is not None:
            return outcome
    return None
