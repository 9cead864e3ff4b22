"""Error types raised by filesystem views and path resolution."""

from typing import Optional


class PathError(Exception):
    """Raised when an operation on a path fails.

    ``path`` is mutable so that sub-views can rewrite it relative to their own
    root before the error reaches the caller.
    """

    reason = "path error"

    def __init__(self, op: str, path: str, reason: Optional[str] = None) -> None:
        super().__init__(op, path)
        self.op = op
        self.path = path
        if reason is not None:
            self.reason = reason

    def __str__(self) -> str:
        return f"{self.op} {self.path}: {self.reason}"


class InvalidError(PathError):
    """Raised when an operation is not valid for the given path."""

    reason = "invalid argument"


class InvalidPathError(InvalidError):
    """Raised when a name is not a valid slash-separated relative path."""

    reason = "invalid name"


class UnsupportedError(InvalidError):
    """Raised when reading a link on a view that cannot contain links."""

    reason = "symbolic links are not supported"


class NotExistError(PathError):
    """Raised when a path does not exist."""

    reason = "file does not exist"


class PermissionDeniedError(PathError):
    """Raised when the underlying filesystem denies access to a path."""

    reason = "permission denied"


class LoopError(PathError):
    """Raised when resolution followed too many symbolic links."""

    reason = "too many levels of symbolic links"

    def __init__(self, op: str, path: str, hops: int) -> None:
        super().__init__(op, path)
        self.hops = hops
