"""typedpath error types.

All custom exceptions inherit from PathError (itself a ValueError) to allow
catching any typedpath-specific error.

Operations that can fail in more than one way raise errors that share an
intermediate base class, so callers can catch exactly what an operation can
raise:

- AbsolutePathNewError: NotAbsolute, WasNotNormalized
- AbsolutePathBufNewError: NotAbsolute, NormalizationFailed
- AbsoluteJoinError: JoinedAbsolute, NormalizationFailed
- CombinedJoinError: JoinedAbsolute, NormalizationFailed
- RelativeToError: PathsAreIdentical
"""

from __future__ import annotations

from typing import Any


class PathError(ValueError):
    """Base exception for all typedpath errors."""

    def __eq__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class AbsolutePathNewError(PathError):
    """Constructing an AbsolutePath failed."""


class AbsolutePathBufNewError(PathError):
    """Constructing an AbsolutePathBuf failed."""


class AbsoluteJoinError(PathError):
    """Joining onto an absolute path failed."""


class CombinedJoinError(PathError):
    """Joining onto a combined path failed."""


class RelativeToError(PathError):
    """Relativizing one absolute path against another failed."""


class NotAbsolute(AbsolutePathNewError, AbsolutePathBufNewError):
    """An absolute path was required, but the input had no root."""

    def __init__(self, path: str) -> None:
        super().__init__(path)
        self.path = path

    def __str__(self) -> str:
        return f"`{self.path}` was not an absolute path"


class NotRelative(PathError):
    """A relative path was required, but the input was rooted."""

    def __init__(self, path: str) -> None:
        super().__init__(path)
        self.path = path

    def __str__(self) -> str:
        return f"`{self.path}` was not a relative path"


class WasNotNormalized(AbsolutePathNewError):
    """A non-collapsing constructor received '.' or '..' components."""

    def __init__(self, path: str) -> None:
        super().__init__(path)
        self.path = path

    def __str__(self) -> str:
        return f"`{self.path}` must be normalized, but contained '.' or '..'"


class NormalizationFailed(AbsolutePathBufNewError, AbsoluteJoinError, CombinedJoinError):
    """Collapsing '..' would climb above the root.

    ``path`` is the original, unnormalized path.
    """

    def __init__(self, path: str) -> None:
        super().__init__(path)
        self.path = path

    def __str__(self) -> str:
        return f"`{self.path}` could not be normalized"


class JoinedAbsolute(AbsoluteJoinError, CombinedJoinError):
    """The path being joined onto a base was itself absolute."""

    def __init__(self, base: str, joined: str) -> None:
        super().__init__(base, joined)
        self.base = base
        self.joined = joined

    def __str__(self) -> str:
        return f"Attempted to join `{self.base}` to non-relative path `{self.joined}`"


class PathsAreIdentical(RelativeToError):
    """Two paths expected to differ were identical."""

    def __init__(self, path: str) -> None:
        super().__init__(path)
        self.path = path

    def __str__(self) -> str:
        return f"Provided paths are identical (`{self.path}`), and cannot be relativized"


__all__ = [
    "PathError",
    "AbsolutePathNewError",
    "AbsolutePathBufNewError",
    "AbsoluteJoinError",
    "CombinedJoinError",
    "RelativeToError",
    "NotAbsolute",
    "NotRelative",
    "WasNotNormalized",
    "NormalizationFailed",
    "JoinedAbsolute",
    "PathsAreIdentical",
]
