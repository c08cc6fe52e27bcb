"""Typed absolute, relative and combined paths for typedpath."""

from .absolute import AbsolutePath, AbsolutePathBuf
from .combined import CombinedPath, CombinedPathBuf
from .errors import (
    AbsoluteJoinError,
    AbsolutePathBufNewError,
    AbsolutePathNewError,
    CombinedJoinError,
    JoinedAbsolute,
    NormalizationFailed,
    NotAbsolute,
    NotRelative,
    PathError,
    PathsAreIdentical,
    RelativeToError,
    WasNotNormalized,
)
from .relative import RelativePath, RelativePathBuf

__version__ = "0.1.0"

__all__ = [
    "AbsolutePath",
    "AbsolutePathBuf",
    "RelativePath",
    "RelativePathBuf",
    "CombinedPath",
    "CombinedPathBuf",
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
