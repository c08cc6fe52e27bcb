"""Absolute paths: always rooted, never containing '.' or '..'.

Key classes:
- AbsolutePath: validates an already-normalized path and keeps its spelling
- AbsolutePathBuf: normalizes on construction and owns the rendered result

Both are immutable. Joins never mutate; they return a new AbsolutePathBuf
produced by the root-bounded normalizer, so the invariant is re-established
on every derived value or the operation fails outright.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, ClassVar, Optional, Union

from . import config
from ._base import _ComponentPath
from ._components import PARENT, Parts, display, has_markers, normalize, split
from .errors import (
    JoinedAbsolute,
    NormalizationFailed,
    NotAbsolute,
    PathsAreIdentical,
    WasNotNormalized,
)
from .relative import RelativePath, RelativePathBuf

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, repr=False)
class _Absolute(_ComponentPath):
    _ROOTED: ClassVar[bool] = True
    _SCHEMA_FORMAT: ClassVar[str] = "absolute-path"

    def join(self, path: Any) -> "AbsolutePathBuf":
        """Join a relative path onto this one and normalize the result.

        Raises:
            JoinedAbsolute: If ``path`` is itself absolute
            NormalizationFailed: If the result would climb above the root
        """
        raw = display(path)
        rooted, parts = split(raw)
        if rooted:
            logger.debug("Rejected join of absolute %s onto %s", raw, self._raw)
            raise JoinedAbsolute(self._raw, raw)
        return AbsolutePathBuf._normalized(self._parts + parts, os.path.join(self._raw, raw))

    def __truediv__(self, path: Any) -> "AbsolutePathBuf":
        return self.join(path)

    def join_relative(self, path: Union[RelativePath, RelativePathBuf]) -> "AbsolutePathBuf":
        """Join a known relative path onto this one.

        Raises:
            NormalizationFailed: If the result would climb above the root
        """
        if not isinstance(path, (RelativePath, RelativePathBuf)):
            raise TypeError(f"expected RelativePath or RelativePathBuf, got {type(path).__name__}")
        return AbsolutePathBuf._normalized(
            self._parts + path.components, os.path.join(self._raw, str(path))
        )

    def relative_to(self, base: Any) -> RelativePathBuf:
        """Return the relative path that leads from ``base`` to this path.

        ``base.join(result)`` yields this path again. ``base`` may be any
        absolute path value or a raw path, which is validated as an
        AbsolutePathBuf.

        Raises:
            PathsAreIdentical: If both paths have the same components
        """
        if not isinstance(base, _Absolute):
            base = AbsolutePathBuf.try_new(base)
        base_parts = base.components
        if base_parts == self._parts:
            raise PathsAreIdentical(self._raw)

        common = 0
        for ours, theirs in zip(self._parts, base_parts):
            if ours != theirs:
                break
            common += 1
        up = (PARENT,) * (len(base_parts) - common)
        return RelativePathBuf._trusted(up + self._parts[common:])


@dataclass(frozen=True, slots=True, repr=False)
class AbsolutePath(_Absolute):
    """An absolute path that must already be normalized.

    Validation only: the caller's spelling is kept as the display string and
    nothing is collapsed. Use AbsolutePathBuf to normalize.
    """

    @classmethod
    def try_new(cls, path: Any) -> "AbsolutePath":
        """Validate ``path`` as a normalized absolute path.

        Raises:
            NotAbsolute: If ``path`` has no root
            WasNotNormalized: If ``path`` contains '.' or '..'
        """
        raw = display(path)
        rooted, parts = split(raw)
        if not rooted:
            logger.debug("Rejected relative path as absolute: %s", raw)
            raise NotAbsolute(raw)
        if has_markers(parts):
            logger.debug("Rejected unnormalized absolute path: %s", raw)
            raise WasNotNormalized(raw)
        return cls(raw, parts)

    def parent(self) -> Optional["AbsolutePath"]:
        """Return this path without its final component, or None at the root."""
        parts = self._parent_parts()
        return None if parts is None else AbsolutePath._trusted(parts)

    def to_buf(self) -> "AbsolutePathBuf":
        """Copy into an owning AbsolutePathBuf."""
        return AbsolutePathBuf._trusted(self._parts)


@dataclass(frozen=True, slots=True, repr=False)
class AbsolutePathBuf(_Absolute):
    """The owning analog of AbsolutePath. Normalizes on construction."""

    @classmethod
    def try_new(cls, path: Any) -> "AbsolutePathBuf":
        """Build a normalized absolute path.

        Raises:
            NotAbsolute: If ``path`` has no root
            NormalizationFailed: If normalizing would climb above the root
        """
        raw = display(path)
        rooted, parts = split(raw)
        if not rooted:
            logger.debug("Rejected relative path as absolute: %s", raw)
            raise NotAbsolute(raw)
        return cls._normalized(parts, raw)

    @classmethod
    def _normalized(cls, parts: Parts, original: str) -> "AbsolutePathBuf":
        if has_markers(parts):
            try:
                parts = normalize(
                    parts,
                    bounded=True,
                    original=original,
                    allow_root=config.settings.allow_root_collapse,
                )
            except NormalizationFailed:
                logger.debug("Normalization failed for %s", original)
                raise
        return cls._trusted(parts)

    def parent(self) -> Optional["AbsolutePathBuf"]:
        """Return this path without its final component, or None at the root."""
        parts = self._parent_parts()
        return None if parts is None else AbsolutePathBuf._trusted(parts)

    def as_absolute_path(self) -> AbsolutePath:
        """Borrow this path as an AbsolutePath view."""
        return AbsolutePath._trusted(self._parts, self._raw)


__all__ = ["AbsolutePath", "AbsolutePathBuf"]
