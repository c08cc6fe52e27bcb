"""Relative paths: never rooted.

A relative path is only checked lexically. RelativePath keeps '.' and '..'
exactly as given; RelativePathBuf collapses them on construction without any
root check, so it may begin with one or more '..'. Full, root-bounded
normalization happens when the path is resolved against an absolute base.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, Optional, Union

from ._base import _ComponentPath
from ._components import Parts, display, has_markers, normalize, split
from .errors import JoinedAbsolute, NotRelative

if TYPE_CHECKING:
    from .absolute import AbsolutePath, AbsolutePathBuf

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, repr=False)
class _Relative(_ComponentPath):
    _SCHEMA_FORMAT: ClassVar[str] = "relative-path"

    def join(self, path: Any) -> "RelativePathBuf":
        """Join another relative path onto this one.

        Raises:
            JoinedAbsolute: If ``path`` is absolute
        """
        raw = display(path)
        rooted, parts = split(raw)
        if rooted:
            logger.debug("Rejected join of absolute %s onto %s", raw, self._raw)
            raise JoinedAbsolute(self._raw, raw)
        return RelativePathBuf._collapsed(self._parts + parts, os.path.join(self._raw, raw))

    def __truediv__(self, path: Any) -> "RelativePathBuf":
        return self.join(path)

    def try_into_absolute(
        self, base: Union["AbsolutePath", "AbsolutePathBuf"]
    ) -> "AbsolutePathBuf":
        """Resolve this path against ``base``, normalizing the result.

        Raises:
            NormalizationFailed: If the result would climb above the root
        """
        return base.join_relative(self)  # type: ignore[arg-type]


@dataclass(frozen=True, slots=True, repr=False)
class RelativePath(_Relative):
    """A relative path, kept exactly as given until joined to an absolute path."""

    @classmethod
    def try_new(cls, path: Any) -> "RelativePath":
        """Raises NotRelative if ``path`` is absolute."""
        raw = display(path)
        rooted, parts = split(raw)
        if rooted:
            logger.debug("Rejected absolute path as relative: %s", raw)
            raise NotRelative(raw)
        return cls(raw, parts)

    def parent(self) -> Optional["RelativePath"]:
        parts = self._parent_parts()
        return None if parts is None else RelativePath._trusted(parts)

    def to_buf(self) -> "RelativePathBuf":
        """Copy into an owning, lexically collapsed RelativePathBuf."""
        return RelativePathBuf._collapsed(self._parts, self._raw)


@dataclass(frozen=True, slots=True, repr=False)
class RelativePathBuf(_Relative):
    """The owning analog of RelativePath. Collapses '.' and '..' on construction."""

    @classmethod
    def try_new(cls, path: Any) -> "RelativePathBuf":
        """Raises NotRelative if ``path`` is absolute. Collapsing never fails."""
        raw = display(path)
        rooted, parts = split(raw)
        if rooted:
            logger.debug("Rejected absolute path as relative: %s", raw)
            raise NotRelative(raw)
        return cls._collapsed(parts, raw)

    @classmethod
    def _collapsed(cls, parts: Parts, original: str) -> "RelativePathBuf":
        if has_markers(parts):
            parts = normalize(parts, bounded=False, original=original)
        return cls._trusted(parts)

    def parent(self) -> Optional["RelativePathBuf"]:
        parts = self._parent_parts()
        return None if parts is None else RelativePathBuf._trusted(parts)

    def as_relative_path(self) -> RelativePath:
        """Borrow this path as a RelativePath view."""
        return RelativePath._trusted(self._parts, self._raw)


__all__ = ["RelativePath", "RelativePathBuf"]
