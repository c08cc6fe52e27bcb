"""Combined paths: either relative or absolute, strongly typed either way.

CombinedPath and CombinedPathBuf are closed two-variant unions. The variant
is chosen once, from the input's root marker, and every operation dispatches
on it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Optional, Union

from ._base import _PathValue
from ._components import display, split
from .absolute import AbsolutePath, AbsolutePathBuf
from .relative import RelativePath, RelativePathBuf


@dataclass(frozen=True, slots=True, repr=False)
class CombinedPath(_PathValue):
    """A RelativePath or an AbsolutePath.

    ``CombinedPath(variant)`` wraps an already-validated variant; use
    ``try_new`` to classify a raw path.
    """

    value: Union[RelativePath, AbsolutePath]

    _SCHEMA_FORMAT: ClassVar[str] = "path"

    def __post_init__(self) -> None:
        if not isinstance(self.value, (RelativePath, AbsolutePath)):
            raise TypeError(
                f"CombinedPath wraps RelativePath or AbsolutePath, got {type(self.value).__name__}"
            )

    @classmethod
    def try_new(cls, path: Any) -> "CombinedPath":
        """Classify ``path`` by its root marker.

        Raises:
            WasNotNormalized: If ``path`` is absolute and contains '.' or '..'
        """
        raw = display(path)
        rooted, _ = split(raw)
        if rooted:
            return cls(AbsolutePath.try_new(raw))
        return cls(RelativePath.try_new(raw))

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"CombinedPath({self.value!r})"

    def is_relative(self) -> bool:
        return isinstance(self.value, RelativePath)

    def is_absolute(self) -> bool:
        return isinstance(self.value, AbsolutePath)

    def try_into_absolute(self, base: Union[AbsolutePath, AbsolutePathBuf]) -> AbsolutePathBuf:
        """Copy the absolute variant, or resolve the relative one against ``base``.

        Raises:
            NormalizationFailed: If resolving would climb above the root
        """
        if isinstance(self.value, RelativePath):
            return self.value.try_into_absolute(base)
        return self.value.to_buf()

    def join(self, path: Any) -> "CombinedPathBuf":
        """Join a relative path onto whichever variant this is.

        Raises:
            JoinedAbsolute: If ``path`` is absolute
            NormalizationFailed: If the absolute variant would climb above the root
        """
        return CombinedPathBuf(self.value.join(path))

    def __truediv__(self, path: Any) -> "CombinedPathBuf":
        return self.join(path)

    def parent(self) -> Optional["CombinedPath"]:
        parent = self.value.parent()
        return None if parent is None else CombinedPath(parent)

    def to_buf(self) -> "CombinedPathBuf":
        """Copy into an owning CombinedPathBuf."""
        return CombinedPathBuf(self.value.to_buf())


@dataclass(frozen=True, slots=True, repr=False)
class CombinedPathBuf(_PathValue):
    """The owning analog of CombinedPath: a RelativePathBuf or an AbsolutePathBuf."""

    value: Union[RelativePathBuf, AbsolutePathBuf]

    _SCHEMA_FORMAT: ClassVar[str] = "path"

    def __post_init__(self) -> None:
        if not isinstance(self.value, (RelativePathBuf, AbsolutePathBuf)):
            raise TypeError(
                "CombinedPathBuf wraps RelativePathBuf or AbsolutePathBuf, "
                f"got {type(self.value).__name__}"
            )

    @classmethod
    def try_new(cls, path: Any) -> "CombinedPathBuf":
        """Classify ``path`` by its root marker and normalize it.

        Raises:
            NormalizationFailed: If ``path`` is absolute and normalizing would
                climb above the root
        """
        raw = display(path)
        rooted, _ = split(raw)
        if rooted:
            return cls(AbsolutePathBuf.try_new(raw))
        return cls(RelativePathBuf.try_new(raw))

    @classmethod
    def parse(cls, text: str) -> "CombinedPathBuf":
        return cls.try_new(text)

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"CombinedPathBuf({self.value!r})"

    def is_relative(self) -> bool:
        return isinstance(self.value, RelativePathBuf)

    def is_absolute(self) -> bool:
        return isinstance(self.value, AbsolutePathBuf)

    def try_into_absolute(self, base: Union[AbsolutePath, AbsolutePathBuf]) -> AbsolutePathBuf:
        """Return the absolute variant, or resolve the relative one against ``base``.

        Raises:
            NormalizationFailed: If resolving would climb above the root
        """
        if isinstance(self.value, RelativePathBuf):
            return self.value.try_into_absolute(base)
        return self.value

    def join(self, path: Any) -> "CombinedPathBuf":
        """Join a relative path onto whichever variant this is.

        Raises:
            JoinedAbsolute: If ``path`` is absolute
            NormalizationFailed: If the absolute variant would climb above the root
        """
        return CombinedPathBuf(self.value.join(path))

    def __truediv__(self, path: Any) -> "CombinedPathBuf":
        return self.join(path)

    def parent(self) -> Optional["CombinedPathBuf"]:
        parent = self.value.parent()
        return None if parent is None else CombinedPathBuf(parent)

    def as_combined_path(self) -> CombinedPath:
        """Borrow this path as a CombinedPath view."""
        if isinstance(self.value, RelativePathBuf):
            return CombinedPath(self.value.as_relative_path())
        return CombinedPath(self.value.as_absolute_path())


__all__ = ["CombinedPath", "CombinedPathBuf"]
