from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import PurePath
from typing import Any, ClassVar, Dict, Optional, Type, TypeVar

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic_core import core_schema

from ._components import Parts, render

_P = TypeVar("_P", bound="_PathValue")
_C = TypeVar("_C", bound="_ComponentPath")


class _PathValue:
    """Behaviour shared by every typedpath value: display and pydantic hooks."""

    __slots__ = ()

    _SCHEMA_FORMAT: ClassVar[str] = "path"

    @classmethod
    def try_new(cls: Type[_P], path: Any) -> _P:  # pragma: no cover - overridden
        raise NotImplementedError

    def __fspath__(self) -> str:
        return str(self)

    def as_path(self) -> PurePath:
        """Return the path as a host-flavoured PurePath (no filesystem access)."""
        return PurePath(str(self))

    @classmethod
    def _coerce(cls: Type[_P], value: Any) -> _P:
        if isinstance(value, cls):
            return value
        if not isinstance(value, (str, os.PathLike)):
            raise ValueError(f"expected a path string, got {type(value).__name__}")
        return cls.try_new(value)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        # validate through try_new, serialize as the display string
        return core_schema.no_info_plain_validator_function(
            cls._coerce,
            serialization=core_schema.to_string_ser_schema(),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> Dict[str, Any]:
        return {"type": "string", "format": cls._SCHEMA_FORMAT}


@dataclass(frozen=True, slots=True, repr=False)
class _ComponentPath(_PathValue):
    """A validated component sequence.

    Do not construct directly; use ``try_new`` on a concrete subclass. ``_raw``
    is the display string and does not take part in equality, so two values
    with the same components compare equal however they were spelled.
    """

    _raw: str = field(compare=False)
    _parts: Parts

    _ROOTED: ClassVar[bool] = False

    @classmethod
    def _trusted(cls: Type[_C], parts: Parts, raw: Optional[str] = None) -> _C:
        """Wrap components already known to satisfy the class invariant."""
        return cls(render(cls._ROOTED, parts) if raw is None else raw, tuple(parts))

    def __str__(self) -> str:
        return self._raw

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._raw!r})"

    @property
    def components(self) -> Parts:
        """The path components, root marker excluded."""
        return self._parts

    @property
    def name(self) -> str:
        """The final component, or an empty string if there is none."""
        return self._parts[-1] if self._parts else ""

    @property
    def suffix(self) -> str:
        return PurePath(self.name).suffix if self.name else ""

    @property
    def stem(self) -> str:
        return PurePath(self.name).stem if self.name else ""

    def is_absolute(self) -> bool:
        return self._ROOTED

    def is_relative(self) -> bool:
        return not self._ROOTED

    def _parent_parts(self) -> Optional[Parts]:
        if not self._parts:
            return None
        return self._parts[:-1]
