"""JSON serialization for typedpath values.

Every path type is a pydantic-aware type, so it can be declared directly as a
field on a ``pydantic.BaseModel``. Validation re-runs the type's ``try_new``;
a path that fails it makes the surrounding validation fail with a
``ValidationError`` carrying the path error's message.

This module adds thin helpers for serializing a single value:

- dumps: Render a path value as a JSON string literal
- loads: Parse a JSON string literal into a given path type
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Type, TypeVar, Union

from pydantic import TypeAdapter, ValidationError

from ._base import _PathValue

T = TypeVar("T", bound=_PathValue)


@lru_cache(maxsize=None)
def _adapter(cls: Type[Any]) -> TypeAdapter[Any]:
    return TypeAdapter(cls)


def dumps(value: _PathValue) -> str:
    """Serialize a path value to JSON (a string literal)."""
    return _adapter(type(value)).dump_json(value).decode("utf-8")


def loads(cls: Type[T], data: Union[str, bytes]) -> T:
    """Deserialize JSON into ``cls``, re-validating through its constructor.

    Raises:
        ValidationError: If ``data`` is not a JSON string, or the path fails
            validation for ``cls``
    """
    return _adapter(cls).validate_json(data)


__all__ = ["ValidationError", "dumps", "loads"]
