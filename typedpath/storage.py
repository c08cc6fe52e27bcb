"""Storing typedpath values in sqlite text columns.

Call ``register()`` once (``connect()`` does it for you), then declare columns
with one of the path column types and open the connection with
``detect_types=sqlite3.PARSE_DECLTYPES``:

    CREATE TABLE files (id INTEGER PRIMARY KEY, path ABSOLUTE_PATH NOT NULL)

Writing any path value stores its normalized display string. Reading a
declared column re-validates through the owning type's constructor, so a
stored value that is not a valid path of that kind fails the fetch.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import Any, Callable, Dict, Type, Union

from .absolute import AbsolutePath, AbsolutePathBuf
from .combined import CombinedPath, CombinedPathBuf
from .errors import PathError
from .relative import RelativePath, RelativePathBuf

logger = logging.getLogger(__name__)

ABSOLUTE_PATH = "ABSOLUTE_PATH"
RELATIVE_PATH = "RELATIVE_PATH"
COMBINED_PATH = "COMBINED_PATH"

COLUMN_TYPES: Dict[str, Type[Union[AbsolutePathBuf, RelativePathBuf, CombinedPathBuf]]] = {
    ABSOLUTE_PATH: AbsolutePathBuf,
    RELATIVE_PATH: RelativePathBuf,
    COMBINED_PATH: CombinedPathBuf,
}


def _adapt_view(value: Union[AbsolutePath, RelativePath, CombinedPath]) -> str:
    return str(value.to_buf())


def _converter(cls: Type[Any], column_type: str) -> Callable[[bytes], Any]:
    def convert(raw: bytes) -> Any:
        text = raw.decode("utf-8")
        try:
            return cls.try_new(text)
        except PathError as e:
            logger.debug("Rejected %s column value %r: %s", column_type, text, e)
            raise

    return convert


def register() -> None:
    """Install sqlite3 adapters and converters for every path type."""
    for owned in (AbsolutePathBuf, RelativePathBuf, CombinedPathBuf):
        sqlite3.register_adapter(owned, str)
    for view in (AbsolutePath, RelativePath, CombinedPath):
        sqlite3.register_adapter(view, _adapt_view)
    for column_type, cls in COLUMN_TYPES.items():
        sqlite3.register_converter(column_type, _converter(cls, column_type))


def connect(database: str, **kwargs: Any) -> sqlite3.Connection:
    """Register the path types and open a connection that decodes them."""
    register()
    kwargs.setdefault("detect_types", sqlite3.PARSE_DECLTYPES)
    return sqlite3.connect(database, **kwargs)


__all__ = [
    "ABSOLUTE_PATH",
    "RELATIVE_PATH",
    "COMBINED_PATH",
    "COLUMN_TYPES",
    "register",
    "connect",
]
