"""Pure component splitting and lexical normalization for typedpath.

No filesystem I/O is performed by any function in this module. A path is
handled as an ordered sequence of components plus a root marker:

- split: Turn a path-like value into ``(rooted, parts)``
- render: Turn ``(rooted, parts)`` back into a display string
- normalize: Collapse ``.`` and ``..`` segments, bounded by the root or not

Separators follow the host's generic rules (``os.sep`` and ``os.altsep``).
Drive letters and UNC prefixes get no special treatment.
"""

from __future__ import annotations

import os
import re
from typing import Iterable, Tuple

from .errors import NormalizationFailed

CURRENT = "."
PARENT = ".."

Parts = Tuple[str, ...]

_SEPARATORS = os.sep + (os.altsep or "")
_SPLIT_RE = re.compile("[" + re.escape(_SEPARATORS) + "]+")


def display(path: object) -> str:
    """Return the display string for a path-like value.

    Raises:
        TypeError: If the value is not ``str`` or a ``str`` ``os.PathLike``
    """
    raw = os.fspath(path)  # type: ignore[call-overload]
    if not isinstance(raw, str):
        raise TypeError(f"path must be str or os.PathLike[str], got {type(raw).__name__}")
    return raw


def split(path: object) -> Tuple[bool, Parts]:
    """Split a path-like value into its root marker and components.

    Empty segments (repeated or trailing separators) are dropped; ``.`` and
    ``..`` are kept verbatim.
    """
    raw = display(path)
    rooted = bool(raw) and raw[0] in _SEPARATORS
    parts = tuple(p for p in _SPLIT_RE.split(raw) if p)
    return rooted, parts


def render(rooted: bool, parts: Iterable[str]) -> str:
    """Render components with the host separator. The empty relative path is ``.``."""
    body = os.sep.join(parts)
    if rooted:
        return os.sep + body
    return body or CURRENT


def has_markers(parts: Iterable[str]) -> bool:
    """Return True if any component is ``.`` or ``..``."""
    return any(p in (CURRENT, PARENT) for p in parts)


def normalize(
    parts: Iterable[str],
    *,
    bounded: bool,
    original: str,
    allow_root: bool = True,
) -> Parts:
    """Lexically collapse ``.`` and ``..`` components.

    Args:
        parts: Components to collapse, root marker excluded
        bounded: True for absolute paths, where the root cannot be traversed
        original: Unnormalized display string, carried by the failure
        allow_root: In bounded mode, whether collapsing to exactly the root is
            an acceptable result

    Returns:
        The collapsed components. In unbounded mode the result may be empty or
        begin with one or more ``..``.

    Raises:
        NormalizationFailed: In bounded mode, if ``..`` would climb above the
            root, or if the result is exactly the root and ``allow_root`` is off
    """
    stack: list[str] = []
    for part in parts:
        if part == CURRENT:
            continue
        if part == PARENT:
            if stack and stack[-1] != PARENT:
                stack.pop()
            elif bounded:
                raise NormalizationFailed(original)
            else:
                stack.append(part)
            continue
        stack.append(part)

    if bounded and not stack and not allow_root:
        raise NormalizationFailed(original)
    return tuple(stack)


__all__ = [
    "CURRENT",
    "PARENT",
    "Parts",
    "display",
    "split",
    "render",
    "has_markers",
    "normalize",
]
