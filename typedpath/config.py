"""typedpath runtime settings.

No side effects on import beyond reading the environment. All settings are
backed by environment variables following the TYPEDPATH_* naming convention.

Example:
    >>> from typedpath import config
    >>> config.settings.allow_root_collapse
    True

Environment Variables:
    TYPEDPATH_ALLOW_ROOT_COLLAPSE: Whether normalizing an absolute path down to
        exactly the root (e.g. ``/a/..``) succeeds with ``/`` (default: true).
        When false, such a collapse raises NormalizationFailed. The literal
        root ``/`` is accepted either way.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

_PREFIX = "TYPEDPATH_"


def _env(name: str, default: str) -> str:
    """Get environment variable with TYPEDPATH_* prefix validation."""
    if not name.startswith(_PREFIX):
        raise ValueError(f"Only {_PREFIX}* env vars are allowed, got: {name}")
    return os.getenv(name, default)


def _env_bool(name: str, default: bool) -> bool:
    raw = _env(name, str(default))
    return raw.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """Runtime settings for typedpath.

    Frozen to prevent accidental mutation. For testing, override environment
    variables before importing this module, or use monkeypatch to replace the
    module-level `settings` instance.
    """

    allow_root_collapse: bool = _env_bool("TYPEDPATH_ALLOW_ROOT_COLLAPSE", True)


def load_settings() -> Settings:
    """Build a Settings instance from the current environment."""
    return Settings(
        allow_root_collapse=_env_bool("TYPEDPATH_ALLOW_ROOT_COLLAPSE", True),
    )


settings = Settings()


__all__ = ["Settings", "load_settings", "settings"]
