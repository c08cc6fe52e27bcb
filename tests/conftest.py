# tests/conftest.py
# Pin settings to their defaults and provide strict-root and sqlite fixtures.

from __future__ import annotations

import os
import sqlite3
from typing import Iterator

import pytest

from typedpath import config as typedpath_config
from typedpath import storage


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Expected strings in the suite are spelled with '/' separators."""
    if os.sep == "/":
        return
    skip = pytest.mark.skip(reason="suite assumes a '/' path separator")
    for item in items:
        item.add_marker(skip)


@pytest.fixture(autouse=True)
def default_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test against default settings, whatever the environment says."""
    monkeypatch.setattr(
        typedpath_config, "settings", typedpath_config.Settings(allow_root_collapse=True)
    )


@pytest.fixture()
def strict_root(monkeypatch: pytest.MonkeyPatch) -> None:
    """Treat a collapse to exactly the root as a normalization failure."""
    monkeypatch.setattr(
        typedpath_config, "settings", typedpath_config.Settings(allow_root_collapse=False)
    )


@pytest.fixture()
def db() -> Iterator[sqlite3.Connection]:
    conn = storage.connect(":memory:")
    conn.execute(
        "CREATE TABLE files ("
        " id INTEGER PRIMARY KEY NOT NULL,"
        " x COMBINED_PATH NOT NULL,"
        " y COMBINED_PATH NULL,"
        " a ABSOLUTE_PATH NULL,"
        " r RELATIVE_PATH NULL"
        ")"
    )
    try:
        yield conn
    finally:
        conn.close()
