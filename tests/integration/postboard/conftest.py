import sqlite3
from datetime import datetime

import pytest

POSTS_DDL = """
CREATE TABLE posts (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    title TEXT,
    content TEXT,
    author TEXT,
    created_at TIMESTAMP
)
"""


def adapt_datetime(value: datetime) -> str:
    return value.isoformat(" ")


@pytest.fixture(autouse=True)
def sqlite_datetime_adapter(monkeypatch):
    """Store datetimes as ISO-8601 text with an explicit adapter instead of sqlite3's deprecated default."""
    monkeypatch.setitem(sqlite3.adapters, (datetime, sqlite3.PrepareProtocol), adapt_datetime)


@pytest.fixture
def sqlite_url(tmp_path):
    """A SQLite file with an empty posts table, addressed as a databases URL."""
    path = tmp_path / "posts.db"
    with sqlite3.connect(path) as connection:
        connection.execute(POSTS_DDL)
    connection.close()
    return f"sqlite:///{path}"
