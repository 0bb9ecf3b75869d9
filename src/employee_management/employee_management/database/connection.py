from __future__ import annotations

import sqlite3
from pathlib import Path

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import event
from sqlalchemy.engine import Engine, make_url

db = SQLAlchemy()


def _unicode_lower(value):
    return value.lower() if isinstance(value, str) else value


@event.listens_for(Engine, "connect")
def _configure_sqlite_connection(dbapi_connection, connection_record) -> None:
    if isinstance(dbapi_connection, sqlite3.Connection):
        # SQLite ignores FOREIGN KEY clauses unless the pragma is set per connection.
        cur = dbapi_connection.cursor()
        cur.execute("PRAGMA foreign_keys=ON")
        cur.close()
        # The built-in lower() only folds ASCII letters.
        dbapi_connection.create_function("lower", 1, _unicode_lower, deterministic=True)


def describe_database(uri: str) -> str:
    """Database target for log lines, password masked."""
    return make_url(uri).render_as_string(hide_password=True)


def ensure_sqlite_directory(uri: str) -> None:
    """Create the parent folder of a file-backed SQLite database."""
    url = make_url(uri)
    if url.get_backend_name() != "sqlite" or not url.database or url.database == ":memory:":
        return
    Path(url.database).expanduser().resolve().parent.mkdir(parents=True, exist_ok=True)
