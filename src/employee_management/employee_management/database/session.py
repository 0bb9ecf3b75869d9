from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.orm import Session

from .connection import db


@contextmanager
def unit_of_work() -> Iterator[Session]:
    """Yield the request-scoped session; commit on success, roll back on error."""
    session = db.session
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
