from __future__ import annotations

import logging
from typing import Iterable, Sequence

from sqlalchemy import inspect, select
from sqlalchemy.exc import IntegrityError

from ..core.constants import SEED_DEPARTMENTS
from .connection import db
from .tables import DepartmentRecord

logger = logging.getLogger(__name__)


def apply_schema() -> None:
    """Create missing tables. Existing tables are left untouched."""
    db.create_all()


def list_tables() -> list[str]:
    return sorted(inspect(db.engine).get_table_names())


def seed_departments(names: Iterable[str] = SEED_DEPARTMENTS) -> Sequence[str]:
    """Seed the default departments into an empty departments table.

    A table that already holds any department is left alone, so deleted or
    renamed defaults stay that way. Each insert is its own transaction and the
    unique constraint on ``departments.name`` decides races between concurrent
    starters that both saw an empty table.

    Returns the names actually inserted.
    """

    if db.session.execute(select(DepartmentRecord.id).limit(1)).first():
        return []

    inserted: list[str] = []
    for name in names:
        db.session.add(DepartmentRecord(name=name))
        try:
            db.session.commit()
        except IntegrityError:
            db.session.rollback()
            logger.info("Department %r was seeded concurrently, skipping", name)
            continue
        inserted.append(name)

    return inserted


def initialize_database(*, seed: bool = True) -> None:
    """Create schema and seed departments; failures are logged and re-raised."""
    try:
        apply_schema()
        logger.info("Schema ready (tables=%d)", len(list_tables()))
        if seed:
            inserted = seed_departments()
            logger.info("Seeded %d department(s)", len(inserted))
    except Exception:
        logger.exception("An error occurred while initializing the database")
        raise
