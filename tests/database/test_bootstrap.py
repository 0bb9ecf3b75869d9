from __future__ import annotations

import pytest
from sqlalchemy import delete
from sqlalchemy.exc import IntegrityError

from src.employee_management.employee_management.database.bootstrap import initialize_database, list_tables, seed_departments
from src.employee_management.employee_management.database.connection import db, describe_database
from src.employee_management.employee_management.database.tables import DepartmentRecord
from src.employee_management.employee_management.departments.model import Department


def test_startup_creates_tables_and_seeds_departments(app, container):
    assert {"departments", "employees"} <= set(list_tables())
    assert sorted(d.name for d in container.department_service.get_all()) == ["Finance", "HR", "IT", "Marketing"]


def test_seeding_twice_inserts_nothing(app, container):
    assert seed_departments() == []
    assert len(container.department_service.get_all()) == 4


def test_restart_does_not_bring_back_deleted_or_renamed_departments(app, container, departments):
    service = container.department_service
    service.delete(departments["Marketing"].id)
    service.update(Department(id=departments["IT"].id, name="Information Technology"))

    initialize_database()

    assert sorted(d.name for d in service.get_all()) == ["Finance", "HR", "Information Technology"]


def test_seeding_fills_an_empty_table(app):
    db.session.execute(delete(DepartmentRecord))
    db.session.commit()

    assert seed_departments() == ["IT", "HR", "Finance", "Marketing"]


def test_department_name_is_unique_in_the_store(app):
    db.session.add(DepartmentRecord(name="IT"))
    with pytest.raises(IntegrityError):
        db.session.commit()
    db.session.rollback()


def test_describe_database_masks_password():
    described = describe_database("mysql+mysqlconnector://root:s3cret@db:3306/ems_db")

    assert "s3cret" not in described
    assert "db:3306/ems_db" in described
