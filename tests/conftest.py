from __future__ import annotations

import itertools
from datetime import date
from decimal import Decimal

import pytest

from src.employee_management.employee_management import create_app
from src.employee_management.employee_management.database.connection import db
from src.employee_management.employee_management.employees.model import Employee


@pytest.fixture
def app(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app()
    with app.app_context():
        yield app
        db.session.remove()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def container(app):
    return app.extensions["ems_container"]


@pytest.fixture
def departments(container):
    return {d.name: d for d in container.department_service.get_all()}


@pytest.fixture
def add_employee(container, departments):
    counter = itertools.count(1)

    def _add(
        first_name: str = "Jane",
        last_name: str = "Doe",
        *,
        email: str | None = None,
        hire_date: date = date(2020, 1, 1),
        salary: str = "50000",
        department: str = "IT",
    ) -> Employee:
        n = next(counter)
        return container.employee_service.create(
            Employee(
                id=None,
                first_name=first_name,
                last_name=last_name,
                email=email or f"user{n}@example.com",
                hire_date=hire_date,
                salary=Decimal(salary),
                department_id=departments[department].id,
            )
        )

    return _add
