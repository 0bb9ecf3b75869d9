from __future__ import annotations

from typing import Optional, Sequence

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import delete, func, or_, select
from sqlalchemy.orm import joinedload

from ..database.session import unit_of_work
from ..database.tables import EmployeeRecord
from ..departments.model import Department
from .model import Employee
from .query import EmployeeQuery, SortDirection, SortField
from .repository import EmployeeRepository

SORT_COLUMNS = {
    SortField.SALARY: EmployeeRecord.salary,
    SortField.HIRE_DATE: EmployeeRecord.hire_date,
    SortField.FIRST_NAME: EmployeeRecord.first_name,
    SortField.LAST_NAME: EmployeeRecord.last_name,
    SortField.EMAIL: EmployeeRecord.email,
}


def _to_model(record: EmployeeRecord) -> Employee:
    department = None
    if record.department is not None:
        department = Department(id=int(record.department.id), name=record.department.name)

    return Employee(
        id=int(record.id),
        first_name=record.first_name,
        last_name=record.last_name,
        email=record.email,
        hire_date=record.hire_date,
        salary=record.salary,
        department_id=int(record.department_id) if record.department_id is not None else None,
        department=department,
    )


def build_filters(query: EmployeeQuery) -> list:
    clauses = []

    text = query.search_text
    if text is not None:
        needle = text.lower()
        clauses.append(
            or_(
                func.lower(EmployeeRecord.first_name).contains(needle, autoescape=True),
                func.lower(EmployeeRecord.last_name).contains(needle, autoescape=True),
                func.lower(EmployeeRecord.email).contains(needle, autoescape=True),
            )
        )

    if query.department_id is not None:
        clauses.append(EmployeeRecord.department_id == int(query.department_id))

    # Rows that slipped past validation never show up in listings.
    clauses.append(EmployeeRecord.salary > 0)
    clauses.append(EmployeeRecord.hire_date <= query.as_of)
    return clauses


def build_ordering(sort_field: SortField, direction: SortDirection) -> list:
    column = SORT_COLUMNS.get(sort_field)
    if column is None:
        ordering = [EmployeeRecord.last_name.asc(), EmployeeRecord.first_name.asc()]
    elif direction == SortDirection.DESC:
        ordering = [column.desc()]
    else:
        ordering = [column.asc()]

    # Stable pages when the sort key has ties.
    ordering.append(EmployeeRecord.id.asc())
    return ordering


class SqlAlchemyEmployeeRepository(EmployeeRepository):
    def __init__(self, db: SQLAlchemy):
        self._db = db

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        record = self._db.session.execute(
            select(EmployeeRecord)
            .options(joinedload(EmployeeRecord.department))
            .where(EmployeeRecord.id == int(employee_id))
        ).scalar_one_or_none()
        return _to_model(record) if record else None

    def find_page(self, query: EmployeeQuery) -> tuple[int, Sequence[Employee]]:
        clauses = build_filters(query)

        total = self._db.session.execute(
            select(func.count(EmployeeRecord.id)).where(*clauses)
        ).scalar_one()

        records = self._db.session.execute(
            select(EmployeeRecord)
            .options(joinedload(EmployeeRecord.department))
            .where(*clauses)
            .order_by(*build_ordering(query.sort_field, query.sort_direction))
            .offset(query.offset)
            .limit(query.page_size)
        ).scalars().all()

        return int(total), [_to_model(r) for r in records]

    def add(self, employee: Employee) -> int:
        with unit_of_work() as session:
            record = EmployeeRecord(
                first_name=employee.first_name,
                last_name=employee.last_name,
                email=employee.email,
                hire_date=employee.hire_date,
                salary=employee.salary,
                department_id=employee.department_id,
            )
            session.add(record)
            session.flush()
            return int(record.id)

    def update(self, employee: Employee) -> bool:
        with unit_of_work() as session:
            record = session.get(EmployeeRecord, int(employee.id))
            if record is None:
                return False

            record.first_name = employee.first_name
            record.last_name = employee.last_name
            record.email = employee.email
            record.hire_date = employee.hire_date
            record.salary = employee.salary
            record.department_id = employee.department_id
            return True

    def delete_by_id(self, employee_id: int) -> bool:
        with unit_of_work() as session:
            result = session.execute(delete(EmployeeRecord).where(EmployeeRecord.id == int(employee_id)))
            return result.rowcount > 0
