from __future__ import annotations

from typing import Optional, Sequence

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import delete, func, select

from ..database.session import unit_of_work
from ..database.tables import DepartmentRecord, EmployeeRecord
from .model import Department
from .repository import DepartmentRepository


class SqlAlchemyDepartmentRepository(DepartmentRepository):
    def __init__(self, db: SQLAlchemy):
        self._db = db

    def _counts_query(self):
        counts = (
            select(EmployeeRecord.department_id, func.count(EmployeeRecord.id).label("employee_count"))
            .group_by(EmployeeRecord.department_id)
            .subquery()
        )
        return select(DepartmentRecord, func.coalesce(counts.c.employee_count, 0)).outerjoin(
            counts, counts.c.department_id == DepartmentRecord.id
        )

    @staticmethod
    def _to_model(record: DepartmentRecord, employee_count: int = 0) -> Department:
        return Department(id=int(record.id), name=record.name, employee_count=int(employee_count))

    def list_all(self) -> Sequence[Department]:
        rows = self._db.session.execute(self._counts_query().order_by(DepartmentRecord.name)).all()
        return [self._to_model(rec, cnt) for rec, cnt in rows]

    def get_by_id(self, department_id: int) -> Optional[Department]:
        row = self._db.session.execute(
            self._counts_query().where(DepartmentRecord.id == int(department_id))
        ).first()
        if not row:
            return None
        return self._to_model(row[0], row[1])

    def get_by_name(self, name: str) -> Optional[Department]:
        row = self._db.session.execute(
            self._counts_query().where(func.lower(DepartmentRecord.name) == name.strip().lower())
        ).first()
        if not row:
            return None
        return self._to_model(row[0], row[1])

    def create(self, *, name: str) -> int:
        with unit_of_work() as session:
            record = DepartmentRecord(name=name)
            session.add(record)
            session.flush()
            return int(record.id)

    def update(self, *, department_id: int, name: str) -> bool:
        with unit_of_work() as session:
            record = session.get(DepartmentRecord, int(department_id))
            if record is None:
                return False
            record.name = name
            return True

    def delete_by_id(self, department_id: int) -> bool:
        with unit_of_work() as session:
            result = session.execute(delete(DepartmentRecord).where(DepartmentRecord.id == int(department_id)))
            return result.rowcount > 0

    def count_employees(self, department_id: int) -> int:
        return int(
            self._db.session.execute(
                select(func.count(EmployeeRecord.id)).where(EmployeeRecord.department_id == int(department_id))
            ).scalar_one()
        )
