from __future__ import annotations

from .connection import db


class DepartmentRecord(db.Model):
    __tablename__ = "departments"

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    name = db.Column(db.String(100), nullable=False, unique=True)

    # No employees relationship: membership is always queried through employees.department_id.

    def __repr__(self) -> str:
        return f"<DepartmentRecord {self.id} {self.name!r}>"


class EmployeeRecord(db.Model):
    __tablename__ = "employees"

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    first_name = db.Column(db.String(100), nullable=False)
    last_name = db.Column(db.String(100), nullable=False)
    email = db.Column(db.String(255), nullable=False)
    hire_date = db.Column(db.Date, nullable=False, index=True)
    salary = db.Column(db.Numeric(18, 2), nullable=False)
    department_id = db.Column(
        db.Integer,
        db.ForeignKey("departments.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )

    department = db.relationship(DepartmentRecord, lazy="joined")

    def __repr__(self) -> str:
        return f"<EmployeeRecord {self.id} {self.last_name}, {self.first_name}>"
