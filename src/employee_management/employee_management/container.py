from __future__ import annotations

from dataclasses import dataclass

from flask_sqlalchemy import SQLAlchemy

from .dashboard.service import DashboardService
from .departments.service import DepartmentService
from .departments.sqlalchemy_department_repository import SqlAlchemyDepartmentRepository
from .employees.service import EmployeeService
from .employees.sqlalchemy_employee_repository import SqlAlchemyEmployeeRepository


@dataclass(frozen=True)
class Container:
    departments_repo: SqlAlchemyDepartmentRepository
    employees_repo: SqlAlchemyEmployeeRepository

    department_service: DepartmentService
    employee_service: EmployeeService
    dashboard_service: DashboardService


def build_container(*, db: SQLAlchemy) -> Container:
    departments_repo = SqlAlchemyDepartmentRepository(db)
    employees_repo = SqlAlchemyEmployeeRepository(db)

    department_service = DepartmentService(departments_repo)
    employee_service = EmployeeService(employees_repo)
    dashboard_service = DashboardService(employee_service, department_service)

    return Container(
        departments_repo=departments_repo,
        employees_repo=employees_repo,
        department_service=department_service,
        employee_service=employee_service,
        dashboard_service=dashboard_service,
    )
