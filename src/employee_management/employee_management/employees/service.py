from __future__ import annotations

import dataclasses
import logging
from datetime import date
from typing import Callable, Optional

from ..common.datetime_utils import today_local
from ..common.paging import PagedResult
from ..core.exceptions import BusinessRuleError, DomainError, QueryFailedError, ValidationError
from .model import Employee
from .query import EmployeeQuery, SortDirection, SortField
from .repository import EmployeeRepository
from .validation import check_employee_business_rules

logger = logging.getLogger(__name__)


class EmployeeService:
    def __init__(self, employees: EmployeeRepository, *, clock: Callable[[], date] = today_local):
        self._employees = employees
        self._clock = clock

    def get_paged(
        self,
        search: Optional[str],
        page: int,
        page_size: int,
        sort_by: Optional[str],
        sort_dir: Optional[str],
        department_id: Optional[int] = None,
    ) -> PagedResult[Employee]:
        """Filtered, sorted page of employees.

        Store failures surface as a single QueryFailedError chained to the cause.
        """

        if int(page) < 1:
            raise ValidationError("Page must be at least 1", {"page": "Page must be at least 1"})
        if int(page_size) < 1:
            raise ValidationError("Page size must be at least 1", {"pageSize": "Page size must be at least 1"})

        query = EmployeeQuery(
            as_of=self._clock(),
            page=int(page),
            page_size=int(page_size),
            search=search,
            department_id=department_id,
            sort_field=SortField.parse(sort_by),
            sort_direction=SortDirection.parse(sort_dir),
        )

        try:
            total, items = self._employees.find_page(query)
        except DomainError:
            raise
        except Exception as exc:
            logger.exception("Employee listing failed (query=%r)", query)
            raise QueryFailedError(f"Error retrieving employees: {exc}") from exc

        return PagedResult(total_count=total, items=list(items), page=query.page, page_size=query.page_size)

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        return self._employees.get_by_id(int(employee_id))

    def _enforce_business_rules(self, employee: Employee) -> None:
        violations = check_employee_business_rules(
            salary=employee.salary, hire_date=employee.hire_date, today=self._clock()
        )
        if violations:
            raise BusinessRuleError(" ".join(violations.values()))

    def create(self, employee: Employee) -> Employee:
        self._enforce_business_rules(employee)

        employee_id = self._employees.add(employee)
        logger.info("Created employee %s (%s)", employee_id, employee.email)

        stored = self._employees.get_by_id(employee_id)
        return stored or dataclasses.replace(employee, id=employee_id)

    def update(self, employee: Employee) -> bool:
        """Replace the stored record (last write wins). False when the id does not exist."""
        if employee.id is None:
            raise ValidationError("Employee id is required", {"id": "Employee id is required"})

        self._enforce_business_rules(employee)

        updated = self._employees.update(employee)
        if updated:
            logger.info("Updated employee %s", employee.id)
        return updated

    def delete(self, employee_id: int) -> None:
        # Deleting an unknown id is not an error.
        if self._employees.delete_by_id(int(employee_id)):
            logger.info("Deleted employee %s", employee_id)
