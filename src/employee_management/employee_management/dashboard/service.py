from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, timedelta
from decimal import Decimal
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import today_local
from ..core.constants import DASHBOARD_LIST_LIMIT, RECENT_HIRE_DAYS, UNBOUNDED_PAGE_SIZE
from ..departments.service import DepartmentService
from ..employees.model import Employee
from ..employees.query import SortDirection, SortField
from ..employees.service import EmployeeService


@dataclass(frozen=True)
class DepartmentStat:
    department_name: str
    employee_count: int


@dataclass(frozen=True)
class DashboardStats:
    total_employees: int
    average_salary: Decimal
    department_stats: Sequence[DepartmentStat] = field(default_factory=tuple)
    recent_hires: Sequence[Employee] = field(default_factory=tuple)
    search_results: Sequence[Employee] = field(default_factory=tuple)
    search_term: Optional[str] = None


def _matches(employee: Employee, needle: str) -> bool:
    needle = needle.casefold()
    return (
        needle in employee.first_name.casefold()
        or needle in employee.last_name.casefold()
        or needle in employee.email.casefold()
    )


class DashboardService:
    """Read-only statistics computed from the full employee listing.

    The whole listing is pulled through a single unbounded page; fine for the
    sizes this app targets, not for large datasets.
    """

    def __init__(
        self,
        employees: EmployeeService,
        departments: DepartmentService,
        *,
        clock: Callable[[], date] = today_local,
    ):
        self._employees = employees
        self._departments = departments
        self._clock = clock

    def build(self, search: Optional[str] = None) -> DashboardStats:
        everyone = self._employees.get_paged(
            None, 1, UNBOUNDED_PAGE_SIZE, SortField.LAST_NAME.value, SortDirection.ASC.value, None
        ).items

        total = len(everyone)
        average = sum((e.salary for e in everyone), Decimal("0")) / total if total else Decimal("0")

        department_stats = sorted(
            (DepartmentStat(department_name=d.name, employee_count=d.employee_count) for d in self._departments.get_all()),
            key=lambda s: s.employee_count,
            reverse=True,
        )

        cutoff = self._clock() - timedelta(days=RECENT_HIRE_DAYS)
        recent_hires = sorted(
            (e for e in everyone if e.hire_date >= cutoff),
            key=lambda e: e.hire_date,
            reverse=True,
        )[:DASHBOARD_LIST_LIMIT]

        search_results: list[Employee] = []
        search_term = None
        if search and search.strip():
            search_term = search
            search_results = [e for e in everyone if _matches(e, search)][:DASHBOARD_LIST_LIMIT]

        return DashboardStats(
            total_employees=total,
            average_salary=average,
            department_stats=department_stats,
            recent_hires=recent_hires,
            search_results=search_results,
            search_term=search_term,
        )
