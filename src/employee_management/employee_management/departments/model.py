from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Department:
    """Domain entity: Department.

    ``employee_count`` is derived from the employees table when the department
    repository loads the department; it is never written back. Departments
    built elsewhere (nested in an employee, or from a form) leave it unset.
    """

    id: Optional[int]
    name: str
    employee_count: Optional[int] = None
