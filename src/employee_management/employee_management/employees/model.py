from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from ..departments.model import Department


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    ``department_id`` is typed optional so a draft can exist before a
    department is chosen; persisted employees always carry one.
    """

    id: Optional[int]
    first_name: str
    last_name: str
    email: str
    hire_date: date
    salary: Decimal
    department_id: Optional[int]
    department: Optional[Department] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
