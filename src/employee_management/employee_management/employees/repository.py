from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee
from .query import EmployeeQuery


class EmployeeRepository(Protocol):
    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        """Employee with its department populated, or None."""

        raise NotImplementedError

    def find_page(self, query: EmployeeQuery) -> tuple[int, Sequence[Employee]]:
        """Apply filters, sort and paging.

        Returns (total match count before paging, items of the requested page).
        """

        raise NotImplementedError

    def add(self, employee: Employee) -> int:
        raise NotImplementedError

    def update(self, employee: Employee) -> bool:
        """Replace every field of an existing employee. False if the id is unknown."""

        raise NotImplementedError

    def delete_by_id(self, employee_id: int) -> bool:
        raise NotImplementedError
