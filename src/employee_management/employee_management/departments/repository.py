from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Department


class DepartmentRepository(Protocol):
    """Repository interface for Department.

    Services depend on this protocol, not on a concrete store.
    """

    def list_all(self) -> Sequence[Department]:
        """All departments ordered by name, with employee counts."""

        raise NotImplementedError

    def get_by_id(self, department_id: int) -> Optional[Department]:
        raise NotImplementedError

    def get_by_name(self, name: str) -> Optional[Department]:
        """Case-insensitive lookup by name."""

        raise NotImplementedError

    def create(self, *, name: str) -> int:
        raise NotImplementedError

    def update(self, *, department_id: int, name: str) -> bool:
        raise NotImplementedError

    def delete_by_id(self, department_id: int) -> bool:
        raise NotImplementedError

    def count_employees(self, department_id: int) -> int:
        raise NotImplementedError
