from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..common.validators import require_max_length, require_non_empty
from ..core.constants import DEPARTMENT_NAME_MAX_LENGTH
from ..core.exceptions import DepartmentInUseError, ValidationError
from .model import Department
from .repository import DepartmentRepository

logger = logging.getLogger(__name__)


class DepartmentService:
    """Use cases for departments: basic CRUD plus the in-use delete guard."""

    def __init__(self, departments: DepartmentRepository):
        self._departments = departments

    def get_all(self) -> Sequence[Department]:
        return self._departments.list_all()

    def get_by_id(self, department_id: int) -> Optional[Department]:
        return self._departments.get_by_id(int(department_id))

    def _clean_name(self, name: str, *, current_id: Optional[int] = None) -> str:
        name = require_max_length(require_non_empty(name, "name"), "name", DEPARTMENT_NAME_MAX_LENGTH)

        existing = self._departments.get_by_name(name)
        if existing and existing.id != current_id:
            raise ValidationError(
                f"Department '{name}' already exists",
                {"name": f"Department '{name}' already exists"},
            )
        return name

    def create(self, department: Department) -> Department:
        name = self._clean_name(department.name)
        department_id = self._departments.create(name=name)
        logger.info("Created department %s (%s)", department_id, name)
        return Department(id=department_id, name=name, employee_count=0)

    def update(self, department: Department) -> bool:
        if department.id is None:
            raise ValidationError("Department id is required", {"id": "Department id is required"})

        name = self._clean_name(department.name, current_id=department.id)
        updated = self._departments.update(department_id=int(department.id), name=name)
        if updated:
            logger.info("Updated department %s (%s)", department.id, name)
        return updated

    def delete(self, department_id: int) -> None:
        """Delete a department; missing ids are a no-op.

        Raises DepartmentInUseError while any employee references it.
        """

        employee_count = self._departments.count_employees(int(department_id))
        if employee_count > 0:
            raise DepartmentInUseError(int(department_id), employee_count)

        if self._departments.delete_by_id(int(department_id)):
            logger.info("Deleted department %s", department_id)
