from __future__ import annotations

from typing import Mapping, Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid.

    ``errors`` maps a form field name to its message; an empty mapping means
    the error is not tied to a single field.
    """

    def __init__(self, message: str, errors: Optional[Mapping[str, str]] = None):
        super().__init__(message)
        self.errors: dict[str, str] = dict(errors or {})


class BusinessRuleError(DomainError):
    """Raised by a service when a record breaks a semantic rule (e.g. salary <= 0)."""


class ReferentialIntegrityError(DomainError):
    """Raised when a delete would orphan dependent records."""


class DepartmentInUseError(ReferentialIntegrityError):
    def __init__(self, department_id: int, employee_count: int):
        super().__init__(
            f"Department {department_id} cannot be deleted: {employee_count} employee(s) still assigned"
        )
        self.department_id = department_id
        self.employee_count = employee_count


class QueryFailedError(DomainError):
    """Raised when the employee listing query fails in the store."""
