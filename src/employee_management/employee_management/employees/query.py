from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional


class SortField(str, Enum):
    """Sortable employee columns, keyed by the lower-cased field name clients send."""

    SALARY = "salary"
    HIRE_DATE = "hiredate"
    FIRST_NAME = "firstname"
    LAST_NAME = "lastname"
    EMAIL = "email"
    # Last name then first name, always ascending.
    DEFAULT = "default"

    @classmethod
    def parse(cls, value: Optional[str]) -> "SortField":
        key = (value or "").strip().lower()
        if key == cls.DEFAULT.value:
            return cls.DEFAULT
        try:
            return cls(key)
        except ValueError:
            return cls.DEFAULT


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, value: Optional[str]) -> "SortDirection":
        # Anything other than "desc" sorts ascending.
        return cls.DESC if (value or "").strip().lower() == cls.DESC.value else cls.ASC


@dataclass(frozen=True)
class EmployeeQuery:
    """Criteria for one page of the employee listing."""

    as_of: date
    page: int = 1
    page_size: int = 10
    search: Optional[str] = None
    department_id: Optional[int] = None
    sort_field: SortField = SortField.DEFAULT
    sort_direction: SortDirection = SortDirection.ASC

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size

    @property
    def search_text(self) -> Optional[str]:
        if self.search is None or not self.search.strip():
            return None
        return self.search
