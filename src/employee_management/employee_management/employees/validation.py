"""Input validation for employee forms.

Field-level checks live in :func:`validate_employee_form`. The two semantic
rules (positive salary, hire date not in the future) live in
:func:`check_employee_business_rules`, which the service also calls before
every write.
"""

from __future__ import annotations

import re
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Collection, Mapping, Optional

from ..common.datetime_utils import parse_iso_date
from ..core.constants import MIN_HIRE_DATE
from ..core.exceptions import ValidationError
from .model import Employee

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")

MIN_SALARY = Decimal("0.01")

FIELD_LABELS = {
    "first_name": "First name",
    "last_name": "Last name",
    "email": "Email",
    "hire_date": "Hire date",
    "salary": "Salary",
    "department_id": "Department",
}


def check_employee_business_rules(*, salary: Decimal, hire_date: date, today: date) -> dict[str, str]:
    """Return field -> message for every broken rule; empty when the record is acceptable."""
    violations: dict[str, str] = {}
    if salary <= 0:
        violations["salary"] = "Salary must be greater than 0."
    if hire_date > today:
        violations["hire_date"] = "Hire date cannot be in the future."
    return violations


def _required(form: Mapping[str, str], name: str, errors: dict[str, str]) -> Optional[str]:
    value = (form.get(name) or "").strip()
    if not value:
        errors[name] = f"{FIELD_LABELS[name]} is required."
        return None
    return value


def _parse_hire_date(raw: str, errors: dict[str, str]) -> Optional[date]:
    try:
        hire_date = parse_iso_date(raw)
    except ValueError:
        errors["hire_date"] = "Hire date must be a date (YYYY-MM-DD)."
        return None

    if hire_date < MIN_HIRE_DATE:
        errors["hire_date"] = "The date cannot be before 1950."
        return None
    return hire_date


def _parse_salary(raw: str, errors: dict[str, str]) -> Optional[Decimal]:
    try:
        salary = Decimal(raw)
    except InvalidOperation:
        errors["salary"] = "Salary must be a number."
        return None

    if not salary.is_finite():
        errors["salary"] = "Salary must be a number."
        return None
    if salary.as_tuple().exponent < -2:
        errors["salary"] = "Salary can have at most 2 decimal places."
        return None
    if salary < MIN_SALARY:
        errors["salary"] = "Salary must be greater than 0."
        return None
    return salary


def validate_employee_form(
    form: Mapping[str, str],
    *,
    department_ids: Collection[int],
    today: date,
    employee_id: Optional[int] = None,
) -> Employee:
    """Turn submitted form fields into an Employee, or raise ValidationError with per-field messages."""

    errors: dict[str, str] = {}

    first_name = _required(form, "first_name", errors)
    last_name = _required(form, "last_name", errors)

    email = _required(form, "email", errors)
    if email is not None and not EMAIL_PATTERN.match(email):
        errors["email"] = "Please enter a valid email address (e.g., user@domain.com)"
        email = None

    hire_date = None
    raw_hire_date = _required(form, "hire_date", errors)
    if raw_hire_date is not None:
        hire_date = _parse_hire_date(raw_hire_date, errors)

    salary = None
    raw_salary = _required(form, "salary", errors)
    if raw_salary is not None:
        salary = _parse_salary(raw_salary, errors)

    department_id = None
    raw_department = _required(form, "department_id", errors)
    if raw_department is not None:
        if raw_department.isdigit() and int(raw_department) in department_ids:
            department_id = int(raw_department)
        else:
            errors["department_id"] = "Please choose an existing department."

    if salary is not None and hire_date is not None:
        for name, message in check_employee_business_rules(salary=salary, hire_date=hire_date, today=today).items():
            errors.setdefault(name, message)

    if errors:
        raise ValidationError("Please correct the highlighted fields.", errors)

    return Employee(
        id=employee_id,
        first_name=first_name,
        last_name=last_name,
        email=email,
        hire_date=hire_date,
        salary=salary,
        department_id=department_id,
    )
