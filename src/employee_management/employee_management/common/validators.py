from __future__ import annotations

from ..core.exceptions import ValidationError


def require_non_empty(value: str | None, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required", {field_name: f"{field_name} is required"})
    return value.strip()


def require_max_length(value: str, field_name: str, max_len: int) -> str:
    if len(value) > max_len:
        raise ValidationError(
            f"{field_name} must be at most {max_len} characters",
            {field_name: f"{field_name} must be at most {max_len} characters"},
        )
    return value
