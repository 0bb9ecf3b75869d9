from __future__ import annotations

from typing import Mapping, Optional


def int_arg(args: Mapping[str, str], name: str, default: int, *, minimum: int = 1, maximum: Optional[int] = None) -> int:
    """Read a positive int query parameter, falling back to ``default`` when missing or malformed."""
    raw = (args.get(name) or "").strip()
    try:
        value = int(raw)
    except ValueError:
        return default
    if value < minimum:
        return default
    if maximum is not None and value > maximum:
        return maximum
    return value


def optional_int_arg(args: Mapping[str, str], name: str) -> Optional[int]:
    raw = (args.get(name) or "").strip()
    return int(raw) if raw.isdigit() else None
