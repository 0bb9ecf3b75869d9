from __future__ import annotations

from datetime import date, datetime


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def today_local() -> date:
    """Current date in the server's local timezone.

    Note: Wrapped so services can take it as an injectable clock in tests.
    """
    return date.today()
