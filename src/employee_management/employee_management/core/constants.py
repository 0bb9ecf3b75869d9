"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import date

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100

# Dashboard scans the whole employee set through one page of this size.
UNBOUNDED_PAGE_SIZE = 2**31 - 1

RECENT_HIRE_DAYS = 30
DASHBOARD_LIST_LIMIT = 10

MIN_HIRE_DATE = date(1950, 1, 1)

DEPARTMENT_NAME_MAX_LENGTH = 100
SEED_DEPARTMENTS = ("IT", "HR", "Finance", "Marketing")
