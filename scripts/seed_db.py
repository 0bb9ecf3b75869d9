from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from src.employee_management.employee_management import create_app
from src.employee_management.employee_management.database.bootstrap import seed_departments
from src.employee_management.employee_management.database.connection import describe_database


def main() -> None:
    app = create_app({"AUTO_INIT_DB": False})
    with app.app_context():
        inserted = seed_departments()

    print(
        f"OK: Seeded {len(inserted)} department(s) -> "
        f"{describe_database(app.config['SQLALCHEMY_DATABASE_URI'])}"
    )


if __name__ == "__main__":
    main()
