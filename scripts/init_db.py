from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from employee_records import create_app
from employee_records.database.bootstrap import init_db, list_tables


def main() -> None:
    app = create_app()
    with app.app_context():
        init_db()
        tables = list_tables()

    print(f"OK: Created tables -> {app.config['SQLALCHEMY_DATABASE_URI']} (tables={len(tables)})")


if __name__ == "__main__":
    main()
