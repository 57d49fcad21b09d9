"""Example: run the employee queries from a script (no HTTP).

Seeds the demo employees, then prints the results of a few queries.
"""

import sys
from datetime import date
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from employee_records import create_app
from employee_records.database.bootstrap import init_db, seed_employees
from employee_records.services.employee_service import EmployeeService


def main():
    app = create_app()
    with app.app_context():
        init_db()
        seed_employees()

        print("All:", EmployeeService.list_all())
        print("Named Mary:", EmployeeService.filter_by_firstname("Mary"))
        print("Out of office:", EmployeeService.list_inactive())
        print("Older than 32:", EmployeeService.older_than(32))
        print("Aged 32 or 52:", EmployeeService.with_ages([32, 52]))
        print("Hired 2019-2021:", EmployeeService.hired_between(date(2019, 1, 1), date(2021, 12, 31)))
        print("Newest hires first:", EmployeeService.ordered_by_hire_date(descending=True))
        print("Three youngest:", EmployeeService.youngest(3))
        print(f"Active {EmployeeService.count_active()} of {EmployeeService.count_all()}")

        page = EmployeeService.paginate(page=2, per_page=3)
        print(f"Page {page.page}/{page.pages}:", page.items)


if __name__ == "__main__":
    main()
