from __future__ import annotations

import logging

from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError

from ..common.datetime_utils import parse_iso_date
from ..extensions import db
from ..models.employee import Employee
from ..services.employee_service import EmployeeService

logger = logging.getLogger(__name__)

# (firstname, lastname, email, age, hire_date, active)
SEED_EMPLOYEES = (
    ("John", "Doe", "jd@example.com", 32, "2012-03-03", True),
    ("Mary", "Doe", "md@example.com", 38, "2016-06-07", True),
    ("Jane", "Tanaka", "jt@example.com", 32, "2015-09-12", False),
    ("Alex", "Brown", "ab@example.com", 29, "2019-01-03", True),
    ("James", "White", "jw@example.com", 24, "2021-02-04", True),
    ("Harold", "Ishida", "hi@example.com", 52, "2002-03-06", False),
    ("Scarlett", "Winter", "sw@example.com", 22, "2021-04-07", True),
    ("Emily", "Vill", "ev@example.com", 27, "2019-06-09", True),
    ("Mary", "Park", "mp@example.com", 30, "2021-08-11", True),
)


def init_db() -> None:
    """Create missing tables. Safe to call repeatedly."""
    db.create_all()
    logger.info("Database ready (tables=%s)", list_tables())


def list_tables() -> list[str]:
    return sorted(inspect(db.engine).get_table_names())


def seed_employees() -> int:
    """Truncate the employee table and insert the fixed demo employees.

    Returns the number of inserted rows.
    """
    employees = [
        EmployeeService.build_employee(
            firstname=firstname,
            lastname=lastname,
            email=email,
            age=age,
            hire_date=parse_iso_date(hire_date),
            active=active,
        )
        for firstname, lastname, email, age, hire_date, active in SEED_EMPLOYEES
    ]

    try:
        deleted = db.session.query(Employee).delete()
        db.session.add_all(employees)
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception("Seeding employees failed, rolled back")
        raise

    logger.info("Seeded employees (deleted=%s, inserted=%s)", deleted, len(employees))
    return len(employees)
