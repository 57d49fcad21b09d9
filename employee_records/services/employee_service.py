from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, List, Optional

from sqlalchemy.exc import IntegrityError

from employee_records.common.validators import (
    require_bool,
    require_date,
    require_email,
    require_max_length,
    require_non_empty,
    require_positive_int,
)
from employee_records.core.constants import DEFAULT_PER_PAGE, EMAIL_MAX_LENGTH, NAME_MAX_LENGTH
from employee_records.core.exceptions import ValidationError
from employee_records.extensions import db
from employee_records.models.employee import Employee

logger = logging.getLogger(__name__)


class EmployeeService:
    """Read/write helpers over the Employee model.

    Every query goes through Flask-SQLAlchemy, so these must be called
    inside an application context.
    """

    # --- Reads ---
    @staticmethod
    def list_all() -> List[Employee]:
        return Employee.query.all()

    @staticmethod
    def get_by_id(employee_id: int) -> Optional[Employee]:
        return db.session.get(Employee, employee_id)

    @staticmethod
    def get_by_email(email: str) -> Optional[Employee]:
        return Employee.query.filter_by(email=email).first()

    @staticmethod
    def filter_by_firstname(firstname: str) -> List[Employee]:
        return Employee.query.filter_by(firstname=firstname).all()

    @staticmethod
    def list_active() -> List[Employee]:
        return Employee.query.filter_by(active=True).all()

    @staticmethod
    def list_inactive() -> List[Employee]:
        return Employee.query.filter_by(active=False).all()

    @staticmethod
    def older_than(age: int) -> List[Employee]:
        return Employee.query.filter(Employee.age > age).all()

    @staticmethod
    def with_ages(ages: Iterable[int]) -> List[Employee]:
        return Employee.query.filter(Employee.age.in_(list(ages))).all()

    @staticmethod
    def hired_between(start: date, end: date) -> List[Employee]:
        # inclusive on both ends
        return Employee.query.filter(Employee.hire_date.between(start, end)).order_by(Employee.hire_date).all()

    @staticmethod
    def ordered_by_hire_date(descending: bool = False) -> List[Employee]:
        column = Employee.hire_date.desc() if descending else Employee.hire_date
        return Employee.query.order_by(column, Employee.id).all()

    @staticmethod
    def youngest(limit: int) -> List[Employee]:
        return Employee.query.order_by(Employee.age, Employee.id).limit(limit).all()

    @staticmethod
    def count_all() -> int:
        return Employee.query.count()

    @staticmethod
    def count_active() -> int:
        return Employee.query.filter_by(active=True).count()

    @staticmethod
    def paginate(page: int = 1, per_page: int = DEFAULT_PER_PAGE, active: Optional[bool] = None):
        """Page through employees ordered by id.

        Pages past the end abort with 404 (Flask-SQLAlchemy ``error_out``).
        """
        query = Employee.query
        if active is not None:
            query = query.filter_by(active=active)
        return query.order_by(Employee.id).paginate(page=page, per_page=per_page, error_out=True)

    # --- Writes ---
    @staticmethod
    def build_employee(
        *,
        firstname: str,
        lastname: str,
        email: str,
        age: int,
        hire_date: date,
        active: bool,
    ) -> Employee:
        """Validate the fields and return a transient Employee (not added to the session)."""
        firstname = require_max_length(require_non_empty(firstname, "First name"), "First name", NAME_MAX_LENGTH)
        lastname = require_max_length(require_non_empty(lastname, "Last name"), "Last name", NAME_MAX_LENGTH)
        email = require_max_length(require_email(email), "Email", EMAIL_MAX_LENGTH)

        return Employee(
            firstname=firstname,
            lastname=lastname,
            email=email,
            age=require_positive_int(age, "Age"),
            hire_date=require_date(hire_date, "Hire date"),
            active=require_bool(active, "Active"),
        )

    @staticmethod
    def create_employee(**fields) -> Employee:
        employee = EmployeeService.build_employee(**fields)
        email = employee.email
        db.session.add(employee)
        try:
            db.session.commit()
        except IntegrityError:
            db.session.rollback()
            logger.warning("Rejected employee with duplicate email %s", email)
            raise ValidationError(f"Email {email} is already in use")

        logger.info("Created employee id=%s email=%s", employee.id, employee.email)
        return employee
