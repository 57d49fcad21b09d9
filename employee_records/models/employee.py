from employee_records.core.constants import (
    EMAIL_MAX_LENGTH,
    NAME_MAX_LENGTH,
    STATUS_ACTIVE,
    STATUS_OUT_OF_OFFICE,
)
from employee_records.extensions import db


class Employee(db.Model):
    __tablename__ = 'employee'

    id = db.Column(db.Integer, primary_key=True)
    firstname = db.Column(db.String(NAME_MAX_LENGTH), nullable=False)
    lastname = db.Column(db.String(NAME_MAX_LENGTH), nullable=False)
    email = db.Column(db.String(EMAIL_MAX_LENGTH), unique=True, nullable=False)
    age = db.Column(db.Integer, nullable=False)
    hire_date = db.Column(db.Date, nullable=False)
    active = db.Column(db.Boolean, nullable=False)  # currently employed / in office

    @property
    def full_name(self):
        return f'{self.firstname} {self.lastname}'

    @property
    def status_label(self):
        return STATUS_ACTIVE if self.active else STATUS_OUT_OF_OFFICE

    def __repr__(self):
        return f'<Employee {self.firstname} {self.lastname}>'
