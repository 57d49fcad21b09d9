from __future__ import annotations

from datetime import date

import pytest
from sqlalchemy.exc import IntegrityError

from employee_records.extensions import db
from employee_records.models.employee import Employee


def _employee(**overrides) -> Employee:
    fields = dict(
        firstname="Ada",
        lastname="Lovelace",
        email="al@example.com",
        age=36,
        hire_date=date(2020, 1, 15),
        active=True,
    )
    fields.update(overrides)
    return Employee(**fields)


def test_status_label_follows_active_flag():
    assert _employee(active=True).status_label == "Active"
    assert _employee(active=False).status_label == "Out of Office"


def test_full_name_and_repr():
    emp = _employee()
    assert emp.full_name == "Ada Lovelace"
    assert repr(emp) == "<Employee Ada Lovelace>"


def test_id_is_generated(app_ctx):
    emp = _employee()
    db.session.add(emp)
    db.session.commit()

    assert isinstance(emp.id, int)


def test_email_must_be_unique(app_ctx):
    db.session.add(_employee())
    db.session.commit()

    db.session.add(_employee(firstname="Other"))
    with pytest.raises(IntegrityError):
        db.session.commit()
    db.session.rollback()

    assert Employee.query.count() == 1


@pytest.mark.parametrize("field", ["firstname", "lastname", "email", "age", "hire_date", "active"])
def test_fields_are_not_nullable(app_ctx, field):
    db.session.add(_employee(**{field: None}))
    with pytest.raises(IntegrityError):
        db.session.commit()
    db.session.rollback()


def test_table_name(app_ctx):
    assert Employee.__tablename__ == "employee"
