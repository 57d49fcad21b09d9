from __future__ import annotations

from employee_records.models.employee import Employee


def test_seed_db_command(app):
    runner = app.test_cli_runner()

    result = runner.invoke(args=["seed-db"])

    assert result.exit_code == 0
    assert "seeded 9 employees" in result.output
    with app.app_context():
        assert Employee.query.count() == 9


def test_init_db_command(app):
    result = app.test_cli_runner().invoke(args=["init-db"])

    assert result.exit_code == 0
    assert "employee" in result.output
