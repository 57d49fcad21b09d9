from __future__ import annotations

import click
from flask import Flask

from .core.exceptions import DomainError
from .database.bootstrap import init_db, list_tables, seed_employees


def register_commands(app: Flask) -> None:
    @app.cli.command("init-db")
    def init_db_command():
        """Create the database tables if they do not exist."""
        init_db()
        click.echo(f"OK: tables={', '.join(list_tables())}")

    @app.cli.command("seed-db")
    def seed_db_command():
        """Delete every employee and insert the demo employees."""
        init_db()
        try:
            inserted = seed_employees()
        except DomainError as e:
            raise click.ClickException(str(e))
        click.echo(f"OK: seeded {inserted} employees")
