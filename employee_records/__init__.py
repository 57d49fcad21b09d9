"""Employee records package.

A Flask app that lists employees stored through Flask-SQLAlchemy, with a
small service layer for queries and a seeding step for demo data.
"""
from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .extensions import db
from .logging_config import configure_app_logging

logger = logging.getLogger(__name__)


def create_app(settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    app.config.from_object(importlib.import_module(settings_module))

    configure_app_logging(app.config.get("LOG_LEVEL", "INFO"))
    logger.info("Starting with settings=%s db=%s", settings_module, app.config["SQLALCHEMY_DATABASE_URI"])

    _ensure_sqlite_dir(app.config["SQLALCHEMY_DATABASE_URI"])
    db.init_app(app)

    # Import models so SQLAlchemy knows about the tables
    from .models.employee import Employee  # noqa: F401

    from .controllers.home import home_bp
    from .cli import register_commands

    app.register_blueprint(home_bp)
    register_commands(app)

    with app.app_context():
        from .database.bootstrap import init_db, seed_employees

        if app.config.get("AUTO_INIT_DB", False):
            init_db()
        if app.config.get("AUTO_SEED_DB", False):
            seed_employees()

    return app


def _ensure_sqlite_dir(uri: str) -> None:
    # sqlite cannot create the parent folder of the database file on its own
    prefix = "sqlite:///"
    if uri.startswith(prefix) and ":memory:" not in uri:
        Path(uri[len(prefix):]).parent.mkdir(parents=True, exist_ok=True)
