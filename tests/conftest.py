"""
Pytest fixtures for the test suite.

Each test gets a fresh app bound to an in-memory SQLite database
(`config.testing`), so tests do not affect each other.
"""
from __future__ import annotations

import pytest

from employee_records import create_app
from employee_records.database.bootstrap import seed_employees


@pytest.fixture
def app():
    """Create an app with empty tables."""
    return create_app("config.testing")


@pytest.fixture
def app_ctx(app):
    with app.app_context():
        yield app


@pytest.fixture
def seeded(app_ctx):
    """App context with the nine demo employees loaded."""
    seed_employees()
    return app_ctx


@pytest.fixture
def client(app):
    return app.test_client()
