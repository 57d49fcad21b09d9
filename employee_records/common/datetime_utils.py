from __future__ import annotations

from datetime import date, datetime


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def format_hire_date(value: date) -> str:
    """Human friendly date used on the employee cards, e.g. 2012-03-03."""
    return value.strftime("%Y-%m-%d")
