"""Test fixtures: sample DDL and seed rows for the SQLite integration tests."""

from __future__ import annotations

from pathlib import Path

_FIXTURES_DIR = Path(__file__).parent

EMPLOYEES = [
    (1, "Larry", 45, 1, None),
    (2, "Curly", 38, 1, 1),
    (3, "Moe", 51, 2, None),
    (4, "Bob", 29, 2, 3),
    (5, "Bobby", 41, None, 3),
]

DEPARTMENTS = [
    (1, "Engineering"),
    (2, "Sales"),
]

PRODUCTS = [
    (1, "Chais", 18.0),
    (2, "Chang", 19.0),
    (3, "Aniseed Syrup", 10.0),
    (4, "Mishi Kobe Niku", 97.0),
    (5, "Konbu", 6.0),
]

CUSTOMERS = [
    (1, "Alfreds", "Germany"),
    (2, "Ana Trujillo", "Mexico"),
    (3, "Antonio Moreno", "Mexico"),
    (4, "Around the Horn", "UK"),
    (5, "Berglunds", "Sweden"),
    (6, "Blauer See", "Germany"),
    (7, "Blondel", "Mexico"),
]

ORDERS = [
    (10, 1, "open"),
    (11, 1, "shipped"),
    (12, 2, "open"),
    (13, 4, "open"),
]


def load_ddl() -> str:
    """Return the sample SQLite DDL script."""
    return (_FIXTURES_DIR / "ddl_sqlite.sql").read_text()
