"""Shared pytest fixtures for selectQL unit and integration tests."""
from __future__ import annotations

import sqlite3
from collections.abc import Iterator

import pytest

from selectql.compile.base import ParameterCollector
from selectql.config import SelectConfig
from tests.fixtures import (
    CUSTOMERS,
    DEPARTMENTS,
    EMPLOYEES,
    ORDERS,
    PRODUCTS,
    load_ddl,
)


@pytest.fixture()
def collector() -> ParameterCollector:
    """A fresh parameter sink using the default config."""
    return ParameterCollector()


@pytest.fixture(scope="session")
def strict_config() -> SelectConfig:
    """Config rejecting empty IN lists."""
    return SelectConfig(empty_in="reject")


@pytest.fixture()
def db() -> Iterator[sqlite3.Connection]:
    """In-memory SQLite database seeded with the sample rows."""
    conn = sqlite3.connect(":memory:")
    conn.executescript(load_ddl())
    conn.executemany("INSERT INTO Emp VALUES (?,?,?,?,?)", EMPLOYEES)
    conn.executemany("INSERT INTO Department VALUES (?,?)", DEPARTMENTS)
    conn.executemany("INSERT INTO Products VALUES (?,?,?)", PRODUCTS)
    conn.executemany("INSERT INTO Customers VALUES (?,?,?)", CUSTOMERS)
    conn.executemany("INSERT INTO Orders VALUES (?,?,?)", ORDERS)
    yield conn
    conn.close()
