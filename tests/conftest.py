"""Shared fixtures for sql_strings tests."""

import duckdb
import pytest

from sql_strings import Fragment, FragmentType, SQLResult


class SilentFragment(Fragment):
    """Renders no text but still binds a value."""

    kind = FragmentType.RAW

    def __init__(self, binding):
        self.binding = binding

    def render(self, context):
        return SQLResult(sql="", bindings=[self.binding])


class CountingFragment(Fragment):
    """Counts how many times it is rendered."""

    kind = FragmentType.RAW

    def __init__(self, text):
        self.text = text
        self.renders = 0

    def render(self, context):
        self.renders += 1
        return SQLResult(sql=self.text)


@pytest.fixture
def silent():
    return SilentFragment


@pytest.fixture
def counting():
    return CountingFragment


@pytest.fixture
def users_db():
    """In-memory DuckDB database with an empty users table."""
    conn = duckdb.connect(":memory:")
    conn.execute(
        """
        CREATE TABLE users (
            id INTEGER,
            name VARCHAR,
            email VARCHAR
        )
        """
    )
    yield conn
    conn.close()
