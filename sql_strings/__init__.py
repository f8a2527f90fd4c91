"""Composable SQL fragments rendered to parameterized or inlined SQL.

Example:
    >>> from sql_strings import sql, ident
    >>> query = sql(["SELECT * FROM ", " WHERE name = ", ""], ident("users"), "testuser")
    >>> query.to_sql()
    SQLResult('SELECT * FROM "users" WHERE name = ?', bindings=['testuser'])
    >>> str(query)
    'SELECT * FROM "users" WHERE name = \\'testuser\\''
"""

from .errors import SQLStringError, InvalidArgument, InvalidState
from .types import Fragment, FragmentType, SQLResult
from .escape import escape_literal, escape_identifier, identifier_escaper
from .evaluator import RenderContext, to_sql, MAX_RESOLUTION_DEPTH
from .fragments import (
    Template,
    sql,
    ident,
    param,
    raw,
    parameterize,
    columnize,
    clause,
    fn,
    lines,
)

__version__ = "0.1.0"

__all__ = [
    "sql",
    "ident",
    "param",
    "raw",
    "parameterize",
    "columnize",
    "clause",
    "fn",
    "lines",
    "to_sql",
    "Template",
    "Fragment",
    "FragmentType",
    "SQLResult",
    "RenderContext",
    "MAX_RESOLUTION_DEPTH",
    "escape_literal",
    "escape_identifier",
    "identifier_escaper",
    "SQLStringError",
    "InvalidArgument",
    "InvalidState",
]
