"""Fragment variants and the combinators that build them."""

from .nodes import Raw, Identifier, Parameter, ParameterList, ColumnList, Lines, Clause
from .template import Template
from .combinators import sql, ident, param, raw, parameterize, columnize, clause, fn, lines

__all__ = [
    # Variants
    "Raw",
    "Identifier",
    "Parameter",
    "ParameterList",
    "ColumnList",
    "Lines",
    "Clause",
    "Template",
    # Combinators
    "sql",
    "ident",
    "param",
    "raw",
    "parameterize",
    "columnize",
    "clause",
    "fn",
    "lines",
]
