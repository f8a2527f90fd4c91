"""Exceptions raised while building or rendering SQL fragments."""


class SQLStringError(Exception):
    """Base class for all sql_strings errors."""

    pass


class InvalidArgument(SQLStringError, ValueError):
    """A combinator was called with a value of the wrong shape or type."""

    pass


class InvalidState(SQLStringError, RuntimeError):
    """The evaluator was handed something it cannot render."""

    pass
