"""Constructors for SQL fragments.

Template style functions (``sql``, ``fn``, ``clause``) take the literal
parts of the statement as a list and the interpolated values positionally,
with one more literal part than values::

    sql(["SELECT * FROM ", " WHERE id = ", ""], ident("accounts"), account_id)
"""

from typing import Any, Sequence

from ..errors import InvalidArgument
from ..types import Fragment, FragmentType
from .nodes import Clause, ColumnList, Identifier, Lines, Parameter, ParameterList, Raw
from .template import Template


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _check_template_parts(name: str, strings: Any, values: Sequence[Any]) -> None:
    if not _is_sequence(strings):
        raise InvalidArgument(
            f'"{name}" expects a list of literal strings as its first argument, '
            f"saw {strings!r}"
        )
    if len(strings) != len(values) + 1:
        raise InvalidArgument(
            f'"{name}" expects one more literal string than values, '
            f"saw {len(strings)} strings and {len(values)} values"
        )


def sql(strings: Sequence[str], *values: Any) -> Template:
    """Compose a statement from literal parts and interpolated values.

    Args:
        strings: Literal SQL text surrounding each value
        *values: Fragments, or plain values bound as parameters

    Returns:
        Template fragment

    Raises:
        InvalidArgument: If ``strings`` is not a list or tuple, or its length
            does not match the values

    Example:
        >>> sql(["SELECT * FROM ", " WHERE id = ", ""], ident("accounts"), 1).to_sql()
        SQLResult('SELECT * FROM "accounts" WHERE id = ?', bindings=[1])
    """
    _check_template_parts("sql", strings, values)
    return Template(tuple(strings), tuple(values))


def clause(strings: Sequence[str], *values: Any) -> Clause:
    """Template wording that is dropped when its single value renders empty.

    ``clause(["WHERE ", ""], raw("a = 1"))`` renders to ``WHERE a = 1`` while
    ``clause(["WHERE ", ""], lines([]))`` renders to empty text.

    Raises:
        InvalidArgument: If not given exactly one value
    """
    if len(values) != 1:
        raise InvalidArgument(
            "clause may only be used with a single conditional value, "
            f"saw {len(values)} values after {strings!r}"
        )
    _check_template_parts("clause", strings, values)
    return Clause(tuple(strings), values[0])


def ident(name: str) -> Fragment:
    """Mark a (possibly dotted) name as an identifier.

    ``"*"`` is emitted unescaped.

    Raises:
        InvalidArgument: If ``name`` is not a string
    """
    if not isinstance(name, str):
        raise InvalidArgument(f"Invalid value for ident, expected string, saw {name!r}")
    if name == "*":
        return raw(name)
    return Identifier(name)


def param(value: Any) -> Parameter:
    """Mark a value as a bound parameter."""
    return Parameter(value)


def raw(value: Any = None) -> Raw:
    """Emit text verbatim. The caller is responsible for its safety."""
    return Raw(value)


def parameterize(values: Sequence[Any], separator: str = ", ") -> ParameterList:
    """Bind a list of values as separated placeholders.

    Example:
        >>> sql(["(", ")"], parameterize([1, 2, 3])).to_sql()
        SQLResult('(?, ?, ?)', bindings=[1, 2, 3])

    Raises:
        InvalidArgument: If ``values`` is not a list or tuple
    """
    if not _is_sequence(values):
        raise InvalidArgument(
            f"parameterize accepts a list of values to parameterize, saw {values!r}"
        )
    return ParameterList(tuple(values), separator)


def columnize(columns: Sequence[str], separator: str = ", ") -> ColumnList:
    """Render a list of column names as separated identifiers.

    Example:
        >>> str(sql(["INSERT INTO users (", ")"], columnize(["id", "name"])))
        'INSERT INTO users ("id", "name")'

    Raises:
        InvalidArgument: If ``columns`` is not a list or tuple
    """
    if not _is_sequence(columns):
        raise InvalidArgument(
            f"columnize accepts a list of values to columnize, saw {columns!r}"
        )
    return ColumnList(tuple(columns), separator)


def fn(strings: Sequence[str], *names: str) -> Template:
    """Function call sugar: every value is wrapped as an identifier.

    Example:
        >>> str(fn(["count(", ")"], "tbl"))
        'count("tbl")'
    """
    _check_template_parts("fn", strings, names)
    return Template(tuple(strings), tuple(ident(name) for name in names), FragmentType.FN)


def lines(fragments: Sequence[Any], separator: str = "\n") -> Lines:
    """Join fragments over several lines, skipping the ones that render empty.

    Raises:
        InvalidArgument: If ``fragments`` is not a list or tuple
    """
    if not _is_sequence(fragments):
        raise InvalidArgument(f"lines accepts a list of fragments, saw {fragments!r}")
    return Lines(tuple(fragments), separator)
