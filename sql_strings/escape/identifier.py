"""SQL identifier escaping."""

from typing import Callable

from sqlglot import exp

IdentifierEscaper = Callable[[str], str]


def escape_identifier(name: str) -> str:
    """Quote each dotted segment of an identifier in double quotes.

    Args:
        name: Identifier such as ``"users"`` or ``"public.users.*"``

    Returns:
        Escaped identifier text

    Examples:
        >>> escape_identifier("users.name")
        '"users"."name"'
        >>> escape_identifier("users.*")
        '"users".*'
    """
    return ".".join(
        segment if segment == "*" else f'"{segment}"' for segment in name.split(".")
    )


def identifier_escaper(dialect: str) -> IdentifierEscaper:
    """Build an ``escape_id`` function quoting identifiers for a sqlglot dialect.

    Embedded quote characters are escaped the way the dialect expects.

    Args:
        dialect: sqlglot dialect name, e.g. ``"mysql"`` or ``"postgres"``

    Returns:
        Callable usable as the ``escape_id`` field of a render context

    Example:
        >>> identifier_escaper("mysql")("users.name")
        '`users`.`name`'
    """

    def escape_id(name: str) -> str:
        segments = []
        for segment in name.split("."):
            if segment == "*":
                segments.append(segment)
            else:
                identifier = exp.to_identifier(segment, quoted=True)
                segments.append(identifier.sql(dialect=dialect))
        return ".".join(segments)

    return escape_id
