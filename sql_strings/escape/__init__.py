"""Default escaping of literal values and identifiers."""

from .literal import escape_literal, escape_string, date_to_string, convert_timezone
from .identifier import escape_identifier, identifier_escaper

__all__ = [
    "escape_literal",
    "escape_string",
    "date_to_string",
    "convert_timezone",
    "escape_identifier",
    "identifier_escaper",
]
