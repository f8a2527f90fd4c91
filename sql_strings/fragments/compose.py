"""Indentation normalization and assembly of template text."""

import re
from typing import List, Sequence

from ..evaluator.context import RenderContext
from ..types import SQLResult

BLANK_LINE = re.compile(r"^[ \t]*\n")
INDENTATION = re.compile(r"^[ \t]+")


def dedent(strings: Sequence[str]) -> List[str]:
    """Strip the common indentation from a template's literal parts.

    Leading blank lines of the first part are skipped when looking for the
    indentation. If the first content line starts with spaces or tabs, that
    run is removed from the start of every line of every part.

    Args:
        strings: Literal parts of a template

    Returns:
        Dedented literal parts
    """
    first = strings[0]
    while BLANK_LINE.match(first):
        first = BLANK_LINE.sub("", first, count=1)

    match = INDENTATION.match(first)
    if not match:
        return [first] + list(strings[1:])

    indent = match.group(0)
    return [
        "\n".join(
            line[len(indent):] if line.startswith(indent) else line
            for line in part.split("\n")
        )
        for part in strings
    ]


def compose(
    strings: Sequence[str], results: Sequence[SQLResult], context: RenderContext
) -> SQLResult:
    """Interleave dedented literal parts with already rendered values.

    Args:
        strings: Literal parts, one more than ``results``
        results: Rendered interpolations in source order
        context: Normalized render context

    Returns:
        Trimmed text with bindings concatenated in interpolation order
    """
    parts = dedent(strings)
    sql = parts[0]
    bindings = []
    for index, result in enumerate(results):
        bindings.extend(result.bindings)
        sql += result.sql + parts[index + 1]

    return SQLResult(
        sql=sql.strip(),
        bindings=bindings,
        method=context.method or "unknown",
        hooks={},
    )
