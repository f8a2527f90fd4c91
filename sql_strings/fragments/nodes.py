"""Fragment variants other than the template composer."""

from dataclasses import dataclass
from typing import Any, Tuple

from ..evaluator.context import RenderContext
from ..evaluator.evaluator import to_sql
from ..types import Fragment, FragmentType, SQLResult
from .compose import compose


@dataclass(frozen=True)
class Raw(Fragment):
    """Text emitted verbatim, never escaped and never bound."""

    value: Any = None
    kind = FragmentType.RAW

    def render(self, context: RenderContext) -> SQLResult:
        return SQLResult(sql="" if self.value is None else str(self.value))


@dataclass(frozen=True)
class Identifier(Fragment):
    """Dotted identifier escaped with the context's ``escape_id``."""

    name: str
    kind = FragmentType.IDENT

    def render(self, context: RenderContext) -> SQLResult:
        return SQLResult(sql=context.escape_id(self.name))


@dataclass(frozen=True)
class Parameter(Fragment):
    """Single value bound to a placeholder or inlined as a literal."""

    value: Any
    kind = FragmentType.PARAM

    def render(self, context: RenderContext) -> SQLResult:
        if context.with_parameters:
            return SQLResult(sql="?", bindings=[self.value])
        return SQLResult(sql=context.escape(self.value, context.timezone))


@dataclass(frozen=True)
class ParameterList(Fragment):
    """Sequence of values rendered as separated placeholders or literals."""

    values: Tuple[Any, ...]
    separator: str = ", "
    kind = FragmentType.PARAMETERIZE

    def render(self, context: RenderContext) -> SQLResult:
        if context.with_parameters:
            sql = self.separator.join("?" for _ in self.values)
            return SQLResult(sql=sql, bindings=list(self.values))
        sql = self.separator.join(
            context.escape(value, context.timezone) for value in self.values
        )
        return SQLResult(sql=sql)


@dataclass(frozen=True)
class ColumnList(Fragment):
    """Sequence of column names rendered as separated identifiers."""

    columns: Tuple[str, ...]
    separator: str = ", "
    kind = FragmentType.COLUMNIZE

    def render(self, context: RenderContext) -> SQLResult:
        return SQLResult(
            sql=self.separator.join(context.escape_id(column) for column in self.columns)
        )


@dataclass(frozen=True)
class Lines(Fragment):
    """Members joined by a separator, skipping members that render empty.

    The separator is emitted before the first rendered member and after each
    one. When no member renders text the result is empty. After the last member it loses its trailing spaces, so an indenting
    separator such as ``"\\n  "`` does not leave stray whitespace behind.
    Bindings of every member are kept, including members with empty text.
    """

    members: Tuple[Any, ...]
    separator: str = "\n"
    kind = FragmentType.LINES

    def render(self, context: RenderContext) -> SQLResult:
        sql = ""
        bindings = []
        last = len(self.members) - 1
        for index, member in enumerate(self.members):
            result = to_sql(member, context)
            if result.sql:
                if not sql:
                    sql = self.separator
                sql += result.sql
                if index < last:
                    sql += self.separator
                else:
                    sql += self.separator.rstrip(" ")
            bindings.extend(result.bindings)
        return SQLResult(sql=sql, bindings=bindings)


@dataclass(frozen=True)
class Clause(Fragment):
    """Template wording that disappears when its single value renders empty.

    The value is evaluated once. When its text is empty the clause renders
    to empty text but still carries the value's bindings.
    """

    strings: Tuple[str, ...]
    value: Any
    kind = FragmentType.CLAUSE

    def render(self, context: RenderContext) -> SQLResult:
        inner = to_sql(self.value, context)
        if not inner.sql:
            return SQLResult(bindings=list(inner.bindings))
        return compose(self.strings, [inner], context)
