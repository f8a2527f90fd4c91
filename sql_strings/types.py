"""Core value types shared by fragments and the evaluator."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Union


class FragmentType(Enum):
    """Discriminant for every fragment variant."""

    RAW = "raw"
    IDENT = "ident"
    PARAM = "param"
    PARAMETERIZE = "parameterize"
    COLUMNIZE = "columnize"
    LINES = "lines"
    CLAUSE = "clause"
    FN = "fn"
    SQL = "sql"


@dataclass(frozen=True)
class SQLResult:
    """Rendered SQL text plus the values bound to its placeholders."""

    sql: str = ""
    bindings: List[Any] = field(default_factory=list)
    method: str = "unknown"
    hooks: Dict[str, Any] = field(default_factory=dict)

    def __repr__(self) -> str:
        return f"SQLResult({self.sql!r}, bindings={self.bindings!r})"


class Fragment(ABC):
    """Base class for all tagged SQL fragments.

    A fragment never changes after construction. Rendering is delegated to
    :func:`sql_strings.evaluator.to_sql`, which normalizes the render
    context and resolves fragments returned from ``render``.
    """

    kind: FragmentType

    @abstractmethod
    def render(self, context) -> Union[SQLResult, "Fragment"]:
        """Render this fragment against a normalized render context."""
        pass

    def to_sql(self, options=None) -> SQLResult:
        """Evaluate the fragment into a terminal result.

        Args:
            options: ``None``, a mapping of context fields, or a RenderContext

        Returns:
            Terminal SQLResult
        """
        from .evaluator.evaluator import to_sql

        return to_sql(self, options)

    def to_string(self, options=None) -> str:
        """Render with every value inlined as an escaped literal."""
        from .evaluator.context import RenderContext

        context = RenderContext.from_options(options).replace(with_parameters=False)
        return self.to_sql(context).sql

    def __str__(self) -> str:
        return self.to_string()
