"""The template composer behind ``sql`` and ``fn``."""

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Tuple

from ..errors import InvalidState
from ..evaluator.context import RenderContext
from ..evaluator.evaluator import to_sql
from ..types import Fragment, FragmentType, SQLResult
from .compose import compose
from .nodes import Parameter


def _coerce(value: Any) -> Any:
    """Promote plain values to parameters; ``None`` stays SQL null."""
    if value is None or isinstance(value, Fragment):
        return value
    return Parameter(value)


def _option_fields(options) -> dict:
    if options is None:
        return {}
    if isinstance(options, RenderContext):
        return options.as_dict()
    if not isinstance(options, Mapping):
        raise InvalidState(
            f"Render options must be a mapping, got {type(options).__name__}"
        )
    return dict(options)


def _shallow_equals(left: Optional[dict], right: Optional[dict]) -> bool:
    """Compare two option mappings key by key, by identity or equality."""
    if left is None or right is None:
        return False
    if left.keys() != right.keys():
        return False
    for key, value in left.items():
        other = right[key]
        if value is not other and value != other:
            return False
    return True


@dataclass(frozen=True, eq=False)
class Template(Fragment):
    """Literal parts interleaved with interpolated values.

    Values that are not fragments are bound as parameters. Rendering strips
    the common indentation of the literal parts and trims the result.
    ``to_sql`` remembers its last options and result and returns the cached
    result while the options stay shallowly equal.
    """

    strings: Tuple[str, ...]
    values: Tuple[Any, ...] = ()
    kind: FragmentType = FragmentType.SQL
    _cached_options: Optional[dict] = field(default=None, init=False, repr=False)
    _cached_result: Optional[SQLResult] = field(default=None, init=False, repr=False)

    def render(self, context: RenderContext) -> SQLResult:
        results = [to_sql(_coerce(value), context) for value in self.values]
        return compose(self.strings, results, context)

    def to_sql(self, options=None) -> SQLResult:
        """Render the template, reusing the previous result for equal options.

        Args:
            options: ``None``, a mapping of context fields, or a RenderContext

        Returns:
            Terminal SQLResult
        """
        current = _option_fields(options)
        if self._cached_result is not None and _shallow_equals(self._cached_options, current):
            return self._cached_result

        result = to_sql(self, options)
        object.__setattr__(self, "_cached_options", current)
        object.__setattr__(self, "_cached_result", result)
        return result

    def to_string(self, options=None) -> str:
        """Render with parameters disabled, inlining every value."""
        current = _option_fields(options)
        current["with_parameters"] = False
        return self.to_sql(current).sql

