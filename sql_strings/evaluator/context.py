"""Render context controlling escaping and parameterization."""

from dataclasses import dataclass, fields, replace
from typing import Any, Callable, Mapping, Optional

from ..errors import InvalidState
from ..escape import escape_identifier, escape_literal

LiteralEscaper = Callable[[Any, str], str]
IdentifierEscaper = Callable[[str], str]

DEFAULT_TIMEZONE = "Z"


@dataclass(frozen=True)
class RenderContext:
    """Configuration for one evaluation pass.

    Attributes:
        escape: Converts a value (and timezone) into SQL literal text
        escape_id: Converts an identifier into escaped SQL text
        with_parameters: Emit ``?`` placeholders plus bindings when True,
            inline escaped literals when False
        timezone: Timezone option handed to ``escape`` for dates
        preparing: Passthrough flag for prepared statements
        method: Method tag copied onto template results
    """

    escape: LiteralEscaper = escape_literal
    escape_id: IdentifierEscaper = escape_identifier
    with_parameters: bool = True
    timezone: str = DEFAULT_TIMEZONE
    preparing: bool = False
    method: Optional[str] = None

    @classmethod
    def from_options(cls, options=None) -> "RenderContext":
        """Normalize user supplied options into a RenderContext.

        Falsy ``escape``, ``escape_id`` and ``timezone`` values fall back to
        the defaults. Parameterization is disabled only by an explicit
        ``with_parameters=False``.

        Args:
            options: ``None``, a mapping of field names, or a RenderContext

        Returns:
            Normalized context
        """
        if options is None:
            return cls()
        if isinstance(options, RenderContext):
            options = options.as_dict()
        if not isinstance(options, Mapping):
            raise InvalidState(
                f"Render options must be a mapping, got {type(options).__name__}"
            )

        return cls(
            escape=options.get("escape") or escape_literal,
            escape_id=options.get("escape_id") or escape_identifier,
            with_parameters=options.get("with_parameters") is not False,
            timezone=options.get("timezone") or DEFAULT_TIMEZONE,
            preparing=bool(options.get("preparing", False)),
            method=options.get("method"),
        )

    def replace(self, **changes: Any) -> "RenderContext":
        """Return a copy of this context with some fields changed."""
        return replace(self, **changes)

    def as_dict(self) -> dict:
        """Shallow field mapping of this context."""
        return {f.name: getattr(self, f.name) for f in fields(self)}
