"""Recursive evaluation of fragments into terminal SQL results."""

import logging
from typing import Any

from ..errors import InvalidState
from ..types import Fragment, SQLResult
from ..utils.logging import get_render_logger
from .context import RenderContext

logger = logging.getLogger(__name__)

# Upper bound on render functions returning further fragments.
MAX_RESOLUTION_DEPTH = 64


def to_sql(target: Any, options=None, _depth: int = 0) -> SQLResult:
    """Evaluate a fragment or plain value into SQL text and bindings.

    Resolution order:
        1. ``None`` renders to ``NULL`` with no bindings.
        2. A plain string becomes a placeholder plus one binding, or an
           escaped literal when parameters are disabled.
        3. Anything else must be a Fragment; its ``render`` is invoked with
           the normalized context. A Fragment returned from ``render`` is
           evaluated again against the caller's options.

    Args:
        target: Fragment, string, or ``None``
        options: ``None``, a mapping of context fields, or a RenderContext

    Returns:
        Terminal SQLResult

    Raises:
        InvalidState: If the target is not renderable or the context holds
            non-callable escapers
    """
    context = RenderContext.from_options(options)

    if target is None:
        return SQLResult(sql="NULL")

    if isinstance(target, str):
        if context.with_parameters:
            return SQLResult(sql="?", bindings=[target])
        if not callable(context.escape):
            raise InvalidState("escape must be a function")
        return SQLResult(sql=context.escape(target, context.timezone))

    if not isinstance(target, Fragment):
        raise InvalidState(
            f"Cannot run to_sql on non-tagged sql statement: {target!r}"
        )
    if not callable(context.escape):
        raise InvalidState("escape must be a function")
    if not callable(context.escape_id):
        raise InvalidState("escape_id must be a function")
    kind = getattr(getattr(target, "kind", None), "value", type(target).__name__)
    if not callable(getattr(target, "render", None)):
        raise InvalidState(f"render must be a function on tagged fragment {kind}")

    if logger.isEnabledFor(logging.DEBUG):
        get_render_logger(__name__, context).debug(f"Rendering {kind} fragment")

    result = target.render(context)

    if isinstance(result, Fragment):
        if _depth >= MAX_RESOLUTION_DEPTH:
            raise InvalidState(
                f"Fragment resolution exceeded {MAX_RESOLUTION_DEPTH} levels"
            )
        return to_sql(result, options, _depth + 1)

    return result
