"""Fragment evaluation."""

from .context import RenderContext
from .evaluator import MAX_RESOLUTION_DEPTH, to_sql

__all__ = ["RenderContext", "to_sql", "MAX_RESOLUTION_DEPTH"]
