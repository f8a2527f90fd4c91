"""Configuration management."""

from .config import (
    Config,
    RenderConfig,
    LoggingConfig,
    load_config,
    build_render_context,
)

__all__ = [
    "Config",
    "RenderConfig",
    "LoggingConfig",
    "load_config",
    "build_render_context",
]
