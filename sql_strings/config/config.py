"""Configuration management for SQL rendering."""

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..errors import InvalidArgument
from ..escape import identifier_escaper
from ..evaluator.context import DEFAULT_TIMEZONE, RenderContext


@dataclass
class RenderConfig:
    """Default render context settings."""

    with_parameters: bool = True
    timezone: str = DEFAULT_TIMEZONE  # "Z", "local" or an offset like "+02:00"
    preparing: bool = False
    method: Optional[str] = None
    identifier_dialect: Optional[str] = None  # sqlglot dialect name


@dataclass
class LoggingConfig:
    """Configuration for logging setup."""

    level: str = "INFO"
    structured: bool = False
    log_file: Optional[str] = None


@dataclass
class Config:
    """Main configuration class."""

    render: RenderConfig = field(default_factory=RenderConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _build_section(section_cls, data: Optional[Dict[str, Any]], section: str):
    data = data or {}
    known = {f.name for f in fields(section_cls)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise InvalidArgument(
            f"Unknown keys in '{section}' config section: {', '.join(unknown)}"
        )
    return section_cls(**data)


def load_config(config_path: str) -> Config:
    """Load configuration from YAML file.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Parsed configuration

    Example YAML format:
        render:
          with_parameters: true
          timezone: "+02:00"
          identifier_dialect: mysql

        logging:
          level: DEBUG
          structured: true
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path, "r") as f:
        data = yaml.safe_load(f) or {}

    render = _build_section(RenderConfig, data.get("render"), "render")
    logging_config = _build_section(LoggingConfig, data.get("logging"), "logging")

    return Config(render=render, logging=logging_config)


def build_render_context(render_config: RenderConfig) -> RenderContext:
    """Create the RenderContext described by a render config section.

    Args:
        render_config: Render settings

    Returns:
        Render context with the dialect's identifier escaping when
        ``identifier_dialect`` is set
    """
    options: Dict[str, Any] = {
        "with_parameters": render_config.with_parameters,
        "timezone": render_config.timezone,
        "preparing": render_config.preparing,
        "method": render_config.method,
    }
    if render_config.identifier_dialect:
        options["escape_id"] = identifier_escaper(render_config.identifier_dialect)
    return RenderContext.from_options(options)
