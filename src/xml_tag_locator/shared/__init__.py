"""Shared utilities for tag location.

This module provides the match record, search options, exceptions and logging
helpers used across all layers.
"""

from .config import (
    DEFAULT_OPTIONS,
    ConfigError,
    ConfigValidationError,
    InvalidArgumentError,
    SearchOptions,
    require_name,
    require_path,
    require_text,
    resolve_options,
)
from .logging import (
    CorrelationLogger,
    get_logger,
    preview,
)
from .result import TagMatch

__all__ = [
    "DEFAULT_OPTIONS",
    "ConfigError",
    "ConfigValidationError",
    "CorrelationLogger",
    "InvalidArgumentError",
    "SearchOptions",
    "TagMatch",
    "get_logger",
    "preview",
    "require_name",
    "require_path",
    "require_text",
    "resolve_options",
]
