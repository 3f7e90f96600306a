"""Shared utilities for seq2html.

This module provides configuration objects, error types, result types and
logging helpers used across all rendering layers.
"""

from .config import (
    ConfigError,
    ConfigValidationError,
    OutputMode,
    RenderConfig,
)
from .errors import (
    EmptyElementError,
    InvalidAttributeTypeError,
    InvalidElementTypeError,
    InvalidPreContentError,
    RenderError,
    TooManyArgumentsError,
    TrailingArgumentsError,
    UnsupportedChildTypeError,
)
from .logging import (
    CorrelationLogger,
    get_logger,
)
from .result import (
    RenderMetrics,
    RenderResult,
)

__all__ = [
    "ConfigError",
    "ConfigValidationError",
    "OutputMode",
    "RenderConfig",
    "EmptyElementError",
    "InvalidAttributeTypeError",
    "InvalidElementTypeError",
    "InvalidPreContentError",
    "RenderError",
    "TooManyArgumentsError",
    "TrailingArgumentsError",
    "UnsupportedChildTypeError",
    "CorrelationLogger",
    "get_logger",
    "RenderMetrics",
    "RenderResult",
]
