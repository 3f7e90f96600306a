"""Error types raised while rendering element descriptions.

Every error derives from :class:`RenderError` and from the builtin exception
that best describes it, so callers may catch either one. Errors are raised at
the point of detection and propagate unmodified; any output produced before
the failure belongs to the aborted call and must be discarded.
"""

from typing import Any


class RenderError(Exception):
    """Base exception for invalid element descriptions."""

    def __init__(self, message: str, value: Any = None) -> None:
        super().__init__(message)
        self.value = value


class EmptyElementError(RenderError, ValueError):
    """A sequence describing an element has no entries."""


class InvalidElementTypeError(RenderError, TypeError):
    """A content value cannot be interpreted as an element."""


class InvalidAttributeTypeError(RenderError, TypeError):
    """An attribute value is not a string, number or boolean."""


class InvalidPreContentError(RenderError, ValueError):
    """A ``pre`` element does not contain exactly one string child."""


class TooManyArgumentsError(RenderError, TypeError):
    """Tree output was requested with anything but a single content argument."""


class TrailingArgumentsError(RenderError, TypeError):
    """The single-root call form received extra content arguments."""


class UnsupportedChildTypeError(RenderError, TypeError):
    """Tree construction met a child value it cannot convert into a node."""
