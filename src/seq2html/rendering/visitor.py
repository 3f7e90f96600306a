"""Common interface for the two output modes.

String rendering and tree building both walk the same element shapes; the
entry point picks one :class:`ElementVisitor` implementation per call.
"""

import numbers
from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional

from seq2html.elements.shape import TagFactory, describe, tags
from seq2html.shared.errors import InvalidAttributeTypeError
from seq2html.shared.result import RenderMetrics


# Integral floats at or above this magnitude keep their exponent form
_INTEGRAL_FLOAT_LIMIT = 1e21


def format_number(value: numbers.Real) -> str:
    """Stringify a numeric child or attribute value.

    Integral floats drop their fractional part (``1.0`` becomes ``1``,
    ``-0.0`` becomes ``0``); every other number uses ``str()``.
    """
    if (isinstance(value, float) and value.is_integer()
            and abs(value) < _INTEGRAL_FLOAT_LIMIT):
        return str(int(value))
    return str(value)


def format_attribute_value(name: Any, value: Any, attributes: Mapping) -> str:
    """Stringify an attribute value, rejecting unsupported types.

    Strings are returned unchanged, booleans become ``true``/``false`` and
    numbers are converted with :func:`format_number`.

    Raises:
        InvalidAttributeTypeError: If the value is not a string, number or bool
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, numbers.Real):
        return format_number(value)
    raise InvalidAttributeTypeError(
        f"Invalid type for attribute {name!r}: must be a string, number or "
        f"boolean, got {describe(value)} in {describe(attributes)}",
        value,
    )


class ElementVisitor(ABC):
    """Walks content items and produces one kind of output."""

    def __init__(
        self,
        factory: TagFactory = tags,
        metrics: Optional[RenderMetrics] = None
    ) -> None:
        self.factory = factory
        self.metrics = metrics if metrics is not None else RenderMetrics()

    @abstractmethod
    def visit(self, item: Any) -> Any:
        """Resolve a top-level content item and process it."""

    @abstractmethod
    def finish(self) -> Any:
        """Return the output accumulated by previous visits."""
