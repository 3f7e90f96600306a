"""Output writer shared by one string-mode render call.

A single :class:`RenderState` is created per top-level call and passed by
reference through every recursive step; it is the only mutable state of the
string renderer.
"""

from typing import List


class RenderState:
    """Markup text buffer plus the current indentation depth."""

    def __init__(self, indent_unit: str = "  ", indent_depth: int = 0) -> None:
        self.indent_unit = indent_unit
        self.indent_depth = indent_depth
        self._parts: List[str] = []
        self._length = 0

    def write(self, text: str) -> None:
        """Append text to the output."""
        self._parts.append(text)
        self._length += len(text)

    def write_indent(self) -> None:
        """Append the indentation for the current depth."""
        if self.indent_depth and self.indent_unit:
            self.write(self.indent_unit * self.indent_depth)

    def write_line(self, text: str) -> None:
        """Append an indented line."""
        self.write_indent()
        self.write(text)
        self.write("\n")

    def indent(self) -> None:
        self.indent_depth += 1

    def dedent(self) -> None:
        if self.indent_depth <= 0:
            raise RuntimeError("Indentation depth cannot drop below zero")
        self.indent_depth -= 1

    def getvalue(self) -> str:
        """Get the accumulated output."""
        if len(self._parts) > 1:
            self._parts = ["".join(self._parts)]
        return self._parts[0] if self._parts else ""

    def __len__(self) -> int:
        return self._length
