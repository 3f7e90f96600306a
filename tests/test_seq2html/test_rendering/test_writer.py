"""Tests for the string-mode render state."""

import pytest

from seq2html.rendering.writer import RenderState


class TestRenderState:
    """Test buffer and indentation handling."""

    def test_write_and_getvalue(self):
        """Test that writes accumulate in order."""
        state = RenderState()
        state.write("<p")
        state.write(">")

        assert state.getvalue() == "<p>"
        assert len(state) == 3

    def test_getvalue_is_repeatable(self):
        """Test that reading the value does not consume it."""
        state = RenderState()
        state.write("a")
        state.write("b")

        assert state.getvalue() == "ab"
        state.write("c")
        assert state.getvalue() == "abc"

    def test_empty_state(self):
        """Test an untouched state."""
        assert RenderState().getvalue() == ""

    def test_write_line_indents(self):
        """Test indented line output at the current depth."""
        state = RenderState(indent_unit="--", indent_depth=1)
        state.write_line("a")
        state.indent()
        state.write_line("b")
        state.dedent()
        state.write_line("c")

        assert state.getvalue() == "--a\n----b\n--c\n"
        assert state.indent_depth == 1

    def test_dedent_below_zero(self):
        """Test that unbalanced dedent is detected."""
        with pytest.raises(RuntimeError, match="below zero"):
            RenderState().dedent()
