"""String-mode rendering of element descriptions into indented markup.

Every element starts on its own indented line and every line ends with a
newline. Text children are placed on their own lines one level deeper than
their parent, except inside ``pre`` where the single text child is written
inline so that its whitespace is preserved.
"""

from typing import Any, Optional

from seq2html.elements.shape import (
    ContentKind,
    ElementShape,
    TagFactory,
    classify_content,
    describe,
    resolve_element,
    tags,
)
from seq2html.rendering.visitor import (
    ElementVisitor,
    format_attribute_value,
    format_number,
)
from seq2html.rendering.writer import RenderState
from seq2html.shared.errors import InvalidElementTypeError, InvalidPreContentError
from seq2html.shared.result import RenderMetrics

# HTML tags that shall not have children, and so must be self-closing.
# https://www.w3.org/TR/2011/WD-html-markup-20110113/syntax.html#void-elements
VOID_ELEMENTS = frozenset({
    "area", "base", "br", "col", "command", "embed", "hr", "img", "input",
    "keygen", "link", "meta", "param", "source", "track", "wbr",
})

PRE_TAG = "pre"


def escape_text(text: str) -> str:
    """Escape text content: ``&``, ``<`` and ``>``."""
    return (text
            .replace("&", "&amp;")
            .replace("<", "&lt;")
            .replace(">", "&gt;"))


def escape_attribute(value: str) -> str:
    """Escape an attribute value for use inside double quotes."""
    # Values are always double-quoted, so single quotes stay as they are
    return escape_text(value).replace('"', "&quot;")


def is_void_element(tag: str) -> bool:
    """Check if a tag name (any case) is a void element."""
    return tag.lower() in VOID_ELEMENTS


class MarkupRenderer(ElementVisitor):
    """Renders element descriptions into a shared :class:`RenderState`."""

    def __init__(
        self,
        state: RenderState,
        factory: TagFactory = tags,
        metrics: Optional[RenderMetrics] = None
    ) -> None:
        super().__init__(factory, metrics)
        self.state = state
        self._base_depth = state.indent_depth

    def visit(self, item: Any) -> None:
        """Resolve a content item and append its markup."""
        self.render_shape(resolve_element(item, self.factory))

    def finish(self) -> str:
        self.metrics.output_length = len(self.state)
        return self.state.getvalue()

    def render_shape(self, shape: ElementShape) -> None:
        """Append the markup for one resolved element."""
        state = self.state
        self.metrics.record_element(state.indent_depth - self._base_depth)

        state.write_indent()
        state.write(f"<{shape.tag}")
        if shape.attributes is not None:
            self._render_attributes(shape)

        if shape.is_childless:
            self._close_childless(shape)
            return

        state.write(">")

        if shape.lowered_tag == PRE_TAG:
            self._render_pre_content(shape)
            return

        state.write("\n")
        state.indent()
        for child in shape.children:
            self._render_child(child)
        state.dedent()
        state.write_line(f"</{shape.tag}>")

    def _render_attributes(self, shape: ElementShape) -> None:
        # Attribute names are written verbatim
        for name, value in shape.attributes.items():
            text = format_attribute_value(name, value, shape.attributes)
            self.state.write(f' {name}="{escape_attribute(text)}"')
            self.metrics.attributes_rendered += 1

    def _close_childless(self, shape: ElementShape) -> None:
        if shape.lowered_tag in VOID_ELEMENTS:
            self.state.write(" />\n")
            self.metrics.void_elements_rendered += 1
        else:
            self.state.write(f"></{shape.tag}>\n")

    def _render_pre_content(self, shape: ElementShape) -> None:
        children = shape.children
        if len(children) != 1 or not isinstance(children[0], str):
            raise InvalidPreContentError(
                f"<{shape.tag}> element must contain exactly one child, and the "
                f"child must be a string; got {describe(list(children))}",
                children,
            )
        self.state.write(escape_text(children[0]))
        self.state.write(f"</{shape.tag}>\n")
        self.metrics.text_nodes_rendered += 1

    def _render_child(self, child: Any) -> None:
        kind = classify_content(child)
        if kind is ContentKind.TEXT:
            self.state.write_line(escape_text(child))
            self.metrics.text_nodes_rendered += 1
        elif kind is ContentKind.NUMBER:
            self.state.write_line(format_number(child))
            self.metrics.text_nodes_rendered += 1
        elif kind in (ContentKind.ELEMENT, ContentKind.GENERATOR):
            self.render_shape(resolve_element(child, self.factory))
        else:
            raise InvalidElementTypeError(
                "Child value has incompatible type; expected a string, number, "
                f"list, tuple or callable, got {describe(child)}",
                child,
            )
