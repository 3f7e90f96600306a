"""Tree-mode rendering: element descriptions into document nodes.

Mirrors :mod:`seq2html.rendering.markup` but calls the construction
primitives of a :class:`~seq2html.tree.factories.TreeFactory` instead of
writing text. There is no indentation and no void or ``pre`` special casing.
"""

from typing import Any, Optional

from seq2html.elements.shape import (
    ContentKind,
    ElementShape,
    TagFactory,
    classify_content,
    describe,
    tags,
)
from seq2html.rendering.visitor import (
    ElementVisitor,
    format_attribute_value,
    format_number,
)
from seq2html.shared.errors import InvalidElementTypeError, UnsupportedChildTypeError
from seq2html.shared.result import RenderMetrics
from seq2html.tree.factories import TreeFactory, get_tree_factory


class TreeBuilder(ElementVisitor):
    """Builds one document tree per visited content item."""

    def __init__(
        self,
        tree_factory: Optional[TreeFactory] = None,
        factory: TagFactory = tags,
        metrics: Optional[RenderMetrics] = None
    ) -> None:
        super().__init__(factory, metrics)
        self.tree_factory = tree_factory or get_tree_factory()
        self.root: Any = None

    def visit(self, item: Any) -> Any:
        """Build and remember the tree for a top-level content item."""
        self.root = self.build_shape(self._resolve(item), 0)
        return self.root

    def finish(self) -> Any:
        return self.root

    def build_shape(self, shape: ElementShape, depth: int) -> Any:
        """Create the node for one resolved element and its subtree."""
        self.metrics.record_element(depth)
        node = self.tree_factory.create_element(shape.tag)

        if shape.attributes is not None:
            for name, value in shape.attributes.items():
                text = format_attribute_value(name, value, shape.attributes)
                self.tree_factory.set_attribute(node, name, text)
                self.metrics.attributes_rendered += 1

        for child in shape.children:
            self.tree_factory.append_child(node, self._build_child(child, depth + 1))

        return node

    def _build_child(self, child: Any, depth: int) -> Any:
        kind = classify_content(child)
        if kind is ContentKind.TEXT:
            self.metrics.text_nodes_rendered += 1
            return self.tree_factory.create_text(child)
        if kind is ContentKind.NUMBER:
            self.metrics.text_nodes_rendered += 1
            return self.tree_factory.create_text(format_number(child))
        if kind in (ContentKind.ELEMENT, ContentKind.GENERATOR):
            return self.build_shape(self._resolve(child), depth)
        raise _unsupported(child)

    def _resolve(self, item: Any) -> ElementShape:
        # Generators are called exactly once; their result is not called again
        produced = item
        if classify_content(item) is ContentKind.GENERATOR:
            produced = item(self.factory)

        kind = classify_content(produced)
        if kind is ContentKind.ELEMENT:
            return ElementShape.from_sequence(produced)
        if kind in (ContentKind.UNSUPPORTED, ContentKind.ATTRIBUTES):
            raise _unsupported(produced)
        raise InvalidElementTypeError(
            "Expected a list, tuple or a callable returning one, "
            f"got {describe(produced)}",
            produced,
        )


def _unsupported(value: Any) -> UnsupportedChildTypeError:
    return UnsupportedChildTypeError(
        f"Cannot convert {describe(value)} into a tree node; expected "
        "a string, number, list, tuple or callable",
        value,
    )
