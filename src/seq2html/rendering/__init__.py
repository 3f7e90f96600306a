"""Rendering of resolved element shapes.

Key Components:
    RenderState: Output buffer and indentation depth for string mode
    ElementVisitor: Common interface of both output modes
    MarkupRenderer: Indented markup text output
    TreeBuilder: Document tree output
"""

from .markup import (
    VOID_ELEMENTS,
    MarkupRenderer,
    escape_attribute,
    escape_text,
    is_void_element,
)
from .tree import TreeBuilder
from .visitor import ElementVisitor, format_attribute_value, format_number
from .writer import RenderState

__all__ = [
    "VOID_ELEMENTS",
    "MarkupRenderer",
    "escape_attribute",
    "escape_text",
    "is_void_element",
    "TreeBuilder",
    "ElementVisitor",
    "format_attribute_value",
    "format_number",
    "RenderState",
]
