"""Document tree support for tree-mode rendering.

Key Components:
    Element: Element node with attributes, children and navigation
    Text: Text node
    TreeFactory: Construction primitives used by the tree builder
"""

from .factories import (
    ElementTreeFactory,
    FactoryMetadata,
    LxmlTreeFactory,
    NodeTreeFactory,
    TreeFactory,
    get_tree_factory,
    list_tree_factories,
    register_tree_factory,
)
from .nodes import Element, Text

__all__ = [
    "Element",
    "Text",
    "ElementTreeFactory",
    "FactoryMetadata",
    "LxmlTreeFactory",
    "NodeTreeFactory",
    "TreeFactory",
    "get_tree_factory",
    "list_tree_factories",
    "register_tree_factory",
]
