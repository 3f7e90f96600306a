"""Document-tree construction backends for tree-mode rendering.

A :class:`TreeFactory` exposes the four primitives the tree builder needs:
create an element, set an attribute, create a text node and append a child.
Three backends are provided and registered by name:

    nodes:        seq2html.tree.nodes.Element / Text (default)
    elementtree:  xml.etree.ElementTree elements
    lxml:         lxml.etree elements

ElementTree-style backends have no text node type; text is stored in the
parent's ``text`` or in the previous child's ``tail``.
"""

import difflib
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Type

from seq2html.shared.config import ConfigError, ConfigValidationError
from seq2html.tree.nodes import Element, Text


@dataclass
class FactoryMetadata:
    """Metadata describing a tree factory."""

    name: str
    target_library: str
    description: str


class TreeFactory(ABC):
    """Abstract base class for document-tree construction backends."""

    @property
    @abstractmethod
    def metadata(self) -> FactoryMetadata:
        """Get factory metadata."""

    def is_available(self) -> bool:
        """Check if the backing library can be imported."""
        return True

    @abstractmethod
    def create_element(self, tag: str) -> Any:
        """Create an element node for ``tag``."""

    @abstractmethod
    def set_attribute(self, node: Any, name: str, value: str) -> None:
        """Set an attribute on an element node."""

    @abstractmethod
    def create_text(self, data: str) -> Any:
        """Create a text node."""

    @abstractmethod
    def append_child(self, parent: Any, child: Any) -> None:
        """Append an element or text node to ``parent``."""


class NodeTreeFactory(TreeFactory):
    """Builds the package's own Element/Text tree."""

    @property
    def metadata(self) -> FactoryMetadata:
        return FactoryMetadata(
            name="nodes",
            target_library="seq2html.tree.nodes",
            description="Element and Text dataclasses with parent links",
        )

    def create_element(self, tag: str) -> Element:
        return Element(tag=tag)

    def set_attribute(self, node: Element, name: str, value: str) -> None:
        node.set_attribute(name, value)

    def create_text(self, data: str) -> Text:
        return Text(data)

    def append_child(self, parent: Element, child: Any) -> None:
        parent.append_child(child)


class _EtreeStyleFactory(TreeFactory):
    """Shared text/tail handling for ElementTree-compatible libraries."""

    @abstractmethod
    def _etree(self) -> Any:
        """Return the ElementTree-compatible module used to create elements."""

    def create_element(self, tag: str) -> Any:
        return self._etree().Element(tag)

    def set_attribute(self, node: Any, name: str, value: str) -> None:
        node.set(name, value)

    def create_text(self, data: str) -> str:
        return data

    def append_child(self, parent: Any, child: Any) -> None:
        if not isinstance(child, str):
            parent.append(child)
            return

        # Text after the last child element lives in that child's tail
        if len(parent):
            last = parent[-1]
            last.tail = (last.tail or "") + child
        else:
            parent.text = (parent.text or "") + child


class ElementTreeFactory(_EtreeStyleFactory):
    """Builds xml.etree.ElementTree elements."""

    @property
    def metadata(self) -> FactoryMetadata:
        return FactoryMetadata(
            name="elementtree",
            target_library="xml.etree.ElementTree",
            description="Standard library ElementTree elements",
        )

    def _etree(self) -> Any:
        import xml.etree.ElementTree as ET
        return ET


class LxmlTreeFactory(_EtreeStyleFactory):
    """Builds lxml.etree elements.

    lxml validates tag and attribute names as XML names, so names the other
    backends accept (``"my tag"``, ``"1x"``) make lxml raise its own
    ``ValueError`` from ``create_element`` or ``set_attribute``.
    """

    @property
    def metadata(self) -> FactoryMetadata:
        return FactoryMetadata(
            name="lxml",
            target_library="lxml",
            description="lxml.etree elements",
        )

    def is_available(self) -> bool:
        """Check if lxml is available."""
        try:
            import lxml.etree  # noqa: F401
            return True
        except ImportError:
            return False

    def _etree(self) -> Any:
        import lxml.etree
        return lxml.etree


class TreeFactoryRegistry:
    """Registry of tree factories by name."""

    def __init__(self) -> None:
        self._factories: Dict[str, Type[TreeFactory]] = {}

    def register(self, name: str, factory_class: Type[TreeFactory]) -> None:
        """Register a factory class under ``name``."""
        if not issubclass(factory_class, TreeFactory):
            raise TypeError("Factory class must inherit from TreeFactory")
        self._factories[name] = factory_class

    def get(self, name: str) -> TreeFactory:
        """Instantiate the factory registered under ``name``.

        Raises:
            ConfigValidationError: If no factory has that name
            ConfigError: If the factory's library is not installed
        """
        factory_class = self._factories.get(name)
        if factory_class is None:
            raise ConfigValidationError(
                f"Unknown tree factory: {name!r}",
                field_name="tree_factory",
                suggestions=difflib.get_close_matches(name, list(self._factories)),
            )

        factory = factory_class()
        if not factory.is_available():
            raise ConfigError(
                f"Tree factory {name!r} requires {factory.metadata.target_library}, "
                "which is not installed"
            )
        return factory

    def names(self) -> List[str]:
        """List registered factory names."""
        return sorted(self._factories)


_registry = TreeFactoryRegistry()
_registry.register("nodes", NodeTreeFactory)
_registry.register("elementtree", ElementTreeFactory)
_registry.register("lxml", LxmlTreeFactory)


def register_tree_factory(name: str, factory_class: Type[TreeFactory]) -> None:
    """Register a tree factory in the global registry."""
    _registry.register(name, factory_class)


def get_tree_factory(name: Optional[str] = None) -> TreeFactory:
    """Get a tree factory instance by name (default: ``nodes``)."""
    return _registry.get(name or "nodes")


def list_tree_factories() -> List[str]:
    """List names of all registered tree factories."""
    return _registry.names()
