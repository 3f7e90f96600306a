"""Built-in document tree produced by tree-mode rendering.

The tree has two node types: :class:`Element` (tag, attributes, children) and
:class:`Text`. Children keep a reference to their parent so that depth and
path queries work on any node.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Union


@dataclass(eq=False)
class Text:
    """Text node holding unescaped character data."""

    data: str
    parent: Optional["Element"] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.data, str):
            raise TypeError("Text data must be a string")

    @property
    def text_content(self) -> str:
        """Get the text of this node."""
        return self.data

    def to_dict(self) -> Dict[str, Any]:
        """Convert text node to dictionary representation."""
        return {"text": self.data}


Node = Union["Element", Text]


@dataclass(eq=False)
class Element:
    """Represents a single element in the document tree.

    Provides attribute access, child management, text extraction and
    tree navigation.
    """

    tag: str
    attributes: Dict[str, str] = field(default_factory=dict)
    children: List[Node] = field(default_factory=list)
    parent: Optional["Element"] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        """Establish parent relationships for existing children."""
        for child in self.children:
            child.parent = self

    @property
    def element_children(self) -> List["Element"]:
        """Get direct children that are elements."""
        return [child for child in self.children if isinstance(child, Element)]

    @property
    def text_content(self) -> str:
        """Get all text content of this element and its descendants."""
        return "".join(child.text_content for child in self.children)

    def append_child(self, child: Node) -> None:
        """Add a child node and establish parent relationship."""
        if not isinstance(child, (Element, Text)):
            raise TypeError("Child must be an Element or Text instance")

        child.parent = self
        self.children.append(child)

    def insert_child(self, index: int, child: Node) -> None:
        """Insert child node at specific index."""
        if not isinstance(child, (Element, Text)):
            raise TypeError("Child must be an Element or Text instance")
        if not (0 <= index <= len(self.children)):
            raise IndexError("Child index out of range")

        child.parent = self
        self.children.insert(index, child)

    def remove_child(self, child: Node) -> bool:
        """Remove a child node and clear parent relationship."""
        for position, existing in enumerate(self.children):
            if existing is child:
                del self.children[position]
                child.parent = None
                return True
        return False

    def get_attribute(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Get attribute value with optional default."""
        return self.attributes.get(name, default)

    def set_attribute(self, name: str, value: str) -> None:
        """Set attribute value."""
        if not isinstance(name, str) or not isinstance(value, str):
            raise TypeError("Attribute name and value must be strings")
        self.attributes[name] = value

    def has_attribute(self, name: str) -> bool:
        """Check if element has specific attribute."""
        return name in self.attributes

    def iter_elements(self) -> Iterator["Element"]:
        """Iterate over this element and all descendant elements in document order."""
        yield self
        for child in self.element_children:
            yield from child.iter_elements()

    def find(self, tag: str) -> Optional["Element"]:
        """Find first descendant element with matching tag name."""
        return next(
            (elem for elem in self.iter_elements() if elem is not self and elem.tag == tag),
            None,
        )

    def find_all(self, tag: str) -> List["Element"]:
        """Find all descendant elements with matching tag name."""
        return [
            elem for elem in self.iter_elements() if elem is not self and elem.tag == tag
        ]

    def find_by_attribute(
        self, name: str, value: Optional[str] = None
    ) -> List["Element"]:
        """Find elements (including this one) by attribute name and optionally value."""
        return [
            elem for elem in self.iter_elements()
            if name in elem.attributes
            and (value is None or elem.attributes[name] == value)
        ]

    def get_depth(self) -> int:
        """Get depth of this element in the tree (root = 0)."""
        if self.parent is None:
            return 0
        return self.parent.get_depth() + 1

    def get_path(self) -> str:
        """Get XPath-like path to this element."""
        if self.parent is None:
            return f"/{self.tag}"

        parent_path = self.parent.get_path()
        siblings = [child for child in self.parent.element_children if child.tag == self.tag]
        if len(siblings) > 1:
            position = next(
                index for index, sibling in enumerate(siblings, 1) if sibling is self
            )
            return f"{parent_path}/{self.tag}[{position}]"

        return f"{parent_path}/{self.tag}"

    def to_description(self) -> List[Any]:
        """Convert the subtree back into a tag description.

        The attribute map is only included when the element has attributes,
        so rendering the description reproduces the element.
        """
        description: List[Any] = [self.tag]
        if self.attributes:
            description.append(dict(self.attributes))
        for child in self.children:
            if isinstance(child, Text):
                description.append(child.data)
            else:
                description.append(child.to_description())
        return description

    def to_dict(self) -> Dict[str, Any]:
        """Convert element to dictionary representation."""
        result: Dict[str, Any] = {
            "tag": self.tag,
            "attributes": dict(self.attributes),
        }

        if self.children:
            result["children"] = [child.to_dict() for child in self.children]

        return result
