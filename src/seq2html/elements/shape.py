"""Element-shape resolution for seq2html content descriptions.

A content item is classified once into a :class:`ContentKind`. Items of kind
ELEMENT (a list or tuple) and GENERATOR (a callable returning one) are then
normalized into an :class:`ElementShape`: tag name, optional attribute map
and children. Only the second position of a description is inspected for an
attribute map; a mapping anywhere else is an ordinary child.
"""

import numbers
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Callable, List, Optional, Tuple

from seq2html.shared.errors import EmptyElementError, InvalidElementTypeError

# Limit for offending values quoted in error messages
_REPR_LIMIT = 80


class ContentKind(Enum):
    """Kinds of content item accepted in an element description."""

    ELEMENT = auto()      # list/tuple: [tag, attributes?, *children]
    GENERATOR = auto()    # callable receiving the tag factory
    ATTRIBUTES = auto()   # mapping of attribute names to values
    TEXT = auto()         # str
    NUMBER = auto()       # int/float/other real numbers, never bool
    UNSUPPORTED = auto()  # anything else


def classify_content(item: Any) -> ContentKind:
    """Decide which kind of content an item is."""
    if isinstance(item, str):
        return ContentKind.TEXT
    if isinstance(item, bool):
        return ContentKind.UNSUPPORTED
    if isinstance(item, numbers.Real):
        return ContentKind.NUMBER
    if isinstance(item, Mapping):
        return ContentKind.ATTRIBUTES
    if isinstance(item, Sequence) and not isinstance(item, (bytes, bytearray)):
        return ContentKind.ELEMENT
    if callable(item):
        return ContentKind.GENERATOR
    return ContentKind.UNSUPPORTED


def describe(value: Any) -> str:
    """Short repr of a value for error messages."""
    text = repr(value)
    if len(text) > _REPR_LIMIT:
        text = text[:_REPR_LIMIT - 3] + "..."
    return text


@dataclass(frozen=True)
class ElementShape:
    """Normalized element: tag name, optional attributes and children."""

    tag: str
    attributes: Optional[Mapping] = None
    children: Tuple[Any, ...] = ()

    @property
    def lowered_tag(self) -> str:
        """Get the tag name in lower case for void/pre lookups."""
        return self.tag.lower()

    @property
    def is_childless(self) -> bool:
        """Check if the element has no children."""
        return not self.children

    @classmethod
    def from_sequence(cls, description: Sequence) -> "ElementShape":
        """Split a tag description into tag, attribute map and children.

        Args:
            description: Sequence starting with the tag name

        Returns:
            ElementShape for the description

        Raises:
            EmptyElementError: If the sequence has no entries
            InvalidElementTypeError: If the tag name is not a string
        """
        items = tuple(description)
        if not items:
            raise EmptyElementError(
                "An empty sequence cannot be converted into an element", items
            )

        tag = items[0]
        if not isinstance(tag, str):
            raise InvalidElementTypeError(
                f"Tag name must be a string, got {describe(tag)} in {describe(items)}",
                tag,
            )

        if len(items) >= 2 and classify_content(items[1]) is ContentKind.ATTRIBUTES:
            return cls(tag=tag, attributes=items[1], children=items[2:])
        return cls(tag=tag, attributes=None, children=items[1:])


class TagFactory:
    """Builds tag descriptions; handed to element generators.

    Any string is a valid tag name::

        >>> tags("div", {"id": "x"}, "hi")
        ['div', {'id': 'x'}, 'hi']
        >>> tags.span("hi")
        ['span', 'hi']

    A single trailing underscore is dropped from attribute-style names so that
    Python keywords remain reachable (``tags.del_`` builds ``del``). Names
    with a leading underscore are never tags.
    """

    def __call__(self, tag: str, *rest: Any) -> List[Any]:
        return element(tag, *rest)

    def __getattr__(self, name: str) -> Callable[..., List[Any]]:
        if name.startswith("_"):
            raise AttributeError(name)
        tag = name[:-1] if name.endswith("_") else name

        def build(*rest: Any) -> List[Any]:
            return element(tag, *rest)

        build.__name__ = name
        build.__qualname__ = f"TagFactory.{name}"
        return build

    def __repr__(self) -> str:
        return "TagFactory()"


def element(tag: str, *rest: Any) -> List[Any]:
    """Build a tag description from a tag name, optional attributes and children."""
    return [tag, *rest]


tags = TagFactory()


def resolve_element(item: Any, factory: TagFactory = tags) -> ElementShape:
    """Resolve a content item into an element shape.

    Args:
        item: Tag description or element generator
        factory: Tag factory passed to element generators

    Returns:
        ElementShape of the (possibly generated) description

    Raises:
        EmptyElementError: If the description is an empty sequence
        InvalidElementTypeError: If the item (or a generator's return value)
            is not a tag description
    """
    kind = classify_content(item)

    if kind is ContentKind.GENERATOR:
        produced = item(factory)
        if classify_content(produced) is not ContentKind.ELEMENT:
            raise InvalidElementTypeError(
                "Element generator must return a list or tuple, "
                f"got {describe(produced)}",
                produced,
            )
        return ElementShape.from_sequence(produced)

    if kind is ContentKind.ELEMENT:
        return ElementShape.from_sequence(item)

    raise InvalidElementTypeError(
        "Element value has incompatible type; expected a list, tuple or "
        f"callable, got {describe(item)}",
        item,
    )
