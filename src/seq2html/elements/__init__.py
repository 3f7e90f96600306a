"""Element description handling.

Key Components:
    ContentKind: Classification of content items
    ElementShape: Normalized tag/attributes/children triple
    TagFactory: Tag-description builder handed to element generators
    resolve_element: Turns a content item into an ElementShape
"""

from .shape import (
    ContentKind,
    ElementShape,
    TagFactory,
    classify_content,
    element,
    resolve_element,
    tags,
)

__all__ = [
    "ContentKind",
    "ElementShape",
    "TagFactory",
    "classify_content",
    "element",
    "resolve_element",
    "tags",
]
