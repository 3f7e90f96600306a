"""seq2html.

Renders markup from nested Python lists, dicts and callables, either as
indented HTML text or as an in-memory document tree.

Progressive API Disclosure:
- Level 1: Simple functions - render(), render_string(), render_tree()
- Level 2: Configured renderer - HTMLRenderer class with metrics
"""

__version__ = "0.1.0"
__author__ = "seq2html Team"

# Progressive API disclosure - Level 1: Simple functions
# Progressive API disclosure - Level 2: Configured renderer
from .api import HTMLRenderer, render, render_string, render_tree

# Building blocks for element descriptions
from .elements import element, tags
from .rendering import escape_attribute, escape_text

# Configuration and result objects
from .shared import (
    EmptyElementError,
    InvalidAttributeTypeError,
    InvalidElementTypeError,
    InvalidPreContentError,
    OutputMode,
    RenderConfig,
    RenderError,
    RenderResult,
    TooManyArgumentsError,
    TrailingArgumentsError,
    UnsupportedChildTypeError,
)
from .tree import Element, Text

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Level 1: Simple render functions
    "render",
    "render_string",
    "render_tree",

    # Level 2: Configured renderer
    "HTMLRenderer",

    # Element description helpers
    "element",
    "tags",
    "escape_text",
    "escape_attribute",

    # Configuration, results and document tree
    "OutputMode",
    "RenderConfig",
    "RenderResult",
    "Element",
    "Text",

    # Errors
    "RenderError",
    "EmptyElementError",
    "InvalidAttributeTypeError",
    "InvalidElementTypeError",
    "InvalidPreContentError",
    "TooManyArgumentsError",
    "TrailingArgumentsError",
    "UnsupportedChildTypeError",
]
