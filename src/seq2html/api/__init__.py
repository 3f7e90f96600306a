"""Public render API for seq2html."""

from .renderer import (
    HTMLRenderer,
    normalize_arguments,
    render,
    render_string,
    render_tree,
)

__all__ = [
    "HTMLRenderer",
    "normalize_arguments",
    "render",
    "render_string",
    "render_tree",
]
