#!/usr/bin/env python3
"""
Quick Start Guide for seq2html.

This example walks through string rendering, element generators, tree output
and render metrics.
"""

import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from seq2html import HTMLRenderer, RenderConfig, RenderError, render, render_tree


def page(title, items):
    """Describe a small page as nested lists."""
    return [
        "html", {"lang": "en"},
        ["head",
            ["meta", {"charset": "utf-8"}],
            ["title", title]],
        ["body",
            ["h1", title],
            ["ul", *[["li", item] for item in items]],
            lambda h: h.p({"class": "footer"}, "Generated by seq2html"),
            ["pre", "if a < b:\n    print(a)"]],
    ]


def quick_start_example():
    """Quick start example showing basic usage."""

    print("QUICK START - seq2html")
    print("=" * 30)

    # Step 1: Render a complete document
    print("\nStep 1: Rendering a document")
    print("-" * 30)
    print(render(RenderConfig.html_document(), page("Fruit", ["apple", "pear"])), end="")

    # Step 2: Build a tree instead of text
    print("\nStep 2: Building a document tree")
    print("-" * 30)
    root = render_tree(page("Fruit", ["apple", "pear"]))
    print(f"List items: {[li.text_content for li in root.find_all('li')]}")
    print(f"Footer path: {root.find_by_attribute('class', 'footer')[0].get_path()}")

    # Step 3: Render with metrics
    print("\nStep 3: Render metrics")
    print("-" * 30)
    renderer = HTMLRenderer({"indent_unit": "\t"}, correlation_id="quick-start")
    result = renderer.render_with_result(page("Metrics", ["one", "two", "three"]))
    print(f"Elements: {result.metrics.elements_rendered}")
    print(f"Max depth: {result.metrics.max_depth}")
    print(f"Output length: {result.metrics.output_length}")

    # Step 4: Invalid descriptions raise typed errors
    print("\nStep 4: Error handling")
    print("-" * 30)
    for description in (["pre", "x", "y"], ["div", {"x": None}], []):
        try:
            render(description)
        except RenderError as e:
            print(f"{type(e).__name__}: {e}")


if __name__ == "__main__":
    quick_start_example()
