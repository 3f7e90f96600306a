"""Render API with progressive disclosure for seq2html.

Level 1 is the module-level :func:`render` function (plus the mode-specific
:func:`render_string` and :func:`render_tree`). Level 2 is the
:class:`HTMLRenderer` class, which keeps a configuration and a correlation ID
across calls and can return metrics alongside the output.
"""

import logging
import time
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple, Union

from seq2html.elements.shape import TagFactory, tags
from seq2html.rendering.markup import MarkupRenderer
from seq2html.rendering.tree import TreeBuilder
from seq2html.rendering.writer import RenderState
from seq2html.shared import (
    InvalidElementTypeError,
    OutputMode,
    RenderConfig,
    RenderError,
    RenderMetrics,
    RenderResult,
    TooManyArgumentsError,
    TrailingArgumentsError,
    get_logger,
)
from seq2html.tree.factories import get_tree_factory

ConfigInput = Union[RenderConfig, Mapping[str, Any], None]

MS_PER_SECOND = 1000  # Milliseconds per second conversion


def normalize_arguments(
    args: Sequence[Any],
    overrides: Optional[Dict[str, Any]] = None
) -> Tuple[RenderConfig, Tuple[Any, ...]]:
    """Split positional arguments into a configuration and content items.

    A leading :class:`RenderConfig` or plain mapping is the configuration;
    content items are never mappings, so the two cannot be confused.
    Keyword overrides are applied on top of the configuration.

    Args:
        args: Positional arguments of a render call
        overrides: Keyword arguments naming RenderConfig fields

    Returns:
        Tuple of resolved configuration and content items
    """
    if args and isinstance(args[0], (RenderConfig, Mapping)):
        config = RenderConfig.coerce(args[0])
        content = tuple(args[1:])
    else:
        config = RenderConfig()
        content = tuple(args)

    if overrides:
        config = config.override(**overrides)
    return config, content


class HTMLRenderer:
    """Configured renderer for element descriptions.

    Examples:
        >>> renderer = HTMLRenderer({"indent_unit": "    "})
        >>> print(renderer.render(["ul", ["li", "one"]]), end="")
        <ul>
            <li>
                one
            </li>
        </ul>
    """

    def __init__(
        self,
        config: ConfigInput = None,
        correlation_id: Optional[str] = None,
        factory: TagFactory = tags
    ) -> None:
        """Initialize renderer.

        Args:
            config: RenderConfig or mapping of options (defaults when None)
            correlation_id: Optional correlation ID for request tracking
            factory: Tag factory handed to element generators
        """
        self.config = RenderConfig.coerce(config)
        self.correlation_id = correlation_id
        self.factory = factory
        self.logger = get_logger(__name__, correlation_id, "renderer")

    def render(self, *content: Any) -> Any:
        """Render content in the configured output mode."""
        return self._run(self.config, content).output

    def render_string(self, *content: Any) -> str:
        """Render content to markup text regardless of the configured mode."""
        config = self.config.override(output_mode=OutputMode.STRING)
        return self._run(config, content).output

    def render_tree(self, content: Any) -> Any:
        """Build a document tree regardless of the configured mode."""
        config = self.config.override(output_mode=OutputMode.TREE)
        return self._run(config, (content,)).output

    def render_with_result(self, *content: Any) -> RenderResult:
        """Render content and return the output together with metrics."""
        return self._run(self.config, content)

    def _run(self, config: RenderConfig, content: Tuple[Any, ...]) -> RenderResult:
        start_time = time.time()
        self.logger.debug(
            "Starting render operation",
            extra={
                "output_mode": config.output_mode.value,
                "content_count": len(content),
            }
        )

        metrics = RenderMetrics()
        try:
            if config.is_tree_mode:
                output = self._build_tree(config, content, metrics)
            else:
                output = self._render_markup(config, content, metrics)
        except RenderError as e:
            self.logger.debug(
                "Render operation failed",
                extra={"error_type": type(e).__name__}
            )
            raise

        metrics.processing_time_ms = (time.time() - start_time) * MS_PER_SECOND
        if self.logger.is_enabled_for(logging.DEBUG):
            self.logger.debug(
                "Render operation completed",
                extra={
                    "elements_rendered": metrics.elements_rendered,
                    "output_length": metrics.output_length,
                    "processing_time_ms": metrics.processing_time_ms,
                }
            )

        return RenderResult(
            output=output,
            output_mode=config.output_mode,
            metrics=metrics,
            correlation_id=self.correlation_id,
        )

    def _render_markup(
        self,
        config: RenderConfig,
        content: Tuple[Any, ...],
        metrics: RenderMetrics
    ) -> str:
        if not content:
            raise InvalidElementTypeError("No content given to render", None)
        if config.single_root and len(content) > 1:
            raise TrailingArgumentsError(
                f"Unexpected trailing arguments: {len(content) - 1} after the "
                "root element",
                content[1:],
            )

        state = RenderState(config.indent_unit, config.indent_depth)
        doctype = config.doctype_declaration
        if doctype:
            state.write(doctype)

        renderer = MarkupRenderer(state, self.factory, metrics)
        for item in content:
            renderer.visit(item)
        return renderer.finish()

    def _build_tree(
        self,
        config: RenderConfig,
        content: Tuple[Any, ...],
        metrics: RenderMetrics
    ) -> Any:
        if len(content) != 1:
            raise TooManyArgumentsError(
                "Tree output takes exactly one content argument, "
                f"got {len(content)}",
                content,
            )

        builder = TreeBuilder(
            get_tree_factory(config.tree_factory), self.factory, metrics
        )
        builder.visit(content[0])
        return builder.finish()


def render(*args: Any, **overrides: Any) -> Any:
    """Render element descriptions to markup text or a document tree.

    The first positional argument may be a configuration (a RenderConfig or a
    mapping of its fields); all other positionals are content items. Keyword
    arguments override configuration fields.

    Args:
        *args: Optional configuration followed by content items
        **overrides: RenderConfig fields to override

    Returns:
        Markup text in string mode, the root node in tree mode

    Examples:
        >>> render(["div", {"id": "x", "n": 5}, "hi"])
        '<div id="x" n="5">\\n  hi\\n</div>\\n'
        >>> render(["br"])
        '<br />\\n'
        >>> render({"doctype": True}, ["html"])
        '<!DOCTYPE html>\\n<html></html>\\n'
    """
    config, content = normalize_arguments(args, overrides)
    return HTMLRenderer(config).render(*content)


def render_string(*args: Any, **overrides: Any) -> str:
    """Render element descriptions to markup text."""
    config, content = normalize_arguments(args, overrides)
    return HTMLRenderer(config).render_string(*content)


def render_tree(*args: Any, **overrides: Any) -> Any:
    """Build a document tree from a single element description."""
    config, content = normalize_arguments(args, overrides)
    config = config.override(output_mode=OutputMode.TREE)
    return HTMLRenderer(config).render(*content)
