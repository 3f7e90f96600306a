"""Result objects and metrics for seq2html render operations.

Visitors count what they emit into a :class:`RenderMetrics` instance; the
configured renderer wraps the output and the metrics into a
:class:`RenderResult`.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from seq2html.shared.config import OutputMode


@dataclass
class RenderMetrics:
    """Counters collected while walking element descriptions."""

    elements_rendered: int = 0
    text_nodes_rendered: int = 0
    attributes_rendered: int = 0
    void_elements_rendered: int = 0
    max_depth: int = 0
    output_length: int = 0
    processing_time_ms: float = 0.0

    def record_element(self, depth: int) -> None:
        """Count an element found at the given nesting depth (root = 0)."""
        self.elements_rendered += 1
        if depth > self.max_depth:
            self.max_depth = depth

    @property
    def nodes_rendered(self) -> int:
        """Get total number of element and text nodes."""
        return self.elements_rendered + self.text_nodes_rendered

    @property
    def elements_per_second(self) -> float:
        """Calculate elements rendered per second."""
        if self.processing_time_ms <= 0:
            return 0.0
        return (self.elements_rendered * 1000.0) / self.processing_time_ms


@dataclass
class RenderResult:
    """Output of a render call together with its metrics."""

    output: Any
    output_mode: OutputMode = OutputMode.STRING
    metrics: RenderMetrics = field(default_factory=RenderMetrics)
    correlation_id: Optional[str] = None

    @property
    def text(self) -> str:
        """Get the rendered markup; only valid for string output."""
        if self.output_mode is not OutputMode.STRING:
            raise ValueError("Result holds a document tree, not markup text")
        return self.output

    @property
    def tree(self) -> Any:
        """Get the root node; only valid for tree output."""
        if self.output_mode is not OutputMode.TREE:
            raise ValueError("Result holds markup text, not a document tree")
        return self.output

    def to_dict(self) -> Dict[str, Any]:
        """Convert the result metadata to a dictionary (without the output)."""
        return {
            "output_mode": self.output_mode.value,
            "correlation_id": self.correlation_id,
            "elements_rendered": self.metrics.elements_rendered,
            "text_nodes_rendered": self.metrics.text_nodes_rendered,
            "attributes_rendered": self.metrics.attributes_rendered,
            "void_elements_rendered": self.metrics.void_elements_rendered,
            "max_depth": self.metrics.max_depth,
            "output_length": self.metrics.output_length,
            "processing_time_ms": self.metrics.processing_time_ms,
        }
