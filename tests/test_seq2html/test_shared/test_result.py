"""Tests for render metrics and result objects."""

import pytest

from seq2html.shared.config import OutputMode
from seq2html.shared.result import RenderMetrics, RenderResult


class TestRenderMetrics:
    """Test suite for RenderMetrics."""

    def test_record_element_tracks_max_depth(self):
        """Test that recording elements updates count and depth."""
        metrics = RenderMetrics()

        metrics.record_element(0)
        metrics.record_element(2)
        metrics.record_element(1)

        assert metrics.elements_rendered == 3
        assert metrics.max_depth == 2

    def test_nodes_rendered(self):
        """Test the combined node count."""
        metrics = RenderMetrics(elements_rendered=2, text_nodes_rendered=3)

        assert metrics.nodes_rendered == 5

    def test_elements_per_second(self):
        """Test throughput calculation and its zero-time guard."""
        assert RenderMetrics(elements_rendered=10).elements_per_second == 0.0
        metrics = RenderMetrics(elements_rendered=10, processing_time_ms=2.0)
        assert metrics.elements_per_second == 5000.0


class TestRenderResult:
    """Test suite for RenderResult."""

    def test_text_access(self):
        """Test text access on string results."""
        result = RenderResult(output="<br />\n")

        assert result.text == "<br />\n"
        with pytest.raises(ValueError, match="markup text"):
            result.tree

    def test_tree_access(self):
        """Test tree access on tree results."""
        node = object()
        result = RenderResult(output=node, output_mode=OutputMode.TREE)

        assert result.tree is node
        with pytest.raises(ValueError, match="document tree"):
            result.text

    def test_to_dict(self):
        """Test metadata dictionary."""
        result = RenderResult(
            output="x",
            metrics=RenderMetrics(elements_rendered=1, output_length=1),
            correlation_id="req-1",
        )

        data = result.to_dict()

        assert data["output_mode"] == "string"
        assert data["correlation_id"] == "req-1"
        assert data["elements_rendered"] == 1
        assert "output" not in data
